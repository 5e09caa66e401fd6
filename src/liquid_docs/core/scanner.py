"""Locate ``{% doc %}`` regions inside Liquid template source."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

from liquid_docs.models import Diagnostic

UNTERMINATED_BLOCK = "Unterminated block"

# `{%`, optional trim dash, whitespace, then the tag name (or `#` for inline comments)
_TAG_START = re.compile(r"\{%-?\s*(#|[A-Za-z_]\w*)")
_TAG_CLOSE = re.compile(r"\s*-?%\}")

_SKIPPED_REGIONS = {
    "comment": "endcomment",
    "raw": "endraw",
}


def locate(text: str, offset: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of a character offset in ``text``."""
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column


@dataclass(frozen=True)
class BlockSpan:
    """Interior of one documentation block.

    ``content`` is the text between the opening tag's ``%}`` and the closing
    tag's ``{%``; ``line``/``column`` locate its first character.
    """

    line: int
    column: int
    content: str


def _end_tag_pattern(name: str) -> re.Pattern[str]:
    return re.compile(r"\{%-?\s*" + name + r"(?!\w)", re.IGNORECASE)


_END_TAGS = {name: _end_tag_pattern(name) for name in ("enddoc", *_SKIPPED_REGIONS.values())}

# raw regions inside a doc block may contain a literal `{% enddoc %}`
_DOC_INNER_TAG = re.compile(r"\{%-?\s*(enddoc|raw)(?!\w)", re.IGNORECASE)


@dataclass
class BlockScanner:
    """Single pass over ``text`` yielding documentation block spans.

    Diagnostics for malformed blocks are appended to ``diagnostics`` while
    iterating; the scan itself never raises.
    """

    text: str
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def __iter__(self) -> Iterator[BlockSpan]:
        text = self.text
        pos = 0
        while True:
            match = _TAG_START.search(text, pos)
            if match is None:
                return
            name = match.group(1).lower()

            if name == "#":
                close = text.find("%}", match.end())
                pos = len(text) if close == -1 else close + 2
                continue

            if name in _SKIPPED_REGIONS:
                end = self._find_tag_end(_END_TAGS[_SKIPPED_REGIONS[name]], match.end())
                if end is None:
                    return
                pos = end
                continue

            if name != "doc":
                pos = match.end()
                continue

            opening = _TAG_CLOSE.match(text, match.end())
            if opening is None:
                self._unterminated(match.start())
                pos = match.end()
                continue

            closing = self._find_enddoc(opening.end())
            if closing is None:
                self._unterminated(match.start())
                return

            line, column = locate(text, opening.end())
            yield BlockSpan(line=line, column=column, content=text[opening.end() : closing.start()])

            after = _TAG_CLOSE.match(text, closing.end())
            pos = after.end() if after else closing.end()

    def _find_enddoc(self, pos: int) -> re.Match[str] | None:
        while True:
            tag = _DOC_INNER_TAG.search(self.text, pos)
            if tag is None or tag.group(1).lower() == "enddoc":
                return tag
            end = self._find_tag_end(_END_TAGS["endraw"], tag.end())
            if end is None:
                return None
            pos = end

    def _find_tag_end(self, pattern: re.Pattern[str], pos: int) -> int | None:
        tag = pattern.search(self.text, pos)
        if tag is None:
            return None
        close = self.text.find("%}", tag.end())
        return len(self.text) if close == -1 else close + 2

    def _unterminated(self, offset: int) -> None:
        line, column = locate(self.text, offset)
        self.diagnostics.append(Diagnostic(line=line, column=column, message=UNTERMINATED_BLOCK))
