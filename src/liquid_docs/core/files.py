import glob
from collections.abc import Iterable, Iterator
from pathlib import Path

from liquid_docs.models import FileInput

LIQUID_SUFFIX = ".liquid"


def _matching_brace(pattern: str, start: int) -> int:
    depth = 0
    for index in range(start, len(pattern)):
        if pattern[index] == "{":
            depth += 1
        elif pattern[index] == "}":
            depth -= 1
            if depth == 0:
                return index
    return -1


def _split_alternatives(body: str) -> list[str]:
    parts: list[str] = []
    depth = 0
    current = ""
    for ch in body:
        if ch == "," and depth == 0:
            parts.append(current)
            current = ""
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        current += ch
    parts.append(current)
    return parts


def expand_braces(pattern: str) -> list[str]:
    """Expand shell-style ``{a,b}`` alternatives, including nested ones."""
    start = pattern.find("{")
    if start == -1:
        return [pattern]
    end = _matching_brace(pattern, start)
    if end == -1:
        return [pattern]

    prefix, body, suffix = pattern[:start], pattern[start + 1 : end], pattern[end + 1 :]
    expanded: list[str] = []
    for alternative in _split_alternatives(body):
        expanded.extend(expand_braces(prefix + alternative + suffix))
    return expanded


def expand_pattern(pattern: str, root: str | Path | None = None) -> list[Path]:
    """Resolve a glob pattern (with ``**`` and ``{a,b}`` support) to template files.

    Relative patterns are matched against ``root`` (default: the working
    directory) and returned relative to it. A directory matches every
    ``.liquid`` file below it.
    """
    base = Path(root) if root is not None else Path.cwd()
    found: set[Path] = set()

    for candidate in expand_braces(pattern):
        target = Path(candidate)
        absolute = target if target.is_absolute() else base / target
        if absolute.is_dir():
            found.update(target / match.relative_to(absolute) for match in absolute.rglob(f"*{LIQUID_SUFFIX}"))
            continue
        for match in glob.glob(candidate, root_dir=base, recursive=True):
            if (base / match).is_file():
                found.add(Path(match))

    return sorted(found)


def read_files(paths: Iterable[Path], root: str | Path | None = None) -> Iterator[FileInput]:
    """Lazily read ``paths`` as UTF-8, keeping the path as given for reporting."""
    base = Path(root) if root is not None else Path.cwd()
    for path in paths:
        content = (base / path).read_text(encoding="utf-8", errors="replace")
        yield FileInput(path=path.as_posix(), content=content)
