"""Tests for locating {% doc %} blocks in template source."""

from __future__ import annotations

import pytest

from liquid_docs.core.scanner import UNTERMINATED_BLOCK, BlockScanner, locate
from liquid_docs.models import Diagnostic


def _contents(text: str) -> list[str]:
    return [span.content for span in BlockScanner(text)]


class TestLocate:
    def test_first_character(self) -> None:
        assert locate("abc", 0) == (1, 1)

    def test_same_line(self) -> None:
        assert locate("12345", 4) == (1, 5)

    def test_later_line(self) -> None:
        text = "first\nsecond\nthird 14"
        assert locate(text, text.index("14")) == (3, 7)

    def test_offset_just_after_newline(self) -> None:
        assert locate("a\nb", 2) == (2, 1)


class TestBlockDiscovery:
    def test_no_blocks(self) -> None:
        assert _contents("test") == []

    @pytest.mark.parametrize(
        "text",
        [
            "{% doc %}test{% enddoc %}test",
            "{%- doc %}test{% enddoc %}test",
            "{%- doc -%}test{% enddoc %}test",
            "{%- doc -%}test{%- enddoc %}test",
            "{%- doc -%}test{%- enddoc -%}test",
            "{%doc%}test{%enddoc%}test",
            "{% DOC %}test{% ENDDOC %}test",
        ],
    )
    def test_trim_markers_and_spacing(self, text: str) -> None:
        assert _contents(text) == ["test"]

    def test_whitespace_inside_markers_is_kept_out_of_content(self) -> None:
        assert _contents("{%       doc  %}  test {%  enddoc         %} test") == ["  test "]

    def test_multiple_blocks(self) -> None:
        text = "{% doc %}block1\n  line1\n  line2\n  line3\n\n{% enddoc %}test\n{% doc %}block2{% enddoc %}"
        assert _contents(text) == ["block1\n  line1\n  line2\n  line3\n\n", "block2"]

    def test_leading_newlines_are_content(self) -> None:
        assert _contents("{% doc %}\n\ntest{% enddoc %}\n\ntest") == ["\n\ntest"]

    def test_empty_block(self) -> None:
        assert _contents("{% doc %}{% enddoc %}") == [""]

    def test_other_tags_are_ignored(self) -> None:
        text = "{% if a %}{% render 'x' %}{% endif %}{% doc %}inside{% enddoc %}{% for x in y %}{% endfor %}"
        assert _contents(text) == ["inside"]

    def test_similar_tag_names_do_not_match(self) -> None:
        assert _contents("{% docs %}x{% enddoc %}") == []


class TestSkippedRegions:
    def test_comment_region(self) -> None:
        assert _contents("{% comment %}{% doc %}test{% enddoc %}{% endcomment %}test") == []

    def test_raw_region(self) -> None:
        assert _contents("{% raw %}{% doc %}test{% enddoc %}{% endraw %}test") == []

    def test_trimmed_comment_region(self) -> None:
        text = "{%- comment -%}{% doc %}no{% enddoc %}{%- endcomment -%}{% doc %}yes{% enddoc %}"
        assert _contents(text) == ["yes"]

    def test_inline_comment(self) -> None:
        assert _contents("{% # {% doc %} %}{% doc %}real{% enddoc %}") == ["real"]

    def test_unclosed_comment_swallows_rest(self) -> None:
        assert _contents("{% comment %}{% doc %}test{% enddoc %}") == []


class TestSpans:
    def test_span_position(self) -> None:
        (span,) = BlockScanner("<p>\n  {% doc %}abc{% enddoc %}")
        assert (span.line, span.column, span.content) == (2, 12, "abc")

    def test_scan_is_lazy(self) -> None:
        blocks = iter(BlockScanner("{% doc %}a{% enddoc %}{% doc %}b{% enddoc %}"))
        assert next(blocks).content == "a"
        assert next(blocks).content == "b"
        with pytest.raises(StopIteration):
            next(blocks)


class TestRawInsideDoc:
    def test_enddoc_inside_raw_is_content(self) -> None:
        text = "{% doc %}\n@example\n{% raw %}{% enddoc %}{% endraw %}\n{% enddoc %}after"
        assert _contents(text) == ["\n@example\n{% raw %}{% enddoc %}{% endraw %}\n"]

    def test_trimmed_raw_tags(self) -> None:
        text = "{% doc %}{%- raw -%}{%- enddoc -%}{%- endraw -%}{% enddoc %}{% doc %}next{% enddoc %}"
        assert _contents(text) == ["{%- raw -%}{%- enddoc -%}{%- endraw -%}", "next"]

    def test_unclosed_raw_leaves_block_unterminated(self) -> None:
        scanner = BlockScanner("{% doc %}{% raw %}{% enddoc %}")
        assert list(scanner) == []
        assert scanner.diagnostics == [Diagnostic(line=1, column=1, message=UNTERMINATED_BLOCK)]


class TestUnterminatedBlocks:
    def test_missing_enddoc(self) -> None:
        scanner = BlockScanner("\n  {% doc %}never closed")
        assert list(scanner) == []
        assert scanner.diagnostics == [Diagnostic(line=2, column=3, message=UNTERMINATED_BLOCK)]

    def test_misspelled_enddoc(self) -> None:
        scanner = BlockScanner("{% doc %}test{% enddoc1 %}test")
        assert list(scanner) == []
        assert [d.message for d in scanner.diagnostics] == [UNTERMINATED_BLOCK]

    def test_earlier_blocks_survive(self) -> None:
        scanner = BlockScanner("{% doc %}ok{% enddoc %}\n{% doc %}broken")
        assert [span.content for span in scanner] == ["ok"]
        assert scanner.diagnostics == [Diagnostic(line=2, column=1, message=UNTERMINATED_BLOCK)]

    def test_opening_tag_without_close(self) -> None:
        scanner = BlockScanner("{% doc x %}\n{% doc %}fine{% enddoc %}")
        assert [span.content for span in scanner] == ["fine"]
        assert scanner.diagnostics == [Diagnostic(line=1, column=1, message=UNTERMINATED_BLOCK)]
