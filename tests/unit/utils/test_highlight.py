#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for code block highlighting."""

import pytest

from md2html.dom import Element, collect_text, to_html
from md2html.exceptions import ConfigurationError
from md2html.utils.highlight import highlight_code


def _code_rows(block: Element) -> tuple:
    code = block.children[1]
    assert isinstance(code, Element) and code.tag == "code"
    return code.children


@pytest.mark.unit
class TestKnownLanguage:
    """Test highlighting of a language Pygments knows."""

    def test_language_label_and_line_numbers(self) -> None:
        """Test the label div and one numbered row per line."""
        block = highlight_code('def f():\n    return "x"\n', "python")
        assert block.tag == "pre"
        assert block.attrs == ('style="padding: 40px 20px 20px 20px"',)
        assert collect_text([block.children[0]]) == "Python"

        rows = _code_rows(block)
        assert len(rows) == 2
        numbers = [collect_text([row.children[0]]) for row in rows]
        assert numbers == ["1.", "2."]

    def test_code_text_is_preserved(self) -> None:
        """Test the colored spans carry the full source text of each line."""
        block = highlight_code('def f():\n    return "x"\n', "python")
        lines = [collect_text([row.children[1]]) for row in _code_rows(block)]
        assert lines == ["def f():", '    return "x"']

    def test_line_numbers_right_aligned(self) -> None:
        """Test numbers are padded to the widest line number."""
        code = "\n".join(f"x = {i}" for i in range(10)) + "\n"
        rows = _code_rows(highlight_code(code, "python"))
        assert collect_text([rows[0].children[0]]) == " 1."
        assert collect_text([rows[9].children[0]]) == "10."
        assert rows[0].children[1].attrs == ('style="padding-left: 45px"',)

    def test_spans_are_colored(self) -> None:
        """Test keyword spans get an inline color."""
        html = to_html(highlight_code("def f(): pass\n", "python"))
        assert 'class="code-line-number"' in html
        assert 'style="color: #' in html

    def test_markup_in_code_is_escaped(self) -> None:
        """Test code text is escaped on output."""
        html = to_html(highlight_code("a = '<b>'\n", "python"))
        assert "<b>" not in html
        assert "&lt;b&gt;" in html

    def test_unknown_style(self) -> None:
        """Test an unknown Pygments style is a configuration error."""
        with pytest.raises(ConfigurationError):
            highlight_code("x = 1\n", "python", style="no-such-style")


@pytest.mark.unit
class TestPlainText:
    """Test code without a known language."""

    @pytest.mark.parametrize("language", ["txt", "text", "no-such-language", ""])
    def test_plain_lines_without_numbers(self, language: str) -> None:
        """Test plain rendering has no label and no line numbers."""
        block = highlight_code("first\nsecond\n", language)
        assert block.attrs == ('style="padding: 20px 20px 20px 20px"',)
        html = to_html(block)
        assert "code-line-number" not in html
        assert html.endswith("<code><div><div>first</div></div><div><div>second</div></div></code></pre>")

    def test_plain_escaping(self) -> None:
        """Test plain code text is escaped."""
        assert "a &lt; b" in to_html(highlight_code("a < b\n", "txt"))
