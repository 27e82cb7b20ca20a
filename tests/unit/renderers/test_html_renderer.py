#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the HTML renderer pipeline."""

from pathlib import Path

import pytest

from md2html.ast import Document, FrontMatter, Heading, Paragraph, Text
from md2html.dom import Doctype, element, text
from md2html.exceptions import MissingFrontMatterError
from md2html.options import RenderOptions
from md2html.renderers import HtmlRenderer


def _document(front_matter: str) -> Document:
    return Document(
        children=[
            FrontMatter(content=front_matter),
            Heading(level=1, children=[Text("Intro")]),
            Paragraph(children=[Text("Hello there")]),
        ]
    )


@pytest.mark.unit
class TestHtmlRenderer:
    """Test rendering complete pages."""

    def test_render_tree(self, front_matter: str) -> None:
        """Test the output tree root."""
        tree = HtmlRenderer().render_tree(_document(front_matter))
        assert isinstance(tree, Doctype)

    def test_render_to_string(self, front_matter: str) -> None:
        """Test the serialized page."""
        html = HtmlRenderer(RenderOptions(domain="example.com")).render_to_string(_document(front_matter))
        assert html.startswith("<!DOCTYPE html>\n")
        assert '<h1 id="heading__intro">Intro' in html
        assert "<p>Hello there</p>" in html
        assert 'href="example.com/tags/python"' in html

    def test_fresh_state_per_render(self, front_matter: str) -> None:
        """Test a renderer can be reused without leaking state between documents."""
        renderer = HtmlRenderer()
        renderer.render_to_string(_document(front_matter))
        html = renderer.render_to_string(_document(front_matter))
        assert html.count('<p style="padding-left: 20px">') == 1

    def test_custom_highlighter(self, front_matter: str) -> None:
        """Test the highlighter collaborator is used for code blocks."""
        from md2html.ast import CodeBlock

        doc = _document(front_matter)
        doc.children.append(CodeBlock(content="x", info="python"))
        renderer = HtmlRenderer(highlighter=lambda code, language: element("pre", text(f"[{language}]")))
        assert "<pre>[python]</pre>" in renderer.render_to_string(doc)

    def test_render_writes_file(self, front_matter: str, temp_dir: Path) -> None:
        """Test rendering to a file."""
        output = temp_dir / "page.html"
        HtmlRenderer().render(_document(front_matter), output)
        assert output.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")

    def test_missing_front_matter_writes_nothing(self, temp_dir: Path) -> None:
        """Test no file is written when rendering fails."""
        output = temp_dir / "page.html"
        with pytest.raises(MissingFrontMatterError):
            HtmlRenderer().render(Document(children=[Paragraph(children=[Text("x")])]), output)
        assert not output.exists()
