"""The major exported API functions for Markdown to HTML conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/md2html/api.py
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from md2html.ast.nodes import Document
from md2html.dom.nodes import Doctype
from md2html.dom.writer import to_html
from md2html.options.html import RenderOptions
from md2html.options.markdown import MarkdownParserOptions
from md2html.parsers.markdown import MarkdownParser
from md2html.renderers.html import HtmlRenderer
from md2html.utils.decorators import debug_timer
from md2html.utils.io_utils import read_text, write_atomic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Everything produced by one conversion.

    Parameters
    ----------
    document : Document
        The parsed input tree
    tree : Doctype
        The output tree
    html : str
        The serialized page

    """

    document: Document
    tree: Doctype
    html: str


def convert(
    markdown: str,
    *,
    render_options: Optional[RenderOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> ConversionResult:
    """Parse, render and serialize one Markdown document.

    Parameters
    ----------
    markdown : str
        Markdown source, starting with a ``+++`` front matter block
    render_options : RenderOptions, optional
        HTML rendering options
    parser_options : MarkdownParserOptions, optional
        Markdown parsing options

    Returns
    -------
    ConversionResult
        Input tree, output tree and HTML

    Raises
    ------
    MissingFrontMatterError
        If the document has no front matter
    FrontMatterError
        If the front matter is not valid TOML or misses a key
    FootnoteLabelError
        If a footnote label is not a decimal integer
    InternalConsistencyError
        If an emoticon cannot be resolved to an emoji

    """
    with debug_timer(logger, "Parsing (markdown)"):
        document = MarkdownParser(parser_options).parse(markdown)

    with debug_timer(logger, "Rendering (html)"):
        tree = HtmlRenderer(render_options).render_tree(document)
        html = to_html(tree)

    return ConversionResult(document=document, tree=tree, html=html)


def markdown_to_html(
    markdown: str,
    *,
    render_options: Optional[RenderOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> str:
    """Convert a Markdown document to a complete HTML page.

    Examples
    --------
        >>> page = markdown_to_html(
        ...     '+++\\ntitle = "Hello"\\ntags = ["intro"]\\nauthor = "ada"\\navatar = "/ada.png"\\n+++\\n'
        ...     "# Welcome\\n\\nFirst post."
        ... )
        >>> page.startswith("<!DOCTYPE html>")
        True

    """
    return convert(markdown, render_options=render_options, parser_options=parser_options).html


def convert_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path, None] = None,
    *,
    render_options: Optional[RenderOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> ConversionResult:
    """Convert a Markdown file, optionally writing the page.

    Parameters
    ----------
    input_path : str or Path
        Markdown file to read (UTF-8)
    output_path : str or Path, optional
        Where to write the HTML. The write goes through a temporary file, so an
        existing file is only replaced by a complete page.

    Returns
    -------
    ConversionResult
        Input tree, output tree and HTML

    Raises
    ------
    InputReadError
        If the input cannot be read
    OutputWriteError
        If the output cannot be written

    """
    markdown = read_text(input_path)
    result = convert(markdown, render_options=render_options, parser_options=parser_options)
    if output_path is not None:
        write_atomic(result.html, output_path)
    return result


__all__ = ["ConversionResult", "convert", "convert_file", "markdown_to_html"]
