#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/renderers/html.py
"""HTML rendering of a parsed document.

:class:`HtmlRenderer` runs the full rendering pipeline for one document:

1. create a fresh :class:`TraversalAccumulator` seeded with the domain,
2. transduce the input tree into the content section,
3. resolve footnotes, build the table of contents and assemble the page,
4. serialize the page.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from md2html.ast.nodes import Document
from md2html.dom.nodes import Doctype
from md2html.dom.writer import to_html
from md2html.options.html import RenderOptions
from md2html.renderers.document import assemble_document
from md2html.renderers.state import TraversalAccumulator
from md2html.renderers.transducer import Highlighter, HtmlTransducer
from md2html.utils.io_utils import write_atomic

logger = logging.getLogger(__name__)


class HtmlRenderer:
    """Render input trees to complete HTML pages.

    Parameters
    ----------
    options : RenderOptions or None, default = None
        HTML rendering options
    highlighter : callable or None, default = None
        Code block highlighter passed to the transducer

    Examples
    --------
        >>> from md2html.parsers.markdown import markdown_to_ast
        >>> doc = markdown_to_ast('+++\\ntitle = "Hi"\\ntags = []\\nauthor = "a"\\navatar = "a.png"\\n+++\\n# Hello')
        >>> html = HtmlRenderer().render_to_string(doc)

    """

    def __init__(self, options: RenderOptions | None = None, highlighter: Highlighter | None = None):
        """Initialize the renderer with options."""
        self.options = options or RenderOptions()
        self.highlighter = highlighter

    def render_tree(self, doc: Document) -> Doctype:
        """Render ``doc`` to an output tree.

        Raises
        ------
        MissingFrontMatterError
            If the document has no front matter
        FrontMatterError
            If the front matter cannot be parsed
        FootnoteLabelError
            If a footnote label is not a decimal integer
        InternalConsistencyError
            If an emoticon cannot be resolved to an emoji

        """
        state = TraversalAccumulator(domain=self.options.domain)
        content = HtmlTransducer(state, self.options, self.highlighter).transduce(doc)
        logger.info("Generated HTML content tree")
        return assemble_document(content, state, self.options)

    def render_to_string(self, doc: Document) -> str:
        """Render ``doc`` to an HTML string."""
        return to_html(self.render_tree(doc))

    def render(self, doc: Document, output: Union[str, Path]) -> None:
        """Render ``doc`` and write it to ``output``.

        Nothing is written unless the whole page rendered successfully.

        """
        html = self.render_to_string(doc)
        write_atomic(html, output)


__all__ = ["HtmlRenderer"]
