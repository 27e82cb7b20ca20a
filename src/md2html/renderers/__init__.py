#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/renderers/__init__.py
"""HTML rendering: transducer, post-traversal passes and page assembly."""

from md2html.renderers.document import assemble_document
from md2html.renderers.footnotes import resolve_footnotes
from md2html.renderers.html import HtmlRenderer
from md2html.renderers.state import FrontMatter, TraversalAccumulator
from md2html.renderers.toc import build_toc, heading_numerals
from md2html.renderers.transducer import HtmlTransducer

__all__ = [
    "FrontMatter",
    "HtmlRenderer",
    "HtmlTransducer",
    "TraversalAccumulator",
    "assemble_document",
    "build_toc",
    "heading_numerals",
    "resolve_footnotes",
]
