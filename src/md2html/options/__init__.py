#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/options/__init__.py
"""Option dataclasses for parsing, rendering and CLI runs."""

from md2html.options.base import CloneFrozenMixin
from md2html.options.html import RenderOptions, RunOptions
from md2html.options.markdown import MarkdownParserOptions

__all__ = ["CloneFrozenMixin", "MarkdownParserOptions", "RenderOptions", "RunOptions"]
