#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/parsers/__init__.py
"""Parsers producing the input tree."""

from md2html.parsers.base import BaseParser
from md2html.parsers.markdown import MarkdownParser, markdown_to_ast

__all__ = ["BaseParser", "MarkdownParser", "markdown_to_ast"]
