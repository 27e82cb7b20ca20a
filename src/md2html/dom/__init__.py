#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/dom/__init__.py
"""Output HTML node model and serializer."""

from md2html.dom.nodes import (
    EMPTY,
    AnyNode,
    CommentNode,
    Doctype,
    Element,
    Empty,
    HtmlNode,
    HtmlRoot,
    RawNode,
    TextNode,
    VoidElement,
    attr,
    collect_text,
    element,
    text,
    void,
)
from md2html.dom.writer import html_to_json, node_to_dict, to_html

__all__ = [
    "AnyNode",
    "CommentNode",
    "Doctype",
    "EMPTY",
    "Element",
    "Empty",
    "HtmlNode",
    "HtmlRoot",
    "RawNode",
    "TextNode",
    "VoidElement",
    "attr",
    "collect_text",
    "element",
    "html_to_json",
    "node_to_dict",
    "text",
    "to_html",
    "void",
]
