#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/ast/__init__.py
"""Input tree module.

The parser produces a tree of these nodes and the HTML transducer consumes it.

The module consists of:

- nodes: dataclass node kinds forming a closed set
- visitors: exhaustive visitor base class
- serialization: JSON dump and load for debugging

Examples
--------
    >>> from md2html.ast import Document, Heading, Paragraph, Text
    >>> doc = Document(children=[
    ...     Heading(level=1, children=[Text(content="Title")]),
    ...     Paragraph(children=[Text(content="Hello world")]),
    ... ])

"""

from __future__ import annotations

from md2html.ast.nodes import (
    Alignment,
    BlockQuote,
    Code,
    CodeBlock,
    DescriptionDetails,
    DescriptionItem,
    DescriptionList,
    DescriptionTerm,
    Document,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    FrontMatter,
    Heading,
    Highlight,
    HTMLBlock,
    HTMLInline,
    Image,
    Insert,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    ShortCode,
    SoftBreak,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Table,
    TableCell,
    TableRow,
    TaskItem,
    Text,
    ThematicBreak,
    get_node_children,
    iter_node_types,
)
from md2html.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from md2html.ast.visitors import NodeVisitor

__all__ = [
    "Alignment",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "DescriptionDetails",
    "DescriptionItem",
    "DescriptionList",
    "DescriptionTerm",
    "Document",
    "Emphasis",
    "FootnoteDefinition",
    "FootnoteReference",
    "FrontMatter",
    "Heading",
    "Highlight",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "Insert",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "Paragraph",
    "ShortCode",
    "SoftBreak",
    "Strikethrough",
    "Strong",
    "Subscript",
    "Superscript",
    "Table",
    "TableCell",
    "TableRow",
    "TaskItem",
    "Text",
    "ThematicBreak",
    "get_node_children",
    "iter_node_types",
    "NodeVisitor",
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "json_to_ast",
]
