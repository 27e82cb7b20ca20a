#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/parsers/markdown.py
"""Markdown to input tree parser.

This module converts Markdown into the :mod:`md2html.ast` input tree. It uses
mistune for tokenization and walks the token stream itself, adding the pieces
mistune does not model the way the renderer needs them:

- a leading ``+++`` TOML front matter block,
- task list items with any single character marker (``[x]``, ``[-]``, ``[?]``),
- ``:name:`` emoji shortcodes.

"""

from __future__ import annotations

import html
import logging
import re
from pathlib import Path
from typing import Any, Callable, Optional, Union

import emoji
import mistune

from md2html.ast.nodes import (
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
)
from md2html.constants import FRONT_MATTER_DELIMITER
from md2html.options.markdown import MarkdownParserOptions
from md2html.parsers.base import BaseParser

logger = logging.getLogger(__name__)

_TASK_MARKER = re.compile(r"^\[(.)\](?:\s+|$)")
_SHORTCODE = re.compile(r":([a-z0-9_+\-]+):")

TokenHandler = Callable[[dict[str, Any]], Optional[Node]]


def _children(token: dict[str, Any]) -> list[dict[str, Any]]:
    children = token.get("children", [])
    return children if isinstance(children, list) else []


def _attrs(token: dict[str, Any]) -> dict[str, Any]:
    attrs = token.get("attrs", {})
    return attrs if isinstance(attrs, dict) else {}


def lookup_shortcode(name: str) -> str | None:
    """Return the emoji for shortcode ``name``, or None when unknown.

    Examples
    --------
    >>> lookup_shortcode("smile")
    '😄'
    >>> lookup_shortcode("not_an_emoji") is None
    True

    """
    shortcode = f":{name}:"
    glyph = emoji.emojize(shortcode, language="alias")
    return None if glyph == shortcode else glyph


def split_shortcodes(content: str) -> list[Node]:
    """Split text into Text and ShortCode nodes.

    Unknown ``:name:`` sequences stay part of the surrounding text.

    Examples
    --------
    >>> split_shortcodes("Hi :wave: there")
    [Text(content='Hi '), ShortCode(code='wave', emoji='👋'), Text(content=' there')]

    """
    nodes: list[Node] = []
    buffer = ""
    position = 0
    for match in _SHORTCODE.finditer(content):
        glyph = lookup_shortcode(match.group(1))
        if glyph is None:
            continue
        buffer += content[position : match.start()]
        if buffer:
            nodes.append(Text(content=buffer))
            buffer = ""
        nodes.append(ShortCode(code=match.group(1), emoji=glyph))
        position = match.end()
    buffer += content[position:]
    if buffer:
        nodes.append(Text(content=buffer))
    return nodes


class MarkdownParser(BaseParser):
    """Convert Markdown to the input tree.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Examples
    --------
    Basic usage:

        >>> parser = MarkdownParser()
        >>> doc = parser.parse("# Title\\n\\nSome *text*")
        >>> [type(child).__name__ for child in doc.children]
        ['Heading', 'Paragraph']

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the parser with options."""
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

        self._block_handlers: dict[str, TokenHandler] = {
            "heading": self._process_heading,
            "paragraph": self._process_paragraph,
            "block_text": self._process_paragraph,
            "block_code": self._process_code_block,
            "block_quote": self._process_block_quote,
            "block_html": lambda token: HTMLBlock(content=token.get("raw", "")),
            "list": self._process_list,
            "table": self._process_table,
            "thematic_break": lambda token: ThematicBreak(),
            "def_list": self._process_definition_list,
        }
        self._inline_handlers: dict[str, TokenHandler] = {
            "text": lambda token: Text(content=html.unescape(token.get("raw", ""))),
            "softbreak": lambda token: SoftBreak(),
            "linebreak": lambda token: LineBreak(),
            "codespan": lambda token: Code(content=token.get("raw", "")),
            "inline_html": lambda token: HTMLInline(content=token.get("raw", "")),
            "emphasis": self._wrap_inline(Emphasis),
            "strong": self._wrap_inline(Strong),
            "strikethrough": self._wrap_inline(Strikethrough),
            "insert": self._wrap_inline(Insert),
            "superscript": self._wrap_inline(Superscript),
            "subscript": self._wrap_inline(Subscript),
            "mark": self._wrap_inline(Highlight),
            "link": self._process_link,
            "image": self._process_image,
            "footnote_ref": lambda token: FootnoteReference(label=token.get("raw", "")),
        }

    def _create_markdown(self) -> mistune.Markdown:
        plugins = ["url"]
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_footnotes:
            plugins.append("footnotes")
        if self.options.parse_definition_lists:
            plugins.append("def_list")
        if self.options.parse_extended_inline:
            plugins.extend(["mark", "insert", "superscript", "subscript"])

        # Tokens only; the tree is built from them below
        return mistune.create_markdown(plugins=plugins, renderer=None)

    def parse(self, input_data: Union[str, Path, bytes]) -> Document:
        """Parse Markdown input into a Document.

        Parameters
        ----------
        input_data : str, Path or bytes
            Markdown text, a path to a Markdown file, or UTF-8 bytes

        Returns
        -------
        Document
            Root of the input tree. A front matter block, when present, is the
            first child; footnote definitions follow the body.

        """
        markdown_content = self._load_text_content(input_data)

        children: list[Node] = []
        if self.options.parse_front_matter:
            front_matter, markdown_content = self._extract_front_matter(markdown_content)
            if front_matter is not None:
                children.append(front_matter)

        tokens, _state = self._create_markdown().parse(markdown_content)
        children.extend(self._process_tokens(tokens if isinstance(tokens, list) else []))

        logger.debug(f"Parsed Markdown into {len(children)} top-level nodes")
        return Document(children=children)

    @staticmethod
    def _extract_front_matter(content: str) -> tuple[FrontMatter | None, str]:
        """Split a leading ``+++`` block from the content.

        Returns
        -------
        tuple[FrontMatter or None, str]
            The front matter node (raw text including both fences) and the
            remaining Markdown

        """
        if not (content.startswith(f"{FRONT_MATTER_DELIMITER}\n") or content.startswith(f"{FRONT_MATTER_DELIMITER}\r\n")):
            return None, content

        lines = content.splitlines(keepends=True)
        for index in range(1, len(lines)):
            if lines[index].strip() == FRONT_MATTER_DELIMITER:
                raw = "".join(lines[: index + 1])
                return FrontMatter(content=raw), "".join(lines[index + 1 :])

        logger.debug("Unterminated front matter block treated as Markdown")
        return None, content

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            token_type = token.get("type", "")
            if token_type == "footnotes":
                nodes.extend(self._process_footnotes(token))
                continue
            handler = self._block_handlers.get(token_type)
            if handler is not None:
                nodes.append(handler(token))
            elif token_type != "blank_line":
                logger.debug(f"Skipping unsupported block token: {token_type}")
        return nodes

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Convert inline tokens, merging adjacent text and splitting shortcodes."""
        nodes: list[Node] = []
        for token in tokens:
            token_type = token.get("type", "")
            handler = self._inline_handlers.get(token_type)
            if handler is None:
                logger.debug(f"Skipping unsupported inline token: {token_type}")
                continue
            node = handler(token)
            if isinstance(node, Text) and nodes and isinstance(nodes[-1], Text):
                nodes[-1] = Text(content=nodes[-1].content + node.content)
            elif node is not None:
                nodes.append(node)

        if not self.options.parse_shortcodes:
            return nodes

        expanded: list[Node] = []
        for node in nodes:
            if isinstance(node, Text):
                expanded.extend(split_shortcodes(node.content))
            else:
                expanded.append(node)
        return expanded

    def _wrap_inline(self, node_class: type) -> TokenHandler:
        def handler(token: dict[str, Any]) -> Node:
            return node_class(children=self._process_inline_tokens(_children(token)))

        return handler

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        level = _attrs(token).get("level", 1)
        return Heading(level=level, children=self._process_inline_tokens(_children(token)))

    def _process_paragraph(self, token: dict[str, Any]) -> Paragraph:
        return Paragraph(children=self._process_inline_tokens(_children(token)))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process a fenced or indented code block.

        Only the first word of the info string is kept as the language.

        """
        info = (_attrs(token).get("info") or "").strip()
        language = info.split()[0] if info else self.options.default_code_info
        return CodeBlock(content=token.get("raw", ""), info=language)

    def _process_block_quote(self, token: dict[str, Any]) -> BlockQuote:
        return BlockQuote(children=self._process_tokens(_children(token)))

    def _process_list(self, token: dict[str, Any]) -> List:
        attrs = _attrs(token)
        items = [self._process_list_item(child) for child in _children(token) if child.get("type") == "list_item"]
        return List(ordered=bool(attrs.get("ordered", False)), start=attrs.get("start", 1), children=items)

    def _process_list_item(self, token: dict[str, Any]) -> ListItem | TaskItem:
        """Process a list item, detecting a leading ``[c]`` task marker.

        The marker must open the first paragraph of the item. ``[ ]`` yields a
        task item without a marker.

        """
        content = self._process_tokens(_children(token))
        if not self.options.parse_task_lists or not content or not isinstance(content[0], Paragraph):
            return ListItem(children=content)

        paragraph = content[0]
        if not paragraph.children or not isinstance(paragraph.children[0], Text):
            return ListItem(children=content)

        first = paragraph.children[0]
        match = _TASK_MARKER.match(first.content)
        if match is None:
            return ListItem(children=content)

        remainder = first.content[match.end() :]
        rest = paragraph.children[1:]
        paragraph_children = [Text(content=remainder), *rest] if remainder else rest
        marker = match.group(1)
        return TaskItem(
            marker=None if marker.isspace() else marker,
            children=[Paragraph(children=paragraph_children), *content[1:]],
        )

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process a table token into header and body rows.

        Column alignments are taken from the header cells.

        """
        alignments = []
        rows = []
        for section in _children(token):
            section_type = section.get("type", "")
            if section_type == "table_head":
                cells = _children(section)
                alignments = [_attrs(cell).get("align") for cell in cells]
                rows.append(TableRow(is_header=True, children=self._process_table_cells(cells)))
            elif section_type == "table_body":
                for row in _children(section):
                    rows.append(TableRow(is_header=False, children=self._process_table_cells(_children(row))))
        return Table(alignments=alignments, children=rows)

    def _process_table_cells(self, cells: list[dict[str, Any]]) -> list[Node]:
        return [TableCell(children=self._process_inline_tokens(_children(cell))) for cell in cells]

    def _process_definition_list(self, token: dict[str, Any]) -> DescriptionList:
        """Group each term with the details that follow it."""
        items: list[Node] = []
        current: list[Node] = []
        for child in _children(token):
            child_type = child.get("type", "")
            if child_type == "def_list_head":
                if current:
                    items.append(DescriptionItem(children=current))
                current = [DescriptionTerm(children=self._process_inline_tokens(_children(child)))]
            elif child_type in ("def_list_item", "def_list_content"):
                current.append(DescriptionDetails(children=self._process_tokens(_children(child))))
        if current:
            items.append(DescriptionItem(children=current))
        return DescriptionList(children=items)

    def _process_footnotes(self, token: dict[str, Any]) -> list[Node]:
        """Convert the collected footnote items into definitions."""
        definitions: list[Node] = []
        for item in _children(token):
            label = str(_attrs(item).get("key", ""))
            definitions.append(FootnoteDefinition(label=label, children=self._process_tokens(_children(item))))
        return definitions

    def _process_link(self, token: dict[str, Any]) -> Link:
        attrs = _attrs(token)
        return Link(
            url=attrs.get("url", ""),
            title=attrs.get("title") or "",
            children=self._process_inline_tokens(_children(token)),
        )

    def _process_image(self, token: dict[str, Any]) -> Image:
        attrs = _attrs(token)
        return Image(
            url=attrs.get("url", ""),
            title=attrs.get("title") or "",
            children=self._process_inline_tokens(_children(token)),
        )


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert a Markdown string to the input tree.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        Root of the input tree

    Examples
    --------
    >>> doc = markdown_to_ast("# Hello\\n\\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownParser(options).parse(markdown_content)


__all__ = ["MarkdownParser", "lookup_shortcode", "markdown_to_ast", "split_shortcodes"]
