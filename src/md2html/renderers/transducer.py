#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/renderers/transducer.py
"""Input tree to output tree transduction.

The :class:`HtmlTransducer` walks the input tree once, depth first, and maps
every input node to exactly one output node. Document-wide facts that can
only be used once the whole document has been seen (headings, footnotes,
table rules, word count, front matter) are recorded into the
:class:`~md2html.renderers.state.TraversalAccumulator` it was created with.

Because :class:`~md2html.ast.visitors.NodeVisitor` declares one abstract
method per node kind, the transducer cannot be instantiated unless it
handles them all.

"""

from __future__ import annotations

import logging
import string
from functools import partial
from typing import Callable, Optional
from urllib.parse import urlparse

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
from md2html.ast.visitors import NodeVisitor
from md2html.constants import (
    EMPTY_TASK_CLASS,
    EXTERNAL_LINK_CLASS,
    FRONT_MATTER_DELIMITER,
    HEADING_ID_PREFIX,
    SECTION_LOGO,
    TASK_ICONS,
    UNKNOWN_TASK_ICON,
)
from md2html.dom.nodes import EMPTY, Element, HtmlNode, RawNode, attr, element, text, void
from md2html.options.html import RenderOptions
from md2html.renderers.state import FrontMatter as FrontMatterData
from md2html.renderers.state import TraversalAccumulator
from md2html.utils.highlight import highlight_code
from md2html.utils.text import heading_to_slug
from md2html.utils.typography import substitute

logger = logging.getLogger(__name__)

Highlighter = Callable[[str, str], HtmlNode]

_ALIGNMENT_VALUES = {"center": "center", "left": "left", None: "initial", "right": "right"}

_FRONT_MATTER_TRIM = FRONT_MATTER_DELIMITER[0] + string.whitespace


def table_rule(table_number: int, column: int, alignment: Optional[str]) -> str:
    """Build the CSS rule aligning one table column.

    Parameters
    ----------
    table_number : int
        Number of the table, as in its ``table-{n}`` class
    column : int
        1-based column index
    alignment : {"left", "center", "right"} or None
        Column alignment; None gives ``initial``

    Examples
    --------
    >>> table_rule(1, 2, None)
    '.table-1 td:nth-child(2), .table-1 th:nth-child(2) { text-align: initial }'

    """
    value = _ALIGNMENT_VALUES[alignment]
    return (
        f".table-{table_number} td:nth-child({column}), "
        f".table-{table_number} th:nth-child({column}) {{ text-align: {value} }}"
    )


def task_icon(marker: Optional[str]) -> Element:
    """Build the status icon for a task item marker."""
    if marker is None:
        return element("span", attrs=[attr("class", EMPTY_TASK_CLASS)])
    icon, color = TASK_ICONS.get(marker, UNKNOWN_TASK_ICON)
    return element("span", attrs=[attr("class", f"fa-solid fa-{icon}"), attr("style", f"color: {color}")])


def _site_host(domain: str) -> str:
    # Accept both "example.com" and "https://example.com"
    if "://" in domain:
        try:
            return urlparse(domain).hostname or domain
        except ValueError:
            return domain
    return domain


class HtmlTransducer(NodeVisitor):
    """Map input nodes to output nodes, recording document-wide state.

    Parameters
    ----------
    accumulator : TraversalAccumulator
        Fresh accumulator for this document
    options : RenderOptions or None, default = None
        Rendering options
    highlighter : callable or None, default = None
        ``(code, language) -> HtmlNode`` used for code blocks; defaults to
        :func:`~md2html.utils.highlight.highlight_code` with the configured
        Pygments style

    Examples
    --------
        >>> from md2html.ast import Document, Paragraph, Text
        >>> from md2html.dom import to_html
        >>> acc = TraversalAccumulator(domain="localhost")
        >>> section = HtmlTransducer(acc).transduce(Document(children=[Paragraph(children=[Text("Hi")])]))
        >>> to_html(section)
        '<section><p>Hi</p></section>'

    """

    def __init__(
        self,
        accumulator: TraversalAccumulator,
        options: RenderOptions | None = None,
        highlighter: Highlighter | None = None,
    ):
        """Initialize the transducer with its accumulator and options."""
        self.options = options or RenderOptions()
        self.state = accumulator
        self._highlight = highlighter or partial(highlight_code, style=self.options.highlight_style)
        self._site_host = _site_host(accumulator.domain)

    def transduce(self, document: Document) -> Element:
        """Render ``document`` to its content ``section``."""
        return self.visit_document(document)

    def _children(self, node: Node) -> list[HtmlNode]:
        return [child.accept(self) for child in getattr(node, "children", [])]

    def _wrap(self, tag: str, node: Node) -> Element:
        return element(tag, *self._children(node))

    # ------------------------------------------------------------------
    # Block-level nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> Element:
        """Render the document as a ``section``."""
        return self._wrap("section", node)

    def visit_front_matter(self, node: FrontMatter) -> HtmlNode:
        """Parse the front matter into the accumulator; emits nothing.

        Raises
        ------
        FrontMatterError
            If the payload is not valid front matter

        """
        front_matter = FrontMatterData.from_toml(node.content.strip(_FRONT_MATTER_TRIM))
        self.state.set_front_matter(front_matter)
        logger.debug(f"Parsed front matter for {front_matter.title!r}")
        return EMPTY

    def visit_heading(self, node: Heading) -> Element:
        """Render a heading with its permalink anchor.

        The heading's id and title are derived from its rendered content and
        recorded for the table of contents.

        """
        children = self._children(node)
        slug, title = heading_to_slug(children)
        self.state.headings.append((node.level, slug, title))

        anchor = element(
            "a",
            text(SECTION_LOGO),
            attrs=[attr("href", f"#{HEADING_ID_PREFIX}{slug}"), attr("class", "section-logo")],
        )
        return element(f"h{node.level}", *children, anchor, attrs=[attr("id", f"{HEADING_ID_PREFIX}{slug}")])

    def visit_paragraph(self, node: Paragraph) -> Element:
        """Render a paragraph."""
        return self._wrap("p", node)

    def visit_code_block(self, node: CodeBlock) -> HtmlNode:
        """Hand the code block to the highlighter."""
        return self._highlight(node.content, node.info)

    def visit_html_block(self, node: HTMLBlock) -> RawNode:
        """Pass raw HTML through unchanged."""
        return RawNode(node.content)

    def visit_block_quote(self, node: BlockQuote) -> Element:
        """Render a block quote."""
        return self._wrap("blockquote", node)

    def visit_list(self, node: List) -> Element:
        """Render an ordered or bullet list."""
        return self._wrap("ol" if node.ordered else "ul", node)

    def visit_list_item(self, node: ListItem) -> Element:
        """Render a list item."""
        return self._wrap("li", node)

    def visit_task_item(self, node: TaskItem) -> Element:
        """Render a task item: status icon followed by the item's content.

        Paragraph wrappers inside the item are dropped so the text sits
        next to the icon.

        """
        children: list[HtmlNode] = [task_icon(node.marker)]
        for child in node.children:
            if isinstance(child, Paragraph):
                children.extend(self._children(child))
            else:
                children.append(child.accept(self))
        return element("li", *children, attrs=[attr("class", "task-item")])

    def visit_description_list(self, node: DescriptionList) -> Element:
        """Render a description list, skipping the item wrappers."""
        children: list[HtmlNode] = []
        for item in node.children:
            children.extend(self._children(item))
        return element("dl", *children)

    def visit_description_item(self, node: DescriptionItem) -> HtmlNode:
        """Items are flattened by their list; on their own they emit nothing."""
        return EMPTY

    def visit_description_term(self, node: DescriptionTerm) -> Element:
        """Render a description term."""
        return self._wrap("dt", node)

    def visit_description_details(self, node: DescriptionDetails) -> Element:
        """Render description details."""
        return self._wrap("dd", node)

    def visit_table(self, node: Table) -> Element:
        """Render a table and record one alignment rule per column.

        The first row becomes the ``thead``; the rest go in the ``tbody``.

        """
        number = self.state.next_table()
        for column, alignment in enumerate(node.alignments, start=1):
            self.state.styles.append(table_rule(number, column, alignment))

        rows = self._children(node)
        head, body = rows[:1], rows[1:]
        return element(
            "table",
            element("thead", *head),
            element("tbody", *body),
            attrs=[attr("class", f"table-{number}")],
        )

    def visit_table_row(self, node: TableRow) -> Element:
        """Render a row; header rows wrap each cell's content in ``th``."""
        if node.is_header:
            return element("tr", *(element("th", *self._children(cell)) for cell in node.children))
        return self._wrap("tr", node)

    def visit_table_cell(self, node: TableCell) -> Element:
        """Render a body cell."""
        return self._wrap("td", node)

    def visit_thematic_break(self, node: ThematicBreak) -> HtmlNode:
        """Render a horizontal rule."""
        return void("hr")

    def visit_footnote_definition(self, node: FootnoteDefinition) -> HtmlNode:
        """Record the footnote's rendered content; emits nothing in place."""
        self.state.definitions.append((node.label, self._children(node)))
        return EMPTY

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> HtmlNode:
        """Count words, apply typography and emoticons, emit text."""
        self.state.count_words(node.content)
        return text(substitute(node.content))

    def visit_soft_break(self, node: SoftBreak) -> HtmlNode:
        """Render a soft break as ``br``."""
        return void("br")

    def visit_line_break(self, node: LineBreak) -> HtmlNode:
        """Render a hard break as ``br``."""
        return void("br")

    def visit_code(self, node: Code) -> Element:
        """Render inline code; its text is not substituted."""
        return element("span", text(node.content), attrs=[attr("class", "inline-code")])

    def visit_html_inline(self, node: HTMLInline) -> RawNode:
        """Pass raw inline HTML through unchanged."""
        return RawNode(node.content)

    def visit_emphasis(self, node: Emphasis) -> Element:
        """Render emphasis as ``i``."""
        return self._wrap("i", node)

    def visit_strong(self, node: Strong) -> Element:
        """Render strong emphasis as ``b``."""
        return self._wrap("b", node)

    def visit_strikethrough(self, node: Strikethrough) -> Element:
        """Render strikethrough as ``s``."""
        return self._wrap("s", node)

    def visit_insert(self, node: Insert) -> Element:
        """Render inserted text as ``u``."""
        return self._wrap("u", node)

    def visit_superscript(self, node: Superscript) -> Element:
        """Render superscript."""
        return self._wrap("sup", node)

    def visit_subscript(self, node: Subscript) -> Element:
        """Render subscript."""
        return self._wrap("sub", node)

    def visit_highlight(self, node: Highlight) -> Element:
        """Render highlighted text as ``mark``."""
        return self._wrap("mark", node)

    def visit_link(self, node: Link) -> Element:
        """Render a link; links to other hosts get an external marker.

        Relative links have no host and are never marked.

        """
        children = self._children(node)
        try:
            host = urlparse(node.url).hostname
        except ValueError:
            host = None
        if host and host != self._site_host:
            children.append(element("span", attrs=[attr("class", EXTERNAL_LINK_CLASS)]))

        return element(
            "a",
            *children,
            attrs=[
                attr("href", node.url),
                attr("title", node.title),
                attr("target", "_blank"),
                attr("rel", "noreferrer"),
            ],
        )

    def visit_image(self, node: Image) -> HtmlNode:
        """Render an image, inside a captioned ``figure`` when it has a title."""
        attrs = [attr("src", node.url)]
        if node.children and isinstance(node.children[0], Text):
            attrs.append(attr("alt", node.children[0].content))

        if not node.title:
            return void("img", attrs)

        attrs.append(attr("title", node.title))
        return element("figure", void("img", attrs), element("figcaption", text(node.title)))

    def visit_footnote_reference(self, node: FootnoteReference) -> Element:
        """Render a numbered reference linking to its footnote.

        Repeated references to one label get ids suffixed ``:1``, ``:2``...

        """
        label = node.label
        suffix = self.state.reference_suffix(label)
        link = element(
            "a",
            text(f"[{label}{suffix}]"),
            attrs=[
                attr("href", f"#footnote-definition-{label}"),
                attr("id", f"footnote-reference-{label}{suffix}"),
            ],
        )
        return element("sup", link)

    def visit_short_code(self, node: ShortCode) -> Element:
        """Render an emoji shortcode as its glyph."""
        return element("span", text(node.emoji))


__all__ = ["HtmlTransducer", "Highlighter", "table_rule", "task_icon"]
