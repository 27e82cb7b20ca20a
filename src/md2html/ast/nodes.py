#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/ast/nodes.py
"""Input tree node classes.

This module defines the closed set of node kinds produced by the markdown
parser and consumed by the HTML transducer. Each node represents a block or
inline element of the source document.

The hierarchy is deliberately closed: every kind has a matching abstract
``visit_*`` method on :class:`md2html.ast.visitors.NodeVisitor`, so adding a
kind here forces every visitor to be revisited before it can be instantiated.

Node Hierarchy
--------------
Block-level nodes:
    - Document, FrontMatter, Heading, Paragraph, CodeBlock, HTMLBlock
    - BlockQuote, List, ListItem, TaskItem
    - DescriptionList, DescriptionItem, DescriptionTerm, DescriptionDetails
    - Table, TableRow, TableCell
    - ThematicBreak, FootnoteDefinition

Inline nodes:
    - Text, Code, HTMLInline, SoftBreak, LineBreak
    - Emphasis, Strong, Strikethrough, Insert, Superscript, Subscript, Highlight
    - Link, Image, FootnoteReference, ShortCode

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Literal, Optional

Alignment = Literal["left", "center", "right"]


class Node(ABC):
    """Base class for all input tree nodes.

    All nodes support the visitor pattern through :meth:`accept`.

    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document

    """

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


@dataclass
class FrontMatter(Node):
    """Front matter block found at the head of the document.

    The payload is kept verbatim, fences included; interpreting it is the
    consumer's job.

    Parameters
    ----------
    content : str
        Raw front matter block, including the ``+++`` delimiters

    """

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this front matter block."""
        return visitor.visit_front_matter(self)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    children : list of Node, default = empty list
        Inline nodes representing heading text

    """

    level: int
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class CodeBlock(Node):
    """Fenced or indented code block.

    Parameters
    ----------
    content : str
        Code content, with its trailing newline
    info : str, default = "txt"
        Language token taken from the fence info string

    """

    content: str
    info: str = "txt"

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block, passed through verbatim."""

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this HTML block."""
        return visitor.visit_html_block(self)


@dataclass
class BlockQuote(Node):
    """Block quote containing block-level children."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self)


@dataclass
class List(Node):
    """Ordered or unordered list.

    Parameters
    ----------
    ordered : bool, default = False
        True for numbered lists
    start : int, default = 1
        First number of an ordered list
    children : list of Node, default = empty list
        ListItem or TaskItem nodes

    """

    ordered: bool = False
    start: int = 1
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """Plain list item containing block-level children."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class TaskItem(Node):
    """List item carrying a task marker such as ``[x]`` or ``[-]``.

    Parameters
    ----------
    marker : str or None, default = None
        The single character between the brackets, or None for ``[ ]``
    children : list of Node, default = empty list
        Block-level children, usually a single paragraph

    """

    marker: Optional[str] = None
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this task item."""
        return visitor.visit_task_item(self)


@dataclass
class DescriptionList(Node):
    """Description list made of DescriptionItem children."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this description list."""
        return visitor.visit_description_list(self)


@dataclass
class DescriptionItem(Node):
    """One term with its details inside a description list."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this description item."""
        return visitor.visit_description_item(self)


@dataclass
class DescriptionTerm(Node):
    """Term being described."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this description term."""
        return visitor.visit_description_term(self)


@dataclass
class DescriptionDetails(Node):
    """Details describing the preceding term."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing these description details."""
        return visitor.visit_description_details(self)


@dataclass
class Table(Node):
    """Table with a header row followed by body rows.

    Parameters
    ----------
    alignments : list of Alignment or None, default = empty list
        Column alignment, one entry per column (None when unspecified)
    children : list of Node, default = empty list
        TableRow nodes; the first one is the header row

    """

    alignments: list[Optional[Alignment]] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)


@dataclass
class TableRow(Node):
    """Table row.

    Parameters
    ----------
    is_header : bool, default = False
        True for the header row
    children : list of Node, default = empty list
        TableCell nodes

    """

    is_header: bool = False
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table row."""
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """Table cell containing inline content."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table cell."""
        return visitor.visit_table_cell(self)


@dataclass
class ThematicBreak(Node):
    """Horizontal rule."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this thematic break."""
        return visitor.visit_thematic_break(self)


@dataclass
class FootnoteDefinition(Node):
    """Footnote definition.

    Parameters
    ----------
    label : str
        Footnote label as written in the source (``[^1]`` gives ``"1"``)
    children : list of Node, default = empty list
        Block-level content of the footnote

    """

    label: str
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this footnote definition."""
        return visitor.visit_footnote_definition(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Literal text."""

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)


@dataclass
class SoftBreak(Node):
    """Line ending inside a paragraph."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this soft break."""
        return visitor.visit_soft_break(self)


@dataclass
class LineBreak(Node):
    """Hard line break (two trailing spaces or a backslash)."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_line_break(self)


@dataclass
class Code(Node):
    """Inline code span."""

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code span."""
        return visitor.visit_code(self)


@dataclass
class HTMLInline(Node):
    """Raw inline HTML, passed through verbatim."""

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline HTML."""
        return visitor.visit_html_inline(self)


@dataclass
class Emphasis(Node):
    """Emphasized text."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emphasis."""
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strongly emphasized text."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strong emphasis."""
        return visitor.visit_strong(self)


@dataclass
class Strikethrough(Node):
    """Struck-through text (``~~text~~``)."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strikethrough."""
        return visitor.visit_strikethrough(self)


@dataclass
class Insert(Node):
    """Inserted text (``^^text^^``)."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this insert."""
        return visitor.visit_insert(self)


@dataclass
class Superscript(Node):
    """Superscript text (``^text^``)."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this superscript."""
        return visitor.visit_superscript(self)


@dataclass
class Subscript(Node):
    """Subscript text (``~text~``)."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this subscript."""
        return visitor.visit_subscript(self)


@dataclass
class Highlight(Node):
    """Highlighted text (``==text==``)."""

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this highlight."""
        return visitor.visit_highlight(self)


@dataclass
class Link(Node):
    """Hyperlink.

    Parameters
    ----------
    url : str
        Link target
    title : str, default = ""
        Link title attribute
    children : list of Node, default = empty list
        Inline nodes forming the link text

    """

    url: str
    title: str = ""
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image.

    Parameters
    ----------
    url : str
        Image source
    title : str, default = ""
        Image title; rendered as a caption when present
    children : list of Node, default = empty list
        Inline nodes of the alt text

    """

    url: str
    title: str = ""
    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self)


@dataclass
class FootnoteReference(Node):
    """Reference to a footnote (``[^label]``)."""

    label: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this footnote reference."""
        return visitor.visit_footnote_reference(self)


@dataclass
class ShortCode(Node):
    """Emoji shortcode such as ``:smile:``.

    Parameters
    ----------
    code : str
        Shortcode name without colons
    emoji : str
        Resolved emoji glyph

    """

    code: str
    emoji: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this shortcode."""
        return visitor.visit_short_code(self)


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list for leaf nodes)

    Examples
    --------
    >>> heading = Heading(level=1, children=[Text("Hello"), Strong(children=[Text("world")])])
    >>> len(get_node_children(heading))
    2

    """
    children = getattr(node, "children", None)
    if children is None:
        return []
    return list(children)


def iter_node_types() -> list[type[Node]]:
    """Return every concrete node class, in declaration order."""
    return [cls for cls in Node.__subclasses__() if cls.__module__ == __name__]
