#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/ast/visitors.py
"""Visitor pattern implementation for input tree traversal.

This module provides the visitor base class used to walk the input tree.
Every node kind in :mod:`md2html.ast.nodes` has exactly one abstract
``visit_*`` method here, which makes dispatch exhaustive: a subclass that
forgets a kind cannot be instantiated, so no kind is ever silently dropped.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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


class NodeVisitor(ABC):
    """Abstract base class for input tree visitors.

    Subclasses must implement a ``visit_*`` method for every node kind.
    Nodes dispatch to these methods through ``node.accept(visitor)``.

    Examples
    --------
    Collecting every text payload:

        >>> class TextCollector(NodeVisitor):
        ...     def visit_text(self, node):
        ...         return node.content
        ...     # ... one method per remaining kind

    """

    # ------------------------------------------------------------------
    # Block-level nodes
    # ------------------------------------------------------------------

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_front_matter(self, node: FrontMatter) -> Any:
        """Visit a FrontMatter node.

        Parameters
        ----------
        node : FrontMatter
            The front matter block to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node.

        Parameters
        ----------
        node : Heading
            The heading node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node.

        Parameters
        ----------
        node : CodeBlock
            The code block node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_html_block(self, node: HTMLBlock) -> Any:
        """Visit an HTMLBlock node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node.

        Parameters
        ----------
        node : List
            The list node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_task_item(self, node: TaskItem) -> Any:
        """Visit a TaskItem node.

        Parameters
        ----------
        node : TaskItem
            The task item node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_description_list(self, node: DescriptionList) -> Any:
        """Visit a DescriptionList node."""
        pass

    @abstractmethod
    def visit_description_item(self, node: DescriptionItem) -> Any:
        """Visit a DescriptionItem node."""
        pass

    @abstractmethod
    def visit_description_term(self, node: DescriptionTerm) -> Any:
        """Visit a DescriptionTerm node."""
        pass

    @abstractmethod
    def visit_description_details(self, node: DescriptionDetails) -> Any:
        """Visit a DescriptionDetails node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node.

        Parameters
        ----------
        node : Table
            The table node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""
        pass

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""
        pass

    @abstractmethod
    def visit_footnote_definition(self, node: FootnoteDefinition) -> Any:
        """Visit a FootnoteDefinition node.

        Parameters
        ----------
        node : FootnoteDefinition
            The footnote definition node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node.

        Parameters
        ----------
        node : Text
            The text node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_soft_break(self, node: SoftBreak) -> Any:
        """Visit a SoftBreak node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit an inline Code node."""
        pass

    @abstractmethod
    def visit_html_inline(self, node: HTMLInline) -> Any:
        """Visit an HTMLInline node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""
        pass

    @abstractmethod
    def visit_insert(self, node: Insert) -> Any:
        """Visit an Insert node."""
        pass

    @abstractmethod
    def visit_superscript(self, node: Superscript) -> Any:
        """Visit a Superscript node."""
        pass

    @abstractmethod
    def visit_subscript(self, node: Subscript) -> Any:
        """Visit a Subscript node."""
        pass

    @abstractmethod
    def visit_highlight(self, node: Highlight) -> Any:
        """Visit a Highlight node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node.

        Parameters
        ----------
        node : Link
            The link node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node.

        Parameters
        ----------
        node : Image
            The image node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_footnote_reference(self, node: FootnoteReference) -> Any:
        """Visit a FootnoteReference node.

        Parameters
        ----------
        node : FootnoteReference
            The footnote reference node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_short_code(self, node: ShortCode) -> Any:
        """Visit a ShortCode node."""
        pass
