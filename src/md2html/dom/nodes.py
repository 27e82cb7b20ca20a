#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/dom/nodes.py
"""Output HTML node model.

Output nodes are frozen dataclasses. The ``with_*`` helpers return new nodes
and never touch the receiver, so a subtree can be shared by several parents
without being copied.

Attributes are stored as pre-formatted ``name="value"`` strings in an ordered
tuple. Setting attributes replaces the whole tuple; nothing is merged.

Node variants
-------------
Element
    Container with a tag, attributes and children.
VoidElement
    Self-closing tag with attributes only (``meta``, ``hr``, ``br``, ``img``...).
TextNode
    Literal text, HTML-escaped when written.
RawNode
    Markup emitted verbatim.
CommentNode
    ``<!-- ... -->`` comment.
Empty
    Produces no output.
Doctype
    ``<!DOCTYPE html>`` followed by its single child.
HtmlRoot
    ``<html lang="en">`` holding exactly a head and a body.

"""

from __future__ import annotations

import html
from abc import ABC
from dataclasses import dataclass, field, replace
from typing import Iterable, Union


def attr(name: str, value: object) -> str:
    """Format a single ``name="value"`` attribute.

    The value is HTML-escaped, quotes included.

    Examples
    --------
    >>> attr("title", 'say "hi"')
    'title="say &quot;hi&quot;"'

    """
    return f'{name}="{html.escape(str(value), quote=True)}"'


class HtmlNode(ABC):
    """Base class for all output nodes."""


@dataclass(frozen=True)
class Element(HtmlNode):
    """Container element.

    Parameters
    ----------
    tag : str
        Tag name, e.g. ``"section"``
    attrs : tuple of str, default = ()
        Pre-formatted attributes, see :func:`attr`
    children : tuple of HtmlNode, default = ()
        Child nodes in document order

    """

    tag: str
    attrs: tuple[str, ...] = ()
    children: tuple[HtmlNode, ...] = ()

    def with_children(self, children: Iterable[HtmlNode]) -> Element:
        """Return a copy whose children are replaced by ``children``."""
        return replace(self, children=tuple(children))

    def with_child(self, child: HtmlNode) -> Element:
        """Return a copy holding ``child`` as its only child."""
        return replace(self, children=(child,))

    def with_attrs(self, attrs: Iterable[str]) -> Element:
        """Return a copy whose attributes are replaced by ``attrs``."""
        return replace(self, attrs=tuple(attrs))

    def with_attr(self, attribute: str) -> Element:
        """Return a copy holding ``attribute`` as its only attribute."""
        return replace(self, attrs=(attribute,))


@dataclass(frozen=True)
class VoidElement(HtmlNode):
    """Self-closing element with attributes and no children."""

    tag: str
    attrs: tuple[str, ...] = ()

    def with_attrs(self, attrs: Iterable[str]) -> VoidElement:
        """Return a copy whose attributes are replaced by ``attrs``."""
        return replace(self, attrs=tuple(attrs))

    def with_attr(self, attribute: str) -> VoidElement:
        """Return a copy holding ``attribute`` as its only attribute."""
        return replace(self, attrs=(attribute,))


@dataclass(frozen=True)
class TextNode(HtmlNode):
    """Literal text; ``&``, ``<`` and ``>`` are escaped on output."""

    content: str


@dataclass(frozen=True)
class RawNode(HtmlNode):
    """Markup written out verbatim."""

    content: str


@dataclass(frozen=True)
class CommentNode(HtmlNode):
    """HTML comment."""

    content: str


@dataclass(frozen=True)
class Empty(HtmlNode):
    """Node that produces no output."""


@dataclass(frozen=True)
class Doctype(HtmlNode):
    """Document type declaration wrapping the whole document."""

    child: HtmlNode


@dataclass(frozen=True)
class HtmlRoot(HtmlNode):
    """The ``html`` element; always exactly a head and a body."""

    head: Element
    body: Element


EMPTY = Empty()

AnyNode = Union[Element, VoidElement, TextNode, RawNode, CommentNode, Empty, Doctype, HtmlRoot]


def element(tag: str, *children: HtmlNode, attrs: Iterable[str] = ()) -> Element:
    """Build a container element.

    Examples
    --------
    >>> element("p", text("hello"), attrs=[attr("class", "lead")])
    Element(tag='p', attrs=('class="lead"',), children=(TextNode(content='hello'),))

    """
    return Element(tag=tag, attrs=tuple(attrs), children=tuple(children))


def void(tag: str, attrs: Iterable[str] = ()) -> VoidElement:
    """Build a void element."""
    return VoidElement(tag=tag, attrs=tuple(attrs))


def text(content: str) -> TextNode:
    """Build a text node."""
    return TextNode(content=content)


def collect_text(nodes: Iterable[HtmlNode]) -> str:
    """Concatenate the payloads of every text node below ``nodes``, in order.

    Markup is dropped: only :class:`TextNode` payloads contribute. Raw and
    comment payloads are ignored.

    Parameters
    ----------
    nodes : iterable of HtmlNode
        Root nodes to walk

    Returns
    -------
    str
        The visible text

    """
    parts: list[str] = []
    stack = list(nodes)[::-1]
    while stack:
        node = stack.pop()
        if isinstance(node, TextNode):
            parts.append(node.content)
        elif isinstance(node, Element):
            stack.extend(reversed(node.children))
        elif isinstance(node, Doctype):
            stack.append(node.child)
        elif isinstance(node, HtmlRoot):
            stack.extend([node.body, node.head])
    return "".join(parts)


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
    "text",
    "void",
]
