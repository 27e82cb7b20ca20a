#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/dom/writer.py
"""Serialization of output node trees.

:func:`to_html` renders a tree to markup. The output is deterministic: the
same tree always produces the same string, and writing never fails for a
well-formed tree.

:func:`node_to_dict` renders a tree to plain dicts for the ``.html.ast``
debug dump.

"""

from __future__ import annotations

import html
import json
from typing import Any, Callable

from md2html.dom.nodes import (
    CommentNode,
    Doctype,
    Element,
    Empty,
    HtmlNode,
    HtmlRoot,
    RawNode,
    TextNode,
    VoidElement,
)


def _open_tag(tag: str, attrs: tuple[str, ...]) -> str:
    if attrs:
        return f"<{tag} {' '.join(attrs)}>"
    return f"<{tag}>"


def _write_element(node: Element, out: list[str]) -> None:
    out.append(_open_tag(node.tag, node.attrs))
    for child in node.children:
        _write(child, out)
    out.append(f"</{node.tag}>")


def _write_void(node: VoidElement, out: list[str]) -> None:
    out.append(_open_tag(node.tag, node.attrs))


def _write_text(node: TextNode, out: list[str]) -> None:
    out.append(html.escape(node.content, quote=False))


def _write_raw(node: RawNode, out: list[str]) -> None:
    out.append(node.content)


def _write_comment(node: CommentNode, out: list[str]) -> None:
    out.append(f"\n<!-- {node.content} -->")


def _write_empty(node: Empty, out: list[str]) -> None:
    pass


def _write_doctype(node: Doctype, out: list[str]) -> None:
    out.append("<!DOCTYPE html>\n")
    _write(node.child, out)


def _write_root(node: HtmlRoot, out: list[str]) -> None:
    out.append('<html lang="en">')
    _write_element(node.head, out)
    _write_element(node.body, out)
    out.append("</html>")


# Dispatch table mapping node types to their writers
_WRITE_DISPATCH: dict[type, Callable[[Any, list[str]], None]] = {
    Element: _write_element,
    VoidElement: _write_void,
    TextNode: _write_text,
    RawNode: _write_raw,
    CommentNode: _write_comment,
    Empty: _write_empty,
    Doctype: _write_doctype,
    HtmlRoot: _write_root,
}


def _write(node: HtmlNode, out: list[str]) -> None:
    writer = _WRITE_DISPATCH.get(type(node))
    if writer is None:
        raise TypeError(f"Unknown output node type: {type(node).__name__}")
    writer(node, out)


def to_html(node: HtmlNode) -> str:
    """Serialize an output tree to HTML.

    Parameters
    ----------
    node : HtmlNode
        Root of the tree, usually a :class:`Doctype`

    Returns
    -------
    str
        The serialized markup

    Examples
    --------
    >>> from md2html.dom.nodes import attr, element, text
    >>> to_html(element("p", text("a < b"), attrs=[attr("class", "x")]))
    '<p class="x">a &lt; b</p>'

    """
    out: list[str] = []
    _write(node, out)
    return "".join(out)


def node_to_dict(node: HtmlNode) -> dict[str, Any]:
    """Convert an output tree to nested dictionaries.

    Parameters
    ----------
    node : HtmlNode
        The node to convert

    Returns
    -------
    dict
        Dictionary with a ``node_type`` key and the node's payload

    """
    if isinstance(node, Element):
        return {
            "node_type": "Element",
            "tag": node.tag,
            "attrs": list(node.attrs),
            "children": [node_to_dict(child) for child in node.children],
        }
    if isinstance(node, VoidElement):
        return {"node_type": "VoidElement", "tag": node.tag, "attrs": list(node.attrs)}
    if isinstance(node, (TextNode, RawNode, CommentNode)):
        return {"node_type": type(node).__name__, "content": node.content}
    if isinstance(node, Doctype):
        return {"node_type": "Doctype", "child": node_to_dict(node.child)}
    if isinstance(node, HtmlRoot):
        return {"node_type": "HtmlRoot", "head": node_to_dict(node.head), "body": node_to_dict(node.body)}
    return {"node_type": "Empty"}


def html_to_json(node: HtmlNode, indent: int | None = None) -> str:
    """Serialize an output tree to JSON for the ``.html.ast`` dump."""
    return json.dumps(node_to_dict(node), indent=indent, ensure_ascii=False)


__all__ = ["html_to_json", "node_to_dict", "to_html"]
