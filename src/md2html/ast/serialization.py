#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/ast/serialization.py
"""JSON serialization and deserialization for input tree nodes.

Used for the ``.md.ast`` debug dump written by ``md2html -O``. Every node is
emitted as a dict with a ``node_type`` key naming its class, followed by its
dataclass fields in declaration order; ``children`` lists are serialized
recursively.

Examples
--------
Serialize a tree to JSON:

    >>> from md2html.ast import Document, Heading, Text
    >>> from md2html.ast.serialization import ast_to_json
    >>> doc = Document(children=[Heading(level=1, children=[Text(content="Title")])])
    >>> json_str = ast_to_json(doc, indent=2)

Deserialize it back:

    >>> from md2html.ast.serialization import json_to_ast
    >>> json_to_ast(json_str).children[0].level
    1

"""

from __future__ import annotations

import json
import logging
from dataclasses import fields
from typing import Any

from md2html.ast.nodes import Node, iter_node_types

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

# Node class lookup by name, built once from the closed node set
_NODE_TYPES: dict[str, type[Node]] = {cls.__name__: cls for cls in iter_node_types()}


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a dictionary representation.

    Parameters
    ----------
    node : Node
        The node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If the node is not one of the known node kinds

    Examples
    --------
    >>> from md2html.ast.nodes import Text
    >>> ast_to_dict(Text(content="Hello"))
    {'node_type': 'Text', 'content': 'Hello'}

    """
    node_type = type(node).__name__
    if _NODE_TYPES.get(node_type) is not type(node):
        raise ValueError(f"Unknown node type for serialization: {node_type}")

    result: dict[str, Any] = {"node_type": node_type}
    for f in fields(node):  # type: ignore[arg-type]
        value = getattr(node, f.name)
        if f.name == "children":
            result["children"] = [ast_to_dict(child) for child in value]
        elif isinstance(value, list):
            result[f.name] = list(value)
        else:
            result[f.name] = value
    return result


def dict_to_ast(data: dict[str, Any]) -> Node:
    """Convert a dictionary representation back to a node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node

    Returns
    -------
    Node
        Reconstructed node

    Raises
    ------
    ValueError
        If the dictionary has no ``node_type`` or names an unknown kind

    """
    node_type = data.get("node_type")
    if not node_type:
        raise ValueError("Dictionary must contain 'node_type' field")

    node_class = _NODE_TYPES.get(node_type)
    if node_class is None:
        raise ValueError(f"Unknown node type: {node_type}")

    kwargs: dict[str, Any] = {}
    for f in fields(node_class):  # type: ignore[arg-type]
        if f.name not in data:
            continue
        if f.name == "children":
            kwargs["children"] = [dict_to_ast(child) for child in data["children"]]
        else:
            kwargs[f.name] = data[f.name]
    return node_class(**kwargs)


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize a node to a JSON string with schema versioning.

    Parameters
    ----------
    node : Node
        The node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string, ``{"schema_version": 1, "node_type": ..., ...}``

    """
    versioned_dict = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node)}
    # Keep emoji and accented text readable in the dump
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str) -> Node:
    """Deserialize a JSON string produced by :func:`ast_to_json`.

    A missing ``schema_version`` is read as version 1.

    Raises
    ------
    ValueError
        If the schema version is unsupported or a node kind is unknown
    json.JSONDecodeError
        If the string is not valid JSON

    """
    data = json.loads(json_str)
    schema_version = data.pop("schema_version", SCHEMA_VERSION)
    if schema_version != SCHEMA_VERSION:
        raise ValueError(
            f"Unsupported schema version: {schema_version}. "
            f"This version of md2html supports schema version {SCHEMA_VERSION} only."
        )
    logger.debug(f"Loading {data.get('node_type')} tree from JSON")
    return dict_to_ast(data)


__all__ = [
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
