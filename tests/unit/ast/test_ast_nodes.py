#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for input tree nodes and the visitor base class."""

import re
from dataclasses import MISSING, fields

import pytest

from md2html.ast import (
    Document,
    Heading,
    NodeVisitor,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
    get_node_children,
)
from md2html.ast.nodes import iter_node_types

# Values for node fields without defaults
_REQUIRED_VALUES = {"content": "x", "level": 1, "label": "1", "url": "/", "code": "smile", "emoji": "😄"}


def _visit_name(node_class: type) -> str:
    return "visit_" + re.sub(r"(?<!^)(?=[A-Z][a-z])", "_", node_class.__name__).lower()


def _build(node_class: type):
    kwargs = {
        f.name: _REQUIRED_VALUES[f.name]
        for f in fields(node_class)
        if f.default is MISSING and f.default_factory is MISSING
    }
    return node_class(**kwargs)


def _recording_visitor_class(skip: str | None = None) -> type:
    methods = {
        name: (lambda self, node, name=name: name) for name in NodeVisitor.__abstractmethods__ if name != skip
    }
    return type("RecordingVisitor", (NodeVisitor,), methods)


@pytest.mark.unit
class TestNodeConstruction:
    """Test node construction and validation."""

    def test_heading_level_bounds(self) -> None:
        """Test heading levels outside 1-6 are rejected."""
        assert Heading(level=6).level == 6
        with pytest.raises(ValueError):
            Heading(level=0)
        with pytest.raises(ValueError):
            Heading(level=7)

    def test_children_default_to_empty_lists(self) -> None:
        """Test container nodes get independent empty child lists."""
        first = Paragraph()
        second = Paragraph()
        first.children.append(Text(content="a"))
        assert second.children == []

    def test_get_node_children(self) -> None:
        """Test get_node_children for containers and leaves."""
        heading = Heading(level=1, children=[Text(content="Hello"), Strong(children=[Text(content="world")])])
        assert len(get_node_children(heading)) == 2
        assert get_node_children(Text(content="leaf")) == []
        assert get_node_children(ThematicBreak()) == []


@pytest.mark.unit
class TestVisitorExhaustiveness:
    """Test that every node kind has exactly one visitor method."""

    def test_one_abstract_method_per_kind(self) -> None:
        """Test the visitor declares a visit method for every node kind."""
        expected = {_visit_name(node_class) for node_class in iter_node_types()}
        assert set(NodeVisitor.__abstractmethods__) == expected

    def test_every_kind_dispatches_to_its_method(self) -> None:
        """Test accept() calls the matching visit method for each kind."""
        visitor = _recording_visitor_class()()
        for node_class in iter_node_types():
            assert _build(node_class).accept(visitor) == _visit_name(node_class)

    @pytest.mark.parametrize("missing", ["visit_text", "visit_short_code", "visit_task_item", "visit_front_matter"])
    def test_missing_method_prevents_instantiation(self, missing: str) -> None:
        """Test a visitor lacking any visit method cannot be created."""
        incomplete = _recording_visitor_class(skip=missing)
        with pytest.raises(TypeError):
            incomplete()

    def test_document_accept(self) -> None:
        """Test a whole document dispatches to visit_document."""
        visitor = _recording_visitor_class()()
        assert Document(children=[Paragraph()]).accept(visitor) == "visit_document"
