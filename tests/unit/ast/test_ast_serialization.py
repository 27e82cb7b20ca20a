#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for input tree JSON serialization."""

import json

import pytest

from md2html.ast import (
    Document,
    FootnoteReference,
    FrontMatter,
    Heading,
    Link,
    List,
    Paragraph,
    ShortCode,
    Table,
    TableCell,
    TableRow,
    TaskItem,
    Text,
)
from md2html.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast


def _sample_document() -> Document:
    return Document(
        children=[
            FrontMatter(content='+++\ntitle = "Hi"\n+++\n'),
            Heading(level=2, children=[Text(content="Café")]),
            Paragraph(
                children=[
                    Link(url="https://example.com", title="Ex", children=[Text(content="link")]),
                    FootnoteReference(label="1"),
                    ShortCode(code="smile", emoji="😄"),
                ]
            ),
            List(ordered=True, start=3, children=[TaskItem(marker=None, children=[Paragraph()])]),
            Table(
                alignments=["left", None],
                children=[TableRow(is_header=True, children=[TableCell(), TableCell()])],
            ),
        ]
    )


@pytest.mark.unit
class TestAstToDict:
    """Test conversion of nodes to dictionaries."""

    def test_node_type_and_fields(self) -> None:
        """Test a leaf node serializes its kind and fields."""
        assert ast_to_dict(Text(content="hi")) == {"node_type": "Text", "content": "hi"}

    def test_children_are_recursive(self) -> None:
        """Test nested children become nested dictionaries."""
        data = ast_to_dict(Heading(level=1, children=[Text(content="a")]))
        assert data["node_type"] == "Heading"
        assert data["level"] == 1
        assert data["children"] == [{"node_type": "Text", "content": "a"}]

    def test_optional_fields_are_kept(self) -> None:
        """Test None markers and alignments survive serialization."""
        data = ast_to_dict(TaskItem(marker=None))
        assert data["marker"] is None


@pytest.mark.unit
class TestJsonRoundTrip:
    """Test JSON dump and load of whole trees."""

    def test_round_trip_preserves_tree(self) -> None:
        """Test a document survives dump and load unchanged."""
        doc = _sample_document()
        assert json_to_ast(ast_to_json(doc, indent=2)) == doc

    def test_schema_version_and_unicode(self) -> None:
        """Test the dump carries a schema version and readable unicode."""
        dumped = ast_to_json(_sample_document())
        assert json.loads(dumped)["schema_version"] == 1
        assert "Café" in dumped
        assert "😄" in dumped

    def test_missing_schema_version_is_accepted(self) -> None:
        """Test a dump without schema_version loads as version 1."""
        assert json_to_ast('{"node_type": "Text", "content": "x"}') == Text(content="x")

    def test_unsupported_schema_version(self) -> None:
        """Test an unknown schema version is rejected."""
        with pytest.raises(ValueError):
            json_to_ast('{"schema_version": 99, "node_type": "Text", "content": "x"}')

    def test_unknown_node_type(self) -> None:
        """Test an unknown node kind is rejected."""
        with pytest.raises(ValueError, match="Unknown node type"):
            dict_to_ast({"node_type": "Spoiler"})

    def test_missing_node_type(self) -> None:
        """Test a dictionary without node_type is rejected."""
        with pytest.raises(ValueError):
            dict_to_ast({"content": "x"})
