#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for option dataclasses."""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from md2html.options import MarkdownParserOptions, RenderOptions, RunOptions


@pytest.mark.unit
class TestRenderOptions:
    """Test rendering options."""

    def test_defaults(self) -> None:
        """Test default values."""
        options = RenderOptions()
        assert options.domain == "localhost"
        assert options.logo is None
        assert options.reading_speed == 120
        assert options.highlight_style == "monokai"
        assert "body" in options.stylesheet

    def test_create_updated(self) -> None:
        """Test cloning with changes leaves the original untouched."""
        options = RenderOptions()
        updated = options.create_updated(domain="example.com", logo="logo.png")
        assert updated.domain == "example.com"
        assert updated.logo == "logo.png"
        assert options.domain == "localhost"

    def test_frozen(self) -> None:
        """Test options cannot be modified in place."""
        with pytest.raises(FrozenInstanceError):
            RenderOptions().domain = "x"  # type: ignore[misc]

    def test_reading_speed_must_be_positive(self) -> None:
        """Test an invalid reading speed is rejected."""
        with pytest.raises(ValueError):
            RenderOptions(reading_speed=0)


@pytest.mark.unit
class TestOtherOptions:
    """Test parser and run options."""

    def test_parser_defaults(self) -> None:
        """Test every extension is enabled by default."""
        options = MarkdownParserOptions()
        assert options.parse_front_matter and options.parse_tables and options.parse_footnotes
        assert options.default_code_info == "txt"
        assert options.create_updated(parse_tables=False).parse_tables is False

    def test_run_defaults(self) -> None:
        """Test run option defaults."""
        options = RunOptions(file_path=Path("post.md"))
        assert options.out_dir == Path("out")
        assert options.style_sheet == Path("styles.css")
        assert options.logo == Path("logo.png")
        assert not options.output_ast and not options.force
        assert options.log_file is None
