#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for CSS minification and file I/O helpers."""

from pathlib import Path

import pytest

from md2html.exceptions import InputReadError, OutputWriteError
from md2html.utils.css import combine_styles, minify_css
from md2html.utils.io_utils import copy_file, ensure_directory, format_size, read_text, write_atomic


@pytest.mark.unit
class TestCss:
    """Test stylesheet minification."""

    def test_minify_removes_whitespace_and_comments(self) -> None:
        """Test comments and insignificant whitespace are dropped."""
        css = "/* header */\nbody {\n    color: red\n}\n"
        assert minify_css(css) == "body{color:red}"

    def test_combine_appends_rules_after_base(self) -> None:
        """Test generated rules follow the base stylesheet."""
        combined = combine_styles("body { margin: 0 }", [".table-1 td:nth-child(1) { text-align: left }"])
        assert combined == "body{margin:0}.table-1 td:nth-child(1){text-align:left}"

    def test_combine_without_rules(self) -> None:
        """Test combining with no rules just minifies the base."""
        assert combine_styles("p { color: blue }", []) == "p{color:blue}"


@pytest.mark.unit
class TestFormatSize:
    """Test human readable sizes."""

    @pytest.mark.parametrize(
        "size,expected",
        [(0, "0.0 B"), (512, "512.0 B"), (12595, "12.3 KiB"), (5 * 1024**2, "5.0 MiB"), (3 * 1024**3, "3.0 GiB")],
    )
    def test_units(self, size: int, expected: str) -> None:
        """Test unit selection and rounding."""
        assert format_size(size) == expected


@pytest.mark.unit
class TestFileHelpers:
    """Test reading, atomic writing and copying."""

    def test_read_text(self, temp_dir: Path) -> None:
        """Test UTF-8 files are read."""
        path = temp_dir / "post.md"
        path.write_text("héllo", encoding="utf-8")
        assert read_text(path) == "héllo"

    def test_read_missing_file(self, temp_dir: Path) -> None:
        """Test a missing input raises InputReadError."""
        with pytest.raises(InputReadError) as exc_info:
            read_text(temp_dir / "missing.md")
        assert exc_info.value.file_path.endswith("missing.md")

    def test_read_invalid_utf8(self, temp_dir: Path) -> None:
        """Test undecodable input raises InputReadError."""
        path = temp_dir / "bad.md"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(InputReadError):
            read_text(path)

    def test_write_atomic_returns_size(self, temp_dir: Path) -> None:
        """Test the written byte count and content."""
        path = temp_dir / "out.html"
        assert write_atomic("é", path) == 2
        assert path.read_text(encoding="utf-8") == "é"

    def test_write_atomic_replaces_existing(self, temp_dir: Path) -> None:
        """Test an existing file is replaced and no temp files remain."""
        path = temp_dir / "out.html"
        path.write_text("old", encoding="utf-8")
        write_atomic(b"new", path)
        assert path.read_text(encoding="utf-8") == "new"
        assert [p.name for p in temp_dir.iterdir()] == ["out.html"]

    def test_write_atomic_missing_directory(self, temp_dir: Path) -> None:
        """Test writing into a missing directory raises OutputWriteError."""
        with pytest.raises(OutputWriteError):
            write_atomic("x", temp_dir / "nope" / "out.html")

    def test_copy_file(self, temp_dir: Path) -> None:
        """Test copying returns the copied size."""
        source = temp_dir / "logo.src"
        source.write_bytes(b"\x89PNG....")
        assert copy_file(source, temp_dir / "logo.png") == 8
        assert (temp_dir / "logo.png").read_bytes() == b"\x89PNG...."

    def test_copy_missing_source(self, temp_dir: Path) -> None:
        """Test copying a missing file raises InputReadError."""
        with pytest.raises(InputReadError):
            copy_file(temp_dir / "missing.png", temp_dir / "logo.png")

    def test_ensure_directory(self, temp_dir: Path) -> None:
        """Test nested directories are created and existing ones kept."""
        target = temp_dir / "a" / "b"
        assert ensure_directory(target) == target
        assert target.is_dir()
        assert ensure_directory(target) == target
