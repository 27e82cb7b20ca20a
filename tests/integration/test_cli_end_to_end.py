#  Copyright (c) 2025 Tom Villani, Ph.D.

"""End-to-end tests of the md2html command."""

import json
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from md2html.cli import main
from md2html.cli.builder import EXIT_FILE_ERROR, EXIT_PARSING_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_ERROR


@pytest.fixture
def workspace(temp_dir: Path, sample_post: str, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Provide a working directory holding a post."""
    for name in ("MD2HTML_CONFIG", "MD2HTML_DOMAIN", "MD2HTML_OUT_DIR", "MD2HTML_FORCE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(temp_dir)
    (temp_dir / "post.md").write_text(sample_post, encoding="utf-8")
    return temp_dir


@pytest.mark.integration
@pytest.mark.cli
class TestCommand:
    """Test complete command runs."""

    def test_basic_run(self, workspace: Path) -> None:
        """Test the page and stylesheet are written with defaults."""
        assert main(["post.md", "--no-config"]) == EXIT_SUCCESS

        out = workspace / "out"
        soup = BeautifulSoup((out / "post.html").read_text(encoding="utf-8"), "html.parser")
        assert soup.title.string == "Hello World"
        assert (out / "styles.css").is_file()
        assert "\n" not in (out / "styles.css").read_text(encoding="utf-8").strip()
        assert not (out / "logo.png").exists()
        assert not (out / "post.md.ast").exists()

    def test_custom_assets_and_dumps(self, workspace: Path) -> None:
        """Test custom output directory, logo, stylesheet and tree dumps."""
        (workspace / "site.css").write_text("body {\n    color: red;\n}\n", encoding="utf-8")
        (workspace / "brand.png").write_bytes(b"\x89PNG fake")

        code = main(
            ["post.md", "--no-config", "-o", "public", "-s", "site.css", "-l", "brand.png", "-O", "-d", "example.com"]
        )
        assert code == EXIT_SUCCESS

        public = workspace / "public"
        html = (public / "post.html").read_text(encoding="utf-8")
        soup = BeautifulSoup(html, "html.parser")
        assert soup.find("link", rel="icon")["href"] == "logo.png"
        assert "color:red" in soup.head.style.string
        assert (public / "logo.png").read_bytes() == b"\x89PNG fake"
        assert "color:red" in (public / "styles.css").read_text(encoding="utf-8")

        markdown_tree = json.loads((public / "post.md.ast").read_text(encoding="utf-8"))
        assert markdown_tree["node_type"] == "Document"
        html_tree = json.loads((public / "post.html.ast").read_text(encoding="utf-8"))
        assert html_tree["node_type"] == "Doctype"

    def test_existing_assets_kept_without_force(self, workspace: Path) -> None:
        """Test the stylesheet in the output is only replaced with --force."""
        out = workspace / "out"
        out.mkdir()
        (out / "styles.css").write_text("kept", encoding="utf-8")

        assert main(["post.md", "--no-config"]) == EXIT_SUCCESS
        assert (out / "styles.css").read_text(encoding="utf-8") == "kept"

        assert main(["post.md", "--no-config", "--force"]) == EXIT_SUCCESS
        assert (out / "styles.css").read_text(encoding="utf-8") != "kept"

    def test_config_file(self, workspace: Path) -> None:
        """Test options from a configuration file."""
        (workspace / ".md2html.toml").write_text('out-dir = "from-config"\noutput_ast = true\n', encoding="utf-8")
        assert main(["post.md"]) == EXIT_SUCCESS
        assert (workspace / "from-config" / "post.html").is_file()
        assert (workspace / "from-config" / "post.md.ast").is_file()

    def test_command_line_beats_config(self, workspace: Path) -> None:
        """Test command line options override the configuration file."""
        config = workspace / "settings.json"
        config.write_text(json.dumps({"out_dir": "from-config"}), encoding="utf-8")
        assert main(["post.md", "--config", str(config), "-o", "from-cli"]) == EXIT_SUCCESS
        assert (workspace / "from-cli" / "post.html").is_file()
        assert not (workspace / "from-config").exists()


@pytest.mark.integration
@pytest.mark.cli
class TestFailures:
    """Test failing runs and their exit codes."""

    def test_missing_input(self, workspace: Path, capsys: pytest.CaptureFixture) -> None:
        """Test a missing input file."""
        assert main(["missing.md", "--no-config"]) == EXIT_FILE_ERROR
        assert "Error:" in capsys.readouterr().err
        assert not (workspace / "out").exists()

    def test_missing_front_matter(self, workspace: Path) -> None:
        """Test nothing is written when the post has no front matter."""
        (workspace / "bare.md").write_text("# Just a heading\n", encoding="utf-8")
        assert main(["bare.md", "--no-config"]) == EXIT_VALIDATION_ERROR
        assert not (workspace / "out" / "bare.html").exists()

    def test_invalid_front_matter(self, workspace: Path) -> None:
        """Test invalid front matter is a parsing failure."""
        (workspace / "bad.md").write_text('+++\ntitle = "x\n+++\n\nBody\n', encoding="utf-8")
        assert main(["bad.md", "--no-config"]) == EXIT_PARSING_ERROR

    def test_missing_explicit_stylesheet(self, workspace: Path) -> None:
        """Test a stylesheet given explicitly must exist."""
        assert main(["post.md", "--no-config", "-s", "nope.css"]) == EXIT_FILE_ERROR

    def test_missing_explicit_logo(self, workspace: Path) -> None:
        """Test a missing explicit logo leaves no page behind."""
        assert main(["post.md", "--no-config", "-o", "out", "-l", "./nope.png"]) == EXIT_FILE_ERROR
        assert not (workspace / "out" / "post.html").exists()
        assert not list(workspace.glob("out/*.html"))

    def test_invalid_config_file(self, workspace: Path) -> None:
        """Test an unknown configuration key is a validation failure."""
        config = workspace / "settings.yaml"
        config.write_text("colour: red\n", encoding="utf-8")
        assert main(["post.md", "--config", str(config)]) == EXIT_VALIDATION_ERROR
