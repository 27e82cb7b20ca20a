#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for configuration file discovery and loading."""

import json
from pathlib import Path

import pytest

from md2html.cli.config import (
    discover_config_file,
    find_config_in_parents,
    load_config_file,
    load_config_with_priority,
    merge_configs,
    normalize_config,
)
from md2html.exceptions import ConfigurationError


@pytest.mark.unit
@pytest.mark.cli
class TestLoadConfigFile:
    """Test loading each supported format."""

    def test_toml(self, temp_dir: Path) -> None:
        """Test TOML configuration files."""
        path = temp_dir / ".md2html.toml"
        path.write_text('domain = "https://blog.example.com"\nreading-speed = 200\n', encoding="utf-8")
        assert load_config_file(path) == {"domain": "https://blog.example.com", "reading-speed": 200}

    def test_yaml(self, temp_dir: Path) -> None:
        """Test YAML configuration files."""
        path = temp_dir / "settings.yml"
        path.write_text("out_dir: public\nforce: true\n", encoding="utf-8")
        assert load_config_file(path) == {"out_dir": "public", "force": True}

    def test_json(self, temp_dir: Path) -> None:
        """Test JSON configuration files."""
        path = temp_dir / "settings.json"
        path.write_text(json.dumps({"logo": "img/logo.png"}), encoding="utf-8")
        assert load_config_file(path) == {"logo": "img/logo.png"}

    def test_pyproject_section(self, temp_dir: Path) -> None:
        """Test the [tool.md2html] table of pyproject.toml."""
        path = temp_dir / "pyproject.toml"
        path.write_text('[project]\nname = "site"\n\n[tool.md2html]\ndomain = "example.com"\n', encoding="utf-8")
        assert load_config_file(path) == {"domain": "example.com"}

    def test_pyproject_without_section(self, temp_dir: Path) -> None:
        """Test a pyproject.toml without the section gives no options."""
        path = temp_dir / "pyproject.toml"
        path.write_text('[project]\nname = "site"\n', encoding="utf-8")
        assert load_config_file(path) == {}

    def test_missing_file(self, temp_dir: Path) -> None:
        """Test a missing file is a configuration error."""
        with pytest.raises(ConfigurationError, match="does not exist"):
            load_config_file(temp_dir / "missing.toml")

    def test_directory(self, temp_dir: Path) -> None:
        """Test a directory is rejected."""
        with pytest.raises(ConfigurationError, match="not a file"):
            load_config_file(temp_dir)

    def test_unsupported_format(self, temp_dir: Path) -> None:
        """Test unknown extensions are rejected."""
        path = temp_dir / "settings.ini"
        path.write_text("[md2html]\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Unsupported"):
            load_config_file(path)

    @pytest.mark.parametrize(
        "name,content", [("bad.toml", "domain = "), ("bad.json", "{domain"), ("bad.yaml", "a: [unclosed")]
    )
    def test_invalid_syntax(self, temp_dir: Path, name: str, content: str) -> None:
        """Test syntax errors are configuration errors."""
        path = temp_dir / name
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid"):
            load_config_file(path)

    def test_non_mapping(self, temp_dir: Path) -> None:
        """Test a top-level list is rejected."""
        path = temp_dir / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config_file(path)


@pytest.mark.unit
@pytest.mark.cli
class TestDiscovery:
    """Test configuration discovery."""

    def test_found_in_parent(self, temp_dir: Path) -> None:
        """Test a file in a parent directory is found."""
        config = temp_dir / ".md2html.yaml"
        config.write_text("domain: x\n", encoding="utf-8")
        nested = temp_dir / "posts" / "2024"
        nested.mkdir(parents=True)
        assert find_config_in_parents(nested) == config.resolve()

    def test_dedicated_file_wins_over_pyproject(self, temp_dir: Path) -> None:
        """Test dedicated files are checked before pyproject.toml."""
        (temp_dir / "pyproject.toml").write_text('[tool.md2html]\ndomain = "a"\n', encoding="utf-8")
        dedicated = temp_dir / ".md2html.toml"
        dedicated.write_text('domain = "b"\n', encoding="utf-8")
        assert find_config_in_parents(temp_dir) == dedicated.resolve()

    def test_pyproject_without_section_is_skipped(self, temp_dir: Path) -> None:
        """Test pyproject.toml only counts when it has the section."""
        project = temp_dir / "project"
        project.mkdir()
        (project / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
        dedicated = temp_dir / ".md2html.json"
        dedicated.write_text("{}", encoding="utf-8")
        assert find_config_in_parents(project) == dedicated.resolve()

    def test_home_directory_fallback(self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the home directory is searched last."""
        home = temp_dir / "home"
        home.mkdir()
        config = home / ".md2html.toml"
        config.write_text('domain = "home"\n', encoding="utf-8")
        monkeypatch.setattr("md2html.cli.config.find_config_in_parents", lambda start_dir=None: None)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
        assert discover_config_file() == config


@pytest.mark.unit
@pytest.mark.cli
class TestPriority:
    """Test which configuration file is used."""

    def test_explicit_path_first(self, temp_dir: Path) -> None:
        """Test --config wins over MD2HTML_CONFIG."""
        explicit = temp_dir / "a.json"
        explicit.write_text('{"domain": "explicit"}', encoding="utf-8")
        env = temp_dir / "b.json"
        env.write_text('{"domain": "env"}', encoding="utf-8")
        assert load_config_with_priority(str(explicit), str(env)) == {"domain": "explicit"}
        assert load_config_with_priority(None, str(env)) == {"domain": "env"}

    def test_nothing_found(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test an empty configuration when nothing is discovered."""
        monkeypatch.setattr("md2html.cli.config.discover_config_file", lambda start_dir=None: None)
        assert load_config_with_priority() == {}


@pytest.mark.unit
@pytest.mark.cli
class TestNormalize:
    """Test key normalization and merging."""

    def test_dashes_and_aliases(self) -> None:
        """Test dashed keys and aliases map to argument names."""
        config = {"output-dir": "public", "stylesheet": "s.css", "reading-speed": 200, "domain": "d"}
        assert normalize_config(config) == {
            "out_dir": "public",
            "style_sheet": "s.css",
            "reading_speed": 200,
            "domain": "d",
        }

    def test_unknown_key(self) -> None:
        """Test unknown keys are rejected with the key recorded."""
        with pytest.raises(ConfigurationError) as exc_info:
            normalize_config({"colour": "red"})
        assert exc_info.value.config_key == "colour"

    def test_merge_is_deep(self) -> None:
        """Test nested tables merge rather than replace."""
        merged = merge_configs({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}, "c": 4})
        assert merged == {"a": {"x": 1, "y": 3}, "b": 1, "c": 4}
