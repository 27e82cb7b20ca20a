#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the md2html CLI.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML or JSON, and merging configurations with proper
priority handling.
"""

import json
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from md2html.exceptions import ConfigurationError

DEDICATED_CONFIG_FILENAMES = [".md2html.toml", ".md2html.yaml", ".md2html.yml", ".md2html.json"]
CONFIG_FILENAMES = [*DEDICATED_CONFIG_FILENAMES, "pyproject.toml"]

# Keys a configuration file may set, mapped to the argument they feed
CONFIG_KEYS = {
    "out_dir": "out_dir",
    "output_dir": "out_dir",
    "domain": "domain",
    "style_sheet": "style_sheet",
    "stylesheet": "style_sheet",
    "logo": "logo",
    "output_ast": "output_ast",
    "force": "force",
    "verbose": "verbose",
    "debug": "debug",
    "log_file": "log_file",
    "highlight_style": "highlight_style",
    "reading_speed": "reading_speed",
}


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.md2html] section from pyproject.toml.

    Returns
    -------
    dict
        Configuration from [tool.md2html], or an empty dict if absent

    Raises
    ------
    ConfigurationError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}", original_error=e) from e
    except OSError as e:
        raise ConfigurationError(f"Error reading pyproject.toml {pyproject_path}: {e}", original_error=e) from e

    config = data.get("tool", {}).get("md2html")
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"[tool.md2html] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` to the filesystem root, checking each
    directory for ``.md2html.toml``, ``.md2html.yaml``, ``.md2html.yml``,
    ``.md2html.json`` and then ``pyproject.toml`` with a [tool.md2html]
    section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in DEDICATED_CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigurationError:
                # Invalid pyproject.toml, keep searching
                pass

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    The parent directory search comes first, then the dedicated files in the
    user's home directory.

    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in DEDICATED_CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    ConfigurationError
        If the file cannot be read, parsed, or has an unsupported format

    Examples
    --------
    >>> config = load_config_file(".md2html.toml")
    >>> config.get("domain")
    'https://blog.example.com'

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise ConfigurationError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)

    loaders = {
        ".toml": _load_toml_config,
        ".yaml": _load_yaml_config,
        ".yml": _load_yaml_config,
        ".json": _load_json_config,
    }
    loader = loaders.get(ext)
    if loader is None:
        raise ConfigurationError(f"Unsupported config file format: {ext}. Use .toml, .yaml or .json")

    config = loader(config_path)
    if not isinstance(config, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping, got {type(config).__name__}")
    return config


def _load_toml_config(config_path: Path) -> Any:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in config file {config_path}: {e}", original_error=e) from e
    except OSError as e:
        raise ConfigurationError(f"Error reading TOML config {config_path}: {e}", original_error=e) from e


def _load_json_config(config_path: Path) -> Any:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in config file {config_path}: {e}", original_error=e) from e
    except OSError as e:
        raise ConfigurationError(f"Error reading JSON config {config_path}: {e}", original_error=e) from e


def _load_yaml_config(config_path: Path) -> Any:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {config_path}: {e}", original_error=e) from e
    except OSError as e:
        raise ConfigurationError(f"Error reading YAML config {config_path}: {e}", original_error=e) from e


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries with deep merging.

    The override dictionary takes precedence over base for conflicting keys.
    Nested dictionaries are merged recursively, not replaced entirely.

    Examples
    --------
    >>> merge_configs({"domain": "a", "force": True}, {"domain": "b"})
    {'domain': 'b', 'force': True}

    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def normalize_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Map configuration keys onto argument names.

    Keys may use dashes or underscores. Unknown keys are rejected.

    Raises
    ------
    ConfigurationError
        If a key is not a known option

    """
    normalized: Dict[str, Any] = {}
    for key, value in config.items():
        dest = CONFIG_KEYS.get(key.replace("-", "_"))
        if dest is None:
            raise ConfigurationError(f"Unknown configuration option: {key}", config_key=key)
        normalized[dest] = value
    return normalized


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (MD2HTML_CONFIG)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    ConfigurationError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        return load_config_file(discovered_path)

    return {}


__all__ = [
    "CONFIG_FILENAMES",
    "discover_config_file",
    "find_config_in_parents",
    "load_config_file",
    "load_config_with_priority",
    "merge_configs",
    "normalize_config",
]
