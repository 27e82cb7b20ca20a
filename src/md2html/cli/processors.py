"""Option resolution and the conversion run behind the md2html command."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/md2html/cli/processors.py

import argparse
import logging
from pathlib import Path
from typing import Any, Dict

from md2html.api import convert
from md2html.ast.serialization import ast_to_json
from md2html.cli.builder import positive_int, validate_pygments_theme
from md2html.constants import (
    DEFAULT_DOMAIN,
    DEFAULT_HIGHLIGHT_STYLE,
    DEFAULT_LOGO_PATH,
    DEFAULT_OUT_DIR,
    DEFAULT_READING_SPEED,
    DEFAULT_STYLE_SHEET_PATH,
    DEFAULT_STYLESHEET,
    HTML_AST_SUFFIX,
    LOGO_OUTPUT_NAME,
    MARKDOWN_AST_SUFFIX,
    STYLES_OUTPUT_NAME,
)
from md2html.dom.writer import html_to_json
from md2html.exceptions import ConfigurationError, InputReadError
from md2html.options.html import RenderOptions, RunOptions
from md2html.utils.css import minify_css
from md2html.utils.io_utils import copy_file, ensure_directory, format_size, read_text, write_atomic

logger = logging.getLogger(__name__)

_DEFAULTS: Dict[str, Any] = {
    "out_dir": Path(DEFAULT_OUT_DIR),
    "domain": DEFAULT_DOMAIN,
    "style_sheet": Path(DEFAULT_STYLE_SHEET_PATH),
    "logo": Path(DEFAULT_LOGO_PATH),
    "output_ast": False,
    "force": False,
    "verbose": False,
    "debug": False,
    "log_file": None,
    "highlight_style": DEFAULT_HIGHLIGHT_STYLE,
    "reading_speed": DEFAULT_READING_SPEED,
}

_PATH_KEYS = ("out_dir", "style_sheet", "logo", "log_file")
_BOOL_KEYS = ("output_ast", "force", "verbose", "debug")


def _coerce_config_value(key: str, value: Any) -> Any:
    """Convert a configuration file value to the argument's type.

    Raises
    ------
    ConfigurationError
        If the value has the wrong type or fails validation

    """
    if key in _PATH_KEYS:
        if not isinstance(value, str):
            raise ConfigurationError(f"Option '{key}' must be a path string", config_key=key)
        return Path(value)
    if key in _BOOL_KEYS:
        if not isinstance(value, bool):
            raise ConfigurationError(f"Option '{key}' must be true or false", config_key=key)
        return value
    try:
        if key == "reading_speed":
            return positive_int(str(value))
        if key == "highlight_style":
            return validate_pygments_theme(str(value))
    except argparse.ArgumentTypeError as e:
        raise ConfigurationError(f"Option '{key}': {e}", config_key=key, original_error=e) from e
    return str(value)


def resolve_settings(parsed_args: argparse.Namespace, config: Dict[str, Any]) -> Dict[str, Any]:
    """Resolve every option from arguments, configuration and defaults.

    ``parsed_args`` already carries environment values, so the resulting
    priority is command line, environment, configuration file, defaults.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command line
    config : dict
        Normalized configuration file contents

    Returns
    -------
    dict
        One resolved value per option

    """
    settings: Dict[str, Any] = {}
    for key, default in _DEFAULTS.items():
        value = getattr(parsed_args, key, None)
        if value is None and key in config:
            value = _coerce_config_value(key, config[key])
        settings[key] = default if value is None else value
    return settings


def load_stylesheet(path: Path) -> str:
    """Read the base stylesheet.

    A missing file at the default location falls back to the built-in
    stylesheet; any other missing file is an error.

    Raises
    ------
    InputReadError
        If a stylesheet given explicitly cannot be read

    """
    if not path.exists() and path == Path(DEFAULT_STYLE_SHEET_PATH):
        logger.warning(f"Stylesheet \"{path}\" not found, using the built-in stylesheet")
        return DEFAULT_STYLESHEET
    return read_text(path)


def build_options(settings: Dict[str, Any], file_path: Path) -> tuple[RunOptions, RenderOptions]:
    """Build the run and render options from resolved settings.

    Raises
    ------
    InputReadError
        If an explicitly given stylesheet or logo does not exist

    """
    run_options = RunOptions(
        file_path=file_path,
        out_dir=settings["out_dir"],
        style_sheet=settings["style_sheet"],
        logo=settings["logo"],
        output_ast=settings["output_ast"],
        force=settings["force"],
        verbose=settings["verbose"],
        debug=settings["debug"],
        log_file=settings["log_file"],
    )

    _check_logo(run_options)
    logo_available = run_options.logo.is_file() or (run_options.out_dir / LOGO_OUTPUT_NAME).is_file()
    render_options = RenderOptions(
        domain=settings["domain"],
        stylesheet=load_stylesheet(run_options.style_sheet),
        logo=LOGO_OUTPUT_NAME if logo_available else None,
        reading_speed=settings["reading_speed"],
        highlight_style=settings["highlight_style"],
    )
    return run_options, render_options


def _check_logo(run_options: RunOptions) -> None:
    """Fail before anything is written when an explicit logo would be copied but is missing."""
    if run_options.logo == Path(DEFAULT_LOGO_PATH) or run_options.logo.is_file():
        return
    if (run_options.out_dir / LOGO_OUTPUT_NAME).exists() and not run_options.force:
        return
    raise InputReadError(str(run_options.logo), message=f"File not found: {run_options.logo}")


def _write_logo(run_options: RunOptions) -> None:
    destination = run_options.out_dir / LOGO_OUTPUT_NAME
    if destination.exists() and not run_options.force:
        logger.debug(f"Keeping existing logo \"{destination}\"")
        return
    if not run_options.logo.is_file() and run_options.logo == Path(DEFAULT_LOGO_PATH):
        logger.warning(f"Logo \"{run_options.logo}\" not found, skipping")
        return
    size = copy_file(run_options.logo, destination)
    logger.info(f"Copied logo ({format_size(size)}) to \"{destination}\"")


def _write_styles(run_options: RunOptions, stylesheet: str) -> None:
    destination = run_options.out_dir / STYLES_OUTPUT_NAME
    if destination.exists() and not run_options.force:
        logger.debug(f"Keeping existing stylesheet \"{destination}\"")
        return
    size = write_atomic(minify_css(stylesheet), destination)
    logger.info(f"Wrote minified stylesheet ({format_size(size)}) to \"{destination}\"")


def run_conversion(run_options: RunOptions, render_options: RenderOptions) -> Path:
    """Convert the input file and write every output.

    Nothing is written until the page has been fully rendered.

    Returns
    -------
    Path
        Path of the written HTML file

    Raises
    ------
    Md2HtmlError
        Any read, parse, render or write failure

    """
    markdown = read_text(run_options.file_path)
    result = convert(markdown, render_options=render_options)

    out_dir = ensure_directory(run_options.out_dir)
    stem = run_options.file_path.stem

    html_path = out_dir / f"{stem}.html"
    size = write_atomic(result.html, html_path)
    logger.info(f"Wrote ({format_size(size)}) to \"{html_path}\"")

    if run_options.output_ast:
        for suffix, payload in (
            (MARKDOWN_AST_SUFFIX, ast_to_json(result.document, indent=2)),
            (HTML_AST_SUFFIX, html_to_json(result.tree, indent=2)),
        ):
            dump_path = out_dir / f"{stem}{suffix}"
            size = write_atomic(payload, dump_path)
            logger.info(f"Wrote ({format_size(size)}) to \"{dump_path}\"")

    _write_logo(run_options)
    _write_styles(run_options, render_options.stylesheet)
    return html_path


__all__ = ["build_options", "load_stylesheet", "resolve_settings", "run_conversion"]
