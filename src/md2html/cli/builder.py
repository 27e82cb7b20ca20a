"""Argument parser and exit codes for the md2html CLI."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/md2html/cli/builder.py

import argparse
import difflib
from pathlib import Path

from pygments.styles import get_all_styles

from md2html.cli.actions import EnvironmentAwareAction, EnvironmentAwareBooleanAction
from md2html.constants import (
    DEFAULT_DOMAIN,
    DEFAULT_HIGHLIGHT_STYLE,
    DEFAULT_LOGO_PATH,
    DEFAULT_OUT_DIR,
    DEFAULT_READING_SPEED,
    DEFAULT_STYLE_SHEET_PATH,
)
from md2html.exceptions import (
    ConfigurationError,
    FileError,
    InternalConsistencyError,
    ParsingError,
)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


def validate_pygments_theme(theme_name: str) -> str:
    """Validate that a Pygments theme name is valid.

    Raises
    ------
    argparse.ArgumentTypeError
        If theme name is not valid

    """
    available_themes = list(get_all_styles())
    if theme_name not in available_themes:
        suggestions = sorted(difflib.get_close_matches(theme_name, available_themes))
        raise argparse.ArgumentTypeError(
            f"Invalid Pygments theme '{theme_name}'. "
            f"Did you mean: {', '.join(suggestions)}... "
            f"See https://pygments.org/styles/ for full list."
        )
    return theme_name


def positive_int(value: str) -> int:
    """Parse a strictly positive integer argument."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"{value} is not a valid integer") from e
    if number <= 0:
        raise argparse.ArgumentTypeError(f"{value} is not a positive integer")
    return number


def get_version() -> str:
    """Get the installed version of md2html."""
    from md2html import __version__

    return __version__


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Every option except ``--config`` and ``--no-config`` defaults to ``None``
    unless set through an ``MD2HTML_*`` environment variable, so that
    configuration file values can be applied to the options left unset.

    """
    parser = argparse.ArgumentParser(
        prog="md2html",
        description="Convert a Markdown blog post with TOML front matter into a standalone HTML page.",
        epilog="Options can also be set with MD2HTML_<OPTION> environment variables or a .md2html.toml file.",
    )

    parser.add_argument("file_path", type=Path, metavar="FILE", help="Markdown file to convert")

    parser.add_argument(
        "-o",
        "--out-dir",
        action=EnvironmentAwareAction,
        type=Path,
        default=None,
        help=f"Output directory (default: {DEFAULT_OUT_DIR})",
    )
    parser.add_argument(
        "-d",
        "--domain",
        action=EnvironmentAwareAction,
        default=None,
        help=f"Site domain used for tag, author and external links (default: {DEFAULT_DOMAIN})",
    )
    parser.add_argument(
        "-s",
        "--style-sheet",
        action=EnvironmentAwareAction,
        type=Path,
        default=None,
        help=f"Stylesheet embedded in the page and copied to the output (default: {DEFAULT_STYLE_SHEET_PATH})",
    )
    parser.add_argument(
        "-l",
        "--logo",
        action=EnvironmentAwareAction,
        type=Path,
        default=None,
        help=f"Logo copied to the output directory (default: {DEFAULT_LOGO_PATH})",
    )
    parser.add_argument(
        "-O",
        "--output-ast",
        action=EnvironmentAwareBooleanAction,
        default=None,
        help="Also write the input and output trees as .md.ast and .html.ast JSON files",
    )
    parser.add_argument(
        "-F",
        "--force",
        action=EnvironmentAwareBooleanAction,
        default=None,
        help="Overwrite the logo and stylesheet in the output directory",
    )
    parser.add_argument(
        "-v", "--verbose", action=EnvironmentAwareBooleanAction, default=None, help="Log progress information"
    )
    parser.add_argument(
        "--debug",
        action=EnvironmentAwareBooleanAction,
        default=None,
        help="Log debug information with timestamps",
    )
    parser.add_argument(
        "--log-file", action=EnvironmentAwareAction, type=Path, default=None, help="Also write logs to this file"
    )
    parser.add_argument(
        "--highlight-style",
        action=EnvironmentAwareAction,
        type=validate_pygments_theme,
        default=None,
        help=f"Pygments style for code blocks (default: {DEFAULT_HIGHLIGHT_STYLE})",
    )
    parser.add_argument(
        "--reading-speed",
        action=EnvironmentAwareAction,
        type=positive_int,
        default=None,
        help=f"Words per minute for the reading time estimate (default: {DEFAULT_READING_SPEED})",
    )

    config_group = parser.add_mutually_exclusive_group()
    config_group.add_argument("--config", type=str, help="Configuration file (.toml, .yaml, .yml or .json)")
    config_group.add_argument(
        "--no-config", action="store_true", help="Ignore configuration files and MD2HTML_CONFIG"
    )

    parser.add_argument("--version", "-V", action="version", version=f"md2html {get_version()}")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ConfigurationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, InternalConsistencyError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


__all__ = [
    "EXIT_ERROR",
    "EXIT_FILE_ERROR",
    "EXIT_PARSING_ERROR",
    "EXIT_RENDERING_ERROR",
    "EXIT_SUCCESS",
    "EXIT_VALIDATION_ERROR",
    "create_parser",
    "get_exit_code_for_exception",
    "positive_int",
    "validate_pygments_theme",
]
