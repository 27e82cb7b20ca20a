"""Command-line interface for md2html.

This module provides the ``md2html`` command, which converts one Markdown blog
post into a standalone HTML page in an output directory, next to the site
logo and minified stylesheet.

All options support environment variable defaults using the pattern
MD2HTML_<OPTION_NAME>. Command line arguments override environment variables,
which override configuration file values.

Examples
--------
Basic conversion::

    $ md2html post.md

Custom output directory and domain, with debug dumps::

    $ md2html post.md -o public -d https://blog.example.com -O

Use environment variables for defaults::

    $ export MD2HTML_DOMAIN=https://blog.example.com
    $ md2html post.md

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/md2html/cli/__init__.py

import logging
import os
import sys

from rich.console import Console
from rich.markup import escape

from md2html.cli.builder import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    create_parser,
    get_exit_code_for_exception,
)
from md2html.cli.config import load_config_with_priority, normalize_config
from md2html.cli.processors import build_options, resolve_settings, run_conversion
from md2html.exceptions import Md2HtmlError
from md2html.logging_utils import configure_logging, resolve_log_level

logger = logging.getLogger(__name__)


def main(args: list[str] | None = None) -> int:
    """Run the md2html command and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    console = Console(stderr=True)

    try:
        config = {}
        if not parsed_args.no_config:
            raw_config = load_config_with_priority(parsed_args.config, os.environ.get("MD2HTML_CONFIG"))
            config = normalize_config(raw_config)

        settings = resolve_settings(parsed_args, config)
        configure_logging(
            resolve_log_level(settings["verbose"], settings["debug"]),
            log_file=settings["log_file"],
            trace_mode=settings["debug"],
        )

        run_options, render_options = build_options(settings, parsed_args.file_path)
        html_path = run_conversion(run_options, render_options)
    except Md2HtmlError as e:
        logger.debug("Conversion failed", exc_info=True)
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        console.print(f"[bold red]Unexpected error:[/bold red] {escape(f'{type(e).__name__}: {e}')}")
        return EXIT_ERROR

    logger.info(f"Converted \"{run_options.file_path}\" to \"{html_path}\"")
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
