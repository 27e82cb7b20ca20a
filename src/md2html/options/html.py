#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering and CLI runs."""
# src/md2html/options/html.py

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from md2html.constants import (
    DEFAULT_DOMAIN,
    DEFAULT_HIGHLIGHT_STYLE,
    DEFAULT_LOGO_PATH,
    DEFAULT_OUT_DIR,
    DEFAULT_READING_SPEED,
    DEFAULT_STYLE_SHEET_PATH,
    DEFAULT_STYLESHEET,
)
from md2html.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class RenderOptions(CloneFrozenMixin):
    """Configuration options for rendering a document to HTML.

    Parameters
    ----------
    domain : str, default "localhost"
        Site domain. Links to other hosts get an external-link marker, and
        tag and author links are built under it.
    stylesheet : str, default = built-in stylesheet
        Base CSS text embedded in the page, ahead of generated table rules.
    logo : str or None, default None
        Favicon href; no favicon link is emitted when None.
    reading_speed : int, default 120
        Words per minute used for the reading time estimate.
    highlight_style : str, default "monokai"
        Pygments style used to color code blocks.

    """

    domain: str = field(default=DEFAULT_DOMAIN, metadata={"help": "Site domain used for links"})
    stylesheet: str = field(default=DEFAULT_STYLESHEET, metadata={"help": "Base CSS embedded in the page"})
    logo: Optional[str] = field(default=None, metadata={"help": "Favicon href"})
    reading_speed: int = field(default=DEFAULT_READING_SPEED, metadata={"help": "Words per minute"})
    highlight_style: str = field(default=DEFAULT_HIGHLIGHT_STYLE, metadata={"help": "Pygments style name"})

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If ``reading_speed`` is not positive.

        """
        if self.reading_speed <= 0:
            raise ValueError(f"reading_speed must be positive, got {self.reading_speed}")


@dataclass(frozen=True)
class RunOptions(CloneFrozenMixin):
    """Options of one command-line run.

    Parameters
    ----------
    file_path : Path
        Markdown file to convert.
    out_dir : Path, default "out"
        Directory receiving the HTML, logo and stylesheet.
    style_sheet : Path, default "./styles.css"
        Stylesheet embedded in the page and copied, minified, to the output.
    logo : Path, default "./logo.png"
        Logo copied to ``logo.png`` in the output directory.
    output_ast : bool, default False
        Also write ``.md.ast`` and ``.html.ast`` JSON dumps.
    force : bool, default False
        Overwrite an existing logo and stylesheet in the output directory.
    verbose : bool, default False
        Log progress at INFO level.
    debug : bool, default False
        Log at DEBUG level with timestamps.
    log_file : Path or None, default None
        Also write log records to this file.

    """

    file_path: Path
    out_dir: Path = Path(DEFAULT_OUT_DIR)
    style_sheet: Path = Path(DEFAULT_STYLE_SHEET_PATH)
    logo: Path = Path(DEFAULT_LOGO_PATH)
    output_ast: bool = False
    force: bool = False
    verbose: bool = False
    debug: bool = False
    log_file: Optional[Path] = None
