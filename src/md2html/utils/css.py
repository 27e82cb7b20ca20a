#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/css.py
"""CSS minification."""

from __future__ import annotations

from typing import Iterable

import rcssmin


def minify_css(css: str) -> str:
    """Minify a stylesheet.

    Parameters
    ----------
    css : str
        Stylesheet text

    Returns
    -------
    str
        Minified stylesheet

    Examples
    --------
    >>> minify_css(".a td:nth-child(1) { text-align: left }")
    '.a td:nth-child(1){text-align:left}'

    """
    return rcssmin.cssmin(css)


def combine_styles(base: str, rules: Iterable[str]) -> str:
    """Join a base stylesheet with generated rules and minify the result."""
    return minify_css("\n".join([base, *rules]))


__all__ = ["combine_styles", "minify_css"]
