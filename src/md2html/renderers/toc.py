#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/renderers/toc.py
"""Table of contents built from the recorded headings."""

from __future__ import annotations

from typing import Iterable, Sequence

from md2html.constants import HEADING_ID_PREFIX, MAX_HEADING_LEVEL, TOC_INDENT_PX
from md2html.dom.nodes import Element, attr, element, text


def heading_numerals(levels: Iterable[int]) -> list[str]:
    """Number headings hierarchically.

    A heading at level ``L`` bumps counter ``L`` and resets every deeper
    counter. Counters of levels skipped over (still zero) are left out of
    the numeral.

    Examples
    --------
    >>> heading_numerals([1, 2, 2, 1, 3])
    ['1', '1.1', '1.2', '2', '2.1']

    """
    counters = [0] * MAX_HEADING_LEVEL
    numerals = []
    for level in levels:
        counters[level - 1] += 1
        for index in range(level, MAX_HEADING_LEVEL):
            counters[index] = 0
        numerals.append(".".join(str(count) for count in counters[:level] if count))
    return numerals


def build_toc(headings: Sequence[tuple[int, str, str]]) -> Element:
    """Build the table of contents ``div``.

    Parameters
    ----------
    headings : sequence of (int, str, str)
        ``(level, id, title)`` per heading, in document order

    Returns
    -------
    Element
        ``div`` holding one indented ``p > a`` entry per heading

    """
    numerals = heading_numerals(level for level, _, _ in headings)
    entries = []
    for (level, slug, title), numeral in zip(headings, numerals):
        link = element("a", text(f"{numeral}. {title}"), attrs=[attr("href", f"#{HEADING_ID_PREFIX}{slug}")])
        entries.append(element("p", link, attrs=[attr("style", f"padding-left: {level * TOC_INDENT_PX}px")]))
    return element("div", *entries)


__all__ = ["build_toc", "heading_numerals"]
