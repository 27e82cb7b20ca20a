#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/renderers/footnotes.py
"""Footnote resolution.

Runs after the transducer. Each recorded footnote definition becomes a list
item holding the footnote content followed by one back-reference per
reference made to it in the text.
"""

from __future__ import annotations

import logging

from md2html.constants import FOOTNOTE_BACKREF
from md2html.dom.nodes import Element, attr, element, text
from md2html.exceptions import FootnoteLabelError
from md2html.renderers.state import TraversalAccumulator

logger = logging.getLogger(__name__)


def _numeric_label(label: str) -> int:
    if not label.isdecimal():
        raise FootnoteLabelError(label)
    return int(label)


def back_references(label: str, count: int) -> list[Element]:
    """Build the ``↩`` anchors pointing back at each reference to ``label``.

    Examples
    --------
    >>> from md2html.dom import to_html
    >>> [to_html(a) for a in back_references("1", 2)]
    ['<a href="#footnote-reference-1">↩</a>', '<a href="#footnote-reference-1:1">↩</a>']

    """
    anchors = []
    for index in range(count):
        suffix = f":{index}" if index else ""
        href = attr("href", f"#footnote-reference-{label}{suffix}")
        anchors.append(element("a", text(FOOTNOTE_BACKREF), attrs=[href]))
    return anchors


def resolve_footnotes(state: TraversalAccumulator) -> list[Element]:
    """Build the footnote list items, ordered by numeric label.

    Parameters
    ----------
    state : TraversalAccumulator
        Accumulator after the transducer pass

    Returns
    -------
    list of Element
        One ``li`` per definition; with contiguous labels ``1..n`` the item
        for label ``k`` lands at index ``k - 1``

    Raises
    ------
    FootnoteLabelError
        If a definition label is not a decimal integer

    """
    numbered = sorted(
        ((_numeric_label(label), label, content) for label, content in state.definitions),
        key=lambda entry: entry[0],
    )

    items = []
    for _, label, content in numbered:
        count = state.footnote_counter.get(label, 0)
        if count == 0:
            logger.debug(f"Footnote {label} is defined but never referenced")
        body = element(
            "div",
            *content,
            *back_references(label, count),
            attrs=[attr("id", f"footnote-definition-{label}")],
        )
        items.append(element("li", body))
    return items


__all__ = ["back_references", "resolve_footnotes"]
