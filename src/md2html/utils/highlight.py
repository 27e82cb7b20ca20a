#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/highlight.py
"""Syntax highlighting of code blocks with Pygments.

:func:`highlight_code` turns a code block into a ready ``pre`` element. The
block shows the language name, and each line carries a right-aligned line
number followed by colored spans. Code in an unknown language, or plain
text, is emitted line by line without numbers or colors.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.lexers.special import TextLexer
from pygments.style import StyleMeta
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from md2html.constants import (
    CODE_PADDING_TOP_PX,
    DEFAULT_HIGHLIGHT_STYLE,
    LINE_NUMBER_BASE_PADDING_PX,
    LINE_NUMBER_DIGIT_PADDING_PX,
    PLAIN_CODE_PADDING_TOP_PX,
)
from md2html.dom.nodes import EMPTY, Element, HtmlNode, attr, element, text
from md2html.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _load_style(style_name: str) -> StyleMeta:
    try:
        return get_style_by_name(style_name)
    except ClassNotFound as e:
        raise ConfigurationError(
            f"Unknown highlight style: {style_name}", config_key="highlight_style", original_error=e
        ) from e


def _find_lexer(language: str) -> Lexer | None:
    """Return the lexer for ``language`` or None when it is plain text."""
    if not language:
        return None
    try:
        lexer = get_lexer_by_name(language, stripnl=False, ensurenl=False)
    except ClassNotFound:
        logger.debug(f"No lexer for language {language!r}, rendering as plain text")
        return None
    if isinstance(lexer, TextLexer):
        return None
    return lexer


def _split_lines(code: str) -> list[str]:
    lines = code.split("\n")
    # A trailing newline does not open another line
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _colored_lines(code: str, lexer: Lexer, style: Any) -> list[list[HtmlNode]]:
    """Lex ``code`` and group colored spans by source line."""
    lines: list[list[HtmlNode]] = [[]]
    for token_type, value in lexer.get_tokens(code):
        color = style.style_for_token(token_type).get("color")
        attrs = [attr("style", f"color: #{color};")] if color else []
        for index, part in enumerate(value.split("\n")):
            if index > 0:
                lines.append([])
            if part:
                lines[-1].append(element("span", text(part), attrs=attrs))
    if not lines[-1]:
        lines.pop()
    return lines


def highlight_code(code: str, language: str, style: str = DEFAULT_HIGHLIGHT_STYLE) -> Element:
    """Render a code block as a highlighted ``pre`` element.

    Parameters
    ----------
    code : str
        Source code of the block
    language : str
        Language token from the fence info string (``"txt"`` for plain text)
    style : str, default = "monokai"
        Name of the Pygments style providing token colors

    Returns
    -------
    Element
        ``pre`` holding an optional language label and a ``code`` element
        with one ``div`` per line

    Raises
    ------
    ConfigurationError
        If ``style`` is not a known Pygments style

    Examples
    --------
    >>> from md2html.dom import to_html
    >>> to_html(highlight_code("a < b\\n", "txt"))
    '<pre style="padding: 20px 20px 20px 20px"><code><div><div>a &lt; b</div></div></code></pre>'

    """
    lexer = _find_lexer(language)

    if lexer is None:
        rows = [element("div", element("div", text(line))) for line in _split_lines(code)]
        return element(
            "pre",
            EMPTY,
            element("code", *rows),
            attrs=[attr("style", f"padding: {PLAIN_CODE_PADDING_TOP_PX}px 20px 20px 20px")],
        )

    lines = _colored_lines(code, lexer, _load_style(style))
    width = len(str(len(lines)))
    padding = LINE_NUMBER_BASE_PADDING_PX + width * LINE_NUMBER_DIGIT_PADDING_PX

    rows = []
    for number, spans in enumerate(lines, start=1):
        rows.append(
            element(
                "div",
                element("span", text(f"{number:>{width}}."), attrs=[attr("class", "code-line-number")]),
                element("div", *spans, attrs=[attr("style", f"padding-left: {padding}px")]),
            )
        )

    return element(
        "pre",
        element("div", text(lexer.name)),
        element("code", *rows),
        attrs=[attr("style", f"padding: {CODE_PADDING_TOP_PX}px 20px 20px 20px")],
    )


__all__ = ["highlight_code"]
