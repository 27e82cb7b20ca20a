#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/typography.py
"""Literal text substitution: typographic symbols and emoticons.

Two ordered passes run over every text payload:

1. Typography: ``(c)`` becomes ``©``, ``...`` becomes ``…`` and so on.
2. Emoticons: ASCII faces such as ``:)`` become emoji, but only when the
   face stands alone, bounded by whitespace or the ends of the string.

Each pass is a single forward ``re.sub`` over its input, copying untouched
spans and replacement text into a fresh string. Neither pass escapes HTML;
escaping happens when the output tree is serialized.

Examples
--------
    >>> from md2html.utils.typography import substitute
    >>> substitute("Copyright (c) 2024... done")
    'Copyright © 2024… done'
    >>> substitute("feeling :) today")
    'feeling 😃 today'

"""

from __future__ import annotations

import re
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

import emoji

from md2html.exceptions import InternalConsistencyError

TYPOGRAPHY: Mapping[str, str] = MappingProxyType(
    {
        "(c)": "©",
        "(C)": "©",
        "(tm)": "™",
        "(TM)": "™",
        "(r)": "®",
        "(R)": "®",
        "(p)": "℗",
        "(P)": "℗",
        "+-": "±",
        "...": "…",
    }
)

# ASCII face -> emoji shortcode name
EMOTICONS: Mapping[str, str] = MappingProxyType(
    {
        ">:(": "angry",
        ">:-(": "angry",
        ':")': "blush",
        ':-")': "blush",
        "</3": "broken_heart",
        "<\\3": "broken_heart",
        ":/": "confused",
        ":-/": "confused",
        ":'(": "cry",
        ":'-(": "cry",
        ":,(": "cry",
        ":,-(": "cry",
        ":(": "frowning",
        ":-(": "frowning",
        "<3": "heart",
        "]:(": "imp",
        "]:-(": "imp",
        "o:)": "innocent",
        "O:)": "innocent",
        "o:-)": "innocent",
        "O:-)": "innocent",
        "0:)": "innocent",
        "0:-)": "innocent",
        ":')": "joy",
        ":'-)": "joy",
        ":,)": "joy",
        ":,-)": "joy",
        ":'D": "joy",
        ":'-D": "joy",
        ":,D": "joy",
        ":,-D": "joy",
        ":*": "kissing",
        ":-*": "kissing",
        "x-)": "laughing",
        "X-)": "laughing",
        ":|": "neutral_face",
        ":-|": "neutral_face",
        ":o": "open_mouth",
        ":-o": "open_mouth",
        ":O": "open_mouth",
        ":-O": "open_mouth",
        ":@": "rage",
        ":-@": "rage",
        ":D": "smile",
        ":-D": "smile",
        ":)": "smiley",
        ":-)": "smiley",
        "]:)": "smiling_imp",
        "]:-)": "smiling_imp",
        ":,'(": "sob",
        ":,'-(": "sob",
        ";(": "sob",
        ";-(": "sob",
        ":P": "stuck_out_tongue",
        ":-P": "stuck_out_tongue",
        "8-)": "sunglasses",
        "B-)": "sunglasses",
        ",:(": "sweat",
        ",:-(": "sweat",
        ",:)": "sweat_smile",
        ",:-)": "sweat_smile",
        ":s": "unamused",
        ":-S": "unamused",
        ":z": "unamused",
        ":-Z": "unamused",
        ":$": "unamused",
        ":-$": "unamused",
        ";)": "wink",
        ";-)": "wink",
    }
)


def _alternation(tokens: Mapping[str, str]) -> str:
    # Longest first so that a token never loses to one of its own prefixes
    return "|".join(re.escape(token) for token in sorted(tokens, key=len, reverse=True))


_TYPOGRAPHY_PATTERN = re.compile(_alternation(TYPOGRAPHY))
_EMOTICON_PATTERN = re.compile(rf"(?<!\S)(?:{_alternation(EMOTICONS)})(?!\S)")


@lru_cache(maxsize=None)
def resolve_emoji(name: str) -> str:
    """Return the emoji glyph for a shortcode name such as ``"smiley"``.

    Parameters
    ----------
    name : str
        Shortcode name without colons

    Returns
    -------
    str
        The emoji glyph

    Raises
    ------
    InternalConsistencyError
        If ``emoji`` does not know the name

    """
    shortcode = f":{name}:"
    glyph = emoji.emojize(shortcode, language="alias")
    if glyph == shortcode:
        raise InternalConsistencyError(f"Emoji not found for shortcode {shortcode}")
    return glyph


def replace_typography(text: str) -> str:
    """Replace typographic ASCII sequences with their symbols.

    Examples
    --------
    >>> replace_typography("(TM) and +-3")
    '™ and ±3'

    """
    return _TYPOGRAPHY_PATTERN.sub(lambda match: TYPOGRAPHY[match.group(0)], text)


def replace_emoticons(text: str) -> str:
    """Replace whitespace-bounded ASCII faces with emoji.

    Raises
    ------
    InternalConsistencyError
        If a matched face names an emoji that cannot be resolved

    Examples
    --------
    >>> replace_emoticons("party:)time")
    'party:)time'

    """
    return _EMOTICON_PATTERN.sub(lambda match: resolve_emoji(EMOTICONS[match.group(0)]), text)


def substitute(text: str) -> str:
    """Run typography then emoticon substitution over ``text``."""
    return replace_emoticons(replace_typography(text))


__all__ = [
    "EMOTICONS",
    "TYPOGRAPHY",
    "replace_emoticons",
    "replace_typography",
    "resolve_emoji",
    "substitute",
]
