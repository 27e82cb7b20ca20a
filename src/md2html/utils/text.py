#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/text.py
"""Text processing utilities for heading identifiers.

Functions
---------
fold_diacritics : Fold accented letters and ligatures to plain ASCII letters
heading_to_slug : Derive ``(id, title)`` for a rendered heading

Examples
--------
    >>> from md2html.utils.text import fold_diacritics
    >>> fold_diacritics("Crème brûlée")
    'Creme-brulee'

"""

from __future__ import annotations

import re
from typing import Iterable

from md2html.dom.nodes import HtmlNode, collect_text

# Plain-letter target -> every character folded onto it
_FOLD_GROUPS: dict[str, str] = {
    "A": "ⒶＡÀÁÂẦẤẪẨÃĀĂẰẮẴẲȦǠÄǞẢÅǺǍȀȂẠẬẶḀĄȺⱯ",
    "AA": "Ꜳ",
    "AE": "ÆǼǢ",
    "AO": "Ꜵ",
    "AU": "Ꜷ",
    "AV": "ꜸꜺ",
    "AY": "Ꜽ",
    "B": "ⒷＢḂḄḆɃƂƁ",
    "C": "ⒸＣĆĈĊČÇḈƇȻꜾ",
    "D": "ⒹＤḊĎḌḐḒḎĐƋƊƉꝹ",
    "DZ": "ǱǄ",
    "Dz": "ǲǅ",
    "E": "ⒺＥÈÉÊỀẾỄỂẼĒḔḖĔĖËẺĚȄȆẸỆȨḜĘḘḚƐƎ",
    "F": "ⒻＦḞƑꝻ",
    "G": "ⒼＧǴĜḠĞĠǦĢǤƓꞠꝽꝾ",
    "H": "ⒽＨĤḢḦȞḤḨḪĦⱧⱵꞍ",
    "I": "ⒾＩÌÍÎĨĪĬİÏḮỈǏȈȊỊĮḬƗ",
    "J": "ⒿＪĴɈ",
    "K": "ⓀＫḰǨḲĶḴƘⱩꝀꝂꝄꞢ",
    "L": "ⓁＬĿĹĽḶḸĻḼḺŁȽⱢⱠꝈꝆꞀ",
    "LJ": "Ǉ",
    "Lj": "ǈ",
    "M": "ⓂＭḾṀṂⱮƜ",
    "N": "ⓃＮǸŃÑṄŇṆŅṊṈȠƝꞐꞤ",
    "NJ": "Ǌ",
    "Nj": "ǋ",
    "O": "ⓄＯÒÓÔỒỐỖỔÕṌȬṎŌṐṒŎȮȰÖȪỎŐǑȌȎƠỜỚỠỞỢỌỘǪǬØǾƆƟꝊꝌ",
    "OE": "\u008cŒ",
    "OI": "Ƣ",
    "OO": "Ꝏ",
    "OU": "Ȣ",
    "P": "ⓅＰṔṖƤⱣꝐꝒꝔ",
    "Q": "ⓆＱꝖꝘɊ",
    "R": "ⓇＲŔṘŘȐȒṚṜŖṞɌⱤꝚꞦꞂ",
    "S": "ⓈＳẞŚṤŜṠŠṦṢṨȘŞⱾꞨꞄ",
    "T": "ⓉＴṪŤṬȚŢṰṮŦƬƮȾꞆ",
    "TH": "Þ",
    "TZ": "Ꜩ",
    "U": "ⓊＵÙÚÛŨṸŪṺŬÜǛǗǕǙỦŮŰǓȔȖƯỪỨỮỬỰỤṲŲṶṴɄ",
    "V": "ⓋＶṼṾƲꝞɅ",
    "VY": "Ꝡ",
    "W": "ⓌＷẀẂŴẆẄẈⱲ",
    "X": "ⓍＸẊẌ",
    "Y": "ⓎＹỲÝŶỸȲẎŸỶỴƳɎỾ",
    "Z": "ⓏＺŹẐŻŽẒẔƵȤⱿⱫꝢ",
    "a": "ⓐａẚàáâầấẫẩãāăằắẵẳȧǡäǟảåǻǎȁȃạậặḁąⱥɐ",
    "aa": "ꜳ",
    "ae": "æǽǣ",
    "ao": "ꜵ",
    "au": "ꜷ",
    "av": "ꜹꜻ",
    "ay": "ꜽ",
    "b": "ⓑｂḃḅḇƀƃɓ",
    "c": "ⓒｃćĉċčçḉƈȼꜿↄ",
    "d": "ⓓｄḋďḍḑḓḏđƌɖɗꝺ",
    "dz": "ǳǆ",
    "e": "ⓔｅèéêềếễểẽēḕḗĕėëẻěȅȇẹệȩḝęḙḛɇɛǝ",
    "f": "ⓕｆḟƒꝼ",
    "g": "ⓖｇǵĝḡğġǧģǥɠꞡᵹꝿ",
    "h": "ⓗｈĥḣḧȟḥḩḫẖħⱨⱶɥ",
    "hv": "ƕ",
    "i": "ⓘｉìíîĩīĭïḯỉǐȉȋịįḭɨı",
    "j": "ⓙｊĵǰɉ",
    "k": "ⓚｋḱǩḳķḵƙⱪꝁꝃꝅꞣ",
    "l": "ⓛｌŀĺľḷḹļḽḻſłƚɫⱡꝉꞁꝇ",
    "lj": "ǉ",
    "m": "ⓜｍḿṁṃɱɯ",
    "n": "ⓝｎǹńñṅňṇņṋṉƞɲŉꞑꞥ",
    "nj": "ǌ",
    "o": "ⓞｏòóôồốỗổõṍȭṏōṑṓŏȯȱöȫỏőǒȍȏơờớỡởợọộǫǭøǿɔꝋꝍɵ",
    "oe": "\u009cœ",
    "oi": "ƣ",
    "oo": "ꝏ",
    "ou": "ȣ",
    "p": "ⓟｐṕṗƥᵽꝑꝓꝕ",
    "q": "ⓠｑɋꝗꝙ",
    "r": "ⓡｒŕṙřȑȓṛṝŗṟɍɽꝛꞧꞃ",
    "s": "ⓢｓśṥŝṡšṧṣṩșşȿꞩꞅẛ",
    "ss": "ß",
    "t": "ⓣｔṫẗťṭțţṱṯŧƭʈⱦꞇ",
    "th": "þ",
    "tz": "ꜩ",
    "u": "ⓤｕùúûũṹūṻŭüǜǘǖǚủůűǔȕȗưừứữửựụṳųṷṵʉ",
    "v": "ⓥｖṽṿʋꝟʌ",
    "vy": "ꝡ",
    "w": "ⓦｗẁẃŵẇẅẘẉⱳ",
    "x": "ⓧｘẋẍ",
    "y": "ⓨｙỳýŷỹȳẏÿỷẙỵƴɏỿ",
    "z": "ⓩｚźẑżžẓẕƶȥɀⱬꝣ",
    # Word separators
    "-": "·/_,:; \t\r\n",
}

_FOLD_TABLE = str.maketrans({char: target for target, chars in _FOLD_GROUPS.items() for char in chars})

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9 _]+")


def fold_diacritics(text: str) -> str:
    """Fold accented letters and ligatures to plain ASCII, separators to ``-``.

    Characters missing from the fold table pass through unchanged.

    Parameters
    ----------
    text : str
        Text to fold

    Returns
    -------
    str
        Folded text; case is preserved

    Examples
    --------
    >>> fold_diacritics("Æther: Ōsaka")
    'AEther--Osaka'

    """
    return text.translate(_FOLD_TABLE)


def heading_to_slug(children: Iterable[HtmlNode]) -> tuple[str, str]:
    """Derive the identifier and title of a heading.

    The title is the visible text of the heading's rendered children. The
    identifier is the title folded to ASCII, lowercased, with every run of
    characters outside ``[a-z0-9 _]`` collapsed to a single ``-`` and
    leading/trailing ``-`` trimmed. Identical titles produce identical ids.

    Parameters
    ----------
    children : iterable of HtmlNode
        Rendered heading content

    Returns
    -------
    tuple of (str, str)
        ``(id, title)``

    Examples
    --------
    >>> from md2html.dom import text
    >>> heading_to_slug([text("Héllo, World! 100%")])
    ('hello-world-100', 'Héllo, World! 100%')

    """
    title = collect_text(children)
    slug = _NON_SLUG_CHARS.sub("-", fold_diacritics(title).lower()).strip("-")
    return slug, title


__all__ = ["fold_diacritics", "heading_to_slug"]
