#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing."""
# src/md2html/options/markdown.py

from __future__ import annotations

from dataclasses import dataclass, field

from md2html.constants import DEFAULT_CODE_INFO
from md2html.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class MarkdownParserOptions(CloneFrozenMixin):
    """Configuration options for Markdown-to-tree parsing.

    Parameters
    ----------
    parse_front_matter : bool, default True
        Whether a leading ``+++`` block is read as front matter.
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_footnotes : bool, default True
        Whether to parse footnote references and definitions.
    parse_task_lists : bool, default True
        Whether list items starting with ``[c]`` become task items. Any
        single character between the brackets is accepted.
    parse_definition_lists : bool, default True
        Whether to parse description lists (term, then ``: details``).
    parse_strikethrough : bool, default True
        Whether to parse ``~~text~~``.
    parse_extended_inline : bool, default True
        Whether to parse ``^sup^``, ``~sub~``, ``==mark==`` and ``^^insert^^``.
    parse_shortcodes : bool, default True
        Whether ``:name:`` emoji shortcodes become shortcode nodes.
    default_code_info : str, default "txt"
        Language token for code blocks without one.

    """

    parse_front_matter: bool = field(default=True, metadata={"help": "Read a leading +++ block as front matter"})
    parse_tables: bool = field(default=True, metadata={"help": "Parse pipe tables"})
    parse_footnotes: bool = field(default=True, metadata={"help": "Parse footnotes"})
    parse_task_lists: bool = field(default=True, metadata={"help": "Parse task list markers"})
    parse_definition_lists: bool = field(default=True, metadata={"help": "Parse description lists"})
    parse_strikethrough: bool = field(default=True, metadata={"help": "Parse ~~strikethrough~~"})
    parse_extended_inline: bool = field(
        default=True, metadata={"help": "Parse superscript, subscript, mark and insert"}
    )
    parse_shortcodes: bool = field(default=True, metadata={"help": "Parse :emoji: shortcodes"})
    default_code_info: str = field(
        default=DEFAULT_CODE_INFO, metadata={"help": "Language token for code blocks without one"}
    )
