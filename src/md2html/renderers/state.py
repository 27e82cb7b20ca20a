#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/renderers/state.py
"""Document-wide state collected while rendering.

The :class:`TraversalAccumulator` is created empty right before a document
is rendered, filled in by the transducer during its single pass, and then
read by the footnote resolver, the TOC builder and the document assembler.
It is never reused for a second document.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

from md2html.dom.nodes import HtmlNode
from md2html.exceptions import FrontMatterError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrontMatter:
    """Post metadata read from the front matter block.

    Parameters
    ----------
    title : str
        Post title
    tags : list of str
        Tags, in the order given
    author : str
        Author name, also used in the author page URL
    avatar : str
        Avatar image URL or path

    """

    title: str
    tags: list[str]
    author: str
    avatar: str

    @classmethod
    def from_toml(cls, payload: str) -> FrontMatter:
        """Parse a TOML payload (fences already removed).

        Parameters
        ----------
        payload : str
            TOML text with ``title``, ``tags``, ``author`` and ``avatar`` keys

        Returns
        -------
        FrontMatter
            The parsed metadata

        Raises
        ------
        FrontMatterError
            If the payload is not valid TOML, or a key is missing or has the
            wrong type

        Examples
        --------
        >>> FrontMatter.from_toml('title = "Hi"\\ntags = ["a"]\\nauthor = "me"\\navatar = "me.png"').tags
        ['a']

        """
        try:
            data = tomllib.loads(payload)
        except tomllib.TOMLDecodeError as e:
            raise FrontMatterError(f"Invalid front matter TOML: {e}", original_error=e) from e

        values: dict[str, Any] = {}
        for key in ("title", "author", "avatar"):
            if key not in data:
                raise FrontMatterError(f"Front matter is missing required key '{key}'")
            if not isinstance(data[key], str):
                raise FrontMatterError(f"Front matter key '{key}' must be a string, got {type(data[key]).__name__}")
            values[key] = data[key]

        tags = data.get("tags")
        if tags is None:
            raise FrontMatterError("Front matter is missing required key 'tags'")
        if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
            raise FrontMatterError("Front matter key 'tags' must be a list of strings")

        return cls(tags=list(tags), **values)


@dataclass
class TraversalAccumulator:
    """Mutable side channel filled in during one rendering pass.

    Parameters
    ----------
    domain : str
        Site domain, seeded before traversal

    Attributes
    ----------
    table_counter : int
        Number of tables seen so far; the current table's number
    front_matter : FrontMatter or None
        Parsed front matter; required once traversal is done
    footnote_counter : dict of str to int
        Footnote label to number of references seen
    date : datetime or None
        Timestamp taken when the front matter was parsed
    definitions : list of (str, list of HtmlNode)
        Footnote definitions in document order
    styles : list of str
        Generated CSS rules, append-only
    word_count : int
        Whitespace-delimited words seen in text nodes
    headings : list of (int, str, str)
        ``(level, id, title)`` per heading in document order

    """

    domain: str
    table_counter: int = 0
    front_matter: Optional[FrontMatter] = None
    footnote_counter: dict[str, int] = field(default_factory=dict)
    date: Optional[datetime] = None
    definitions: list[tuple[str, list[HtmlNode]]] = field(default_factory=list)
    styles: list[str] = field(default_factory=list)
    word_count: int = 0
    headings: list[tuple[int, str, str]] = field(default_factory=list)

    def set_front_matter(self, front_matter: FrontMatter) -> None:
        """Store the front matter and stamp the document date."""
        if self.front_matter is not None:
            logger.debug("Another front matter block found, replacing the previous one")
        self.front_matter = front_matter
        self.date = datetime.now(timezone.utc)

    def next_table(self) -> int:
        """Allocate the number of the next table."""
        self.table_counter += 1
        return self.table_counter

    def reference_suffix(self, label: str) -> str:
        """Count a reference to footnote ``label`` and return its id suffix.

        The first reference gets no suffix; later ones get ``:1``, ``:2``...

        Examples
        --------
        >>> acc = TraversalAccumulator(domain="localhost")
        >>> [acc.reference_suffix("1") for _ in range(3)]
        ['', ':1', ':2']

        """
        seen = self.footnote_counter.get(label, 0)
        self.footnote_counter[label] = seen + 1
        return f":{seen}" if seen else ""

    def count_words(self, content: str) -> None:
        """Add the whitespace-delimited words of ``content`` to the count."""
        self.word_count += len(content.split())


__all__ = ["FrontMatter", "TraversalAccumulator"]
