#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/parsers/base.py
"""Base class for document parsers.

Parsers turn source text into the :mod:`md2html.ast` input tree consumed by
the HTML renderer.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Union

from md2html.ast import Document
from md2html.exceptions import InputReadError
from md2html.utils.io_utils import read_text

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for parsers.

    Parameters
    ----------
    options : Any or None, default = None
        Parser specific options

    Examples
    --------
        >>> from md2html.ast import Document
        >>>
        >>> class EmptyParser(BaseParser):
        ...     def parse(self, input_data):
        ...         return Document(children=[])

    """

    def __init__(self, options: Any = None):
        """Initialize the parser with options."""
        self.options = options

    @abstractmethod
    def parse(self, input_data: Union[str, Path, bytes]) -> Document:
        """Parse the input into a Document.

        Parameters
        ----------
        input_data : str, Path or bytes
            Source text, a path to a source file, or UTF-8 encoded bytes

        Returns
        -------
        Document
            Root of the input tree

        """
        raise NotImplementedError

    @staticmethod
    def _load_text_content(input_data: Union[str, Path, bytes]) -> str:
        """Load the source text from a string, a path or raw bytes.

        Strings are always treated as content; pass a ``Path`` to read a file.

        """
        if isinstance(input_data, Path):
            return read_text(input_data)
        if isinstance(input_data, bytes):
            try:
                return input_data.decode("utf-8")
            except UnicodeDecodeError as e:
                raise InputReadError("<bytes>", "Input is not valid UTF-8", original_error=e) from e
        return input_data


__all__ = ["BaseParser"]
