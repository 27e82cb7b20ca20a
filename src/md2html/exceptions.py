#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2html library.

Every error aborts the conversion: nothing is written when one of these is
raised.

Exception Hierarchy
-------------------
- Md2HtmlError (base exception)

  - ConfigurationError (invalid options, missing required document parts)
    - MissingFrontMatterError (document has no front matter block)

  - ParsingError (input document parsing failures)
    - FrontMatterError (front matter is not valid TOML or lacks a key)
    - FootnoteLabelError (footnote label is not a decimal integer)

  - InternalConsistencyError (lookup tables out of sync)

  - FileError (file access and I/O)
    - InputReadError (input markdown cannot be read)
    - OutputWriteError (output file or directory cannot be written)

"""

from __future__ import annotations


class Md2HtmlError(Exception):
    """Base exception class for all md2html-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ConfigurationError(Md2HtmlError):
    """Exception raised for invalid configuration.

    Covers bad option values, unreadable configuration files and documents
    that lack parts the output requires.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_key : str, optional
        Name of the offending option
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, config_key: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, original_error=original_error)
        self.config_key = config_key


class MissingFrontMatterError(ConfigurationError):
    """Exception raised when a document reaches assembly without front matter."""

    def __init__(self, message: str | None = None):
        """Initialize the missing front matter error."""
        if message is None:
            message = "Missing front-matter: the document must start with a +++ delimited TOML block"
        super().__init__(message, config_key="front_matter")


class ParsingError(Md2HtmlError):
    """Exception raised when document parsing fails.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    Attributes
    ----------
    parsing_stage : str or None
        Where in the parsing process the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class FrontMatterError(ParsingError):
    """Exception raised when the front matter payload cannot be parsed.

    Raised for malformed TOML as well as for missing keys or values of the
    wrong type.

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the front matter error."""
        super().__init__(message, parsing_stage="front_matter", original_error=original_error)


class FootnoteLabelError(ParsingError):
    """Exception raised when a footnote label is not a decimal integer.

    Parameters
    ----------
    label : str
        The offending footnote label

    """

    def __init__(self, label: str, original_error: Exception | None = None):
        """Initialize the footnote label error."""
        super().__init__(
            f"Footnote label must be a decimal integer, got {label!r}",
            parsing_stage="footnotes",
            original_error=original_error,
        )
        self.label = label


class InternalConsistencyError(Md2HtmlError):
    """Exception raised when built-in lookup tables disagree.

    Signals a bug in md2html, not a problem with the input document.

    """


class FileError(Md2HtmlError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    file_path : str or None
        Path to the file that caused the error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class InputReadError(FileError):
    """Exception raised when the input document cannot be read."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the input read error."""
        if message is None:
            message = f"Cannot read input file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class OutputWriteError(FileError):
    """Exception raised when writing an output file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


__all__ = [
    "ConfigurationError",
    "FileError",
    "FootnoteLabelError",
    "FrontMatterError",
    "InputReadError",
    "InternalConsistencyError",
    "Md2HtmlError",
    "MissingFrontMatterError",
    "OutputWriteError",
    "ParsingError",
]
