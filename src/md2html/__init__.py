"""md2html - Convert Markdown blog posts into standalone HTML pages.

md2html reads a Markdown post that opens with a ``+++`` TOML front matter
block (title, tags, author, avatar) and produces a complete HTML page: a post
header with tags, author and reading time, a numbered table of contents,
syntax highlighted code, typographic substitutions, emoticons, footnotes with
back-references, and an embedded minified stylesheet.

Requirements
------------
- Python 3.10+
- mistune, pygments, emoji, rcssmin, rich, pyyaml

Examples
--------
Convert a string:

    >>> from md2html import markdown_to_html
    >>> page = markdown_to_html(open("post.md", encoding="utf-8").read())

Convert a file with a custom domain:

    >>> from md2html import RenderOptions, convert_file
    >>> result = convert_file("post.md", "out/post.html", render_options=RenderOptions(domain="blog.example.com"))

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/md2html/__init__.py

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2html requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from md2html.api import ConversionResult, convert, convert_file, markdown_to_html  # noqa: E402
from md2html.exceptions import (  # noqa: E402
    ConfigurationError,
    FileError,
    FootnoteLabelError,
    FrontMatterError,
    InputReadError,
    InternalConsistencyError,
    Md2HtmlError,
    MissingFrontMatterError,
    OutputWriteError,
    ParsingError,
)
from md2html.options import MarkdownParserOptions, RenderOptions, RunOptions  # noqa: E402

__all__ = [
    "ConfigurationError",
    "ConversionResult",
    "FileError",
    "FootnoteLabelError",
    "FrontMatterError",
    "InputReadError",
    "InternalConsistencyError",
    "MarkdownParserOptions",
    "Md2HtmlError",
    "MissingFrontMatterError",
    "OutputWriteError",
    "ParsingError",
    "RenderOptions",
    "RunOptions",
    "__version__",
    "convert",
    "convert_file",
    "markdown_to_html",
]
