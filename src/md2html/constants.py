#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the md2html library.

Constants are organized by category:
1. Run Defaults - CLI and configuration defaults
2. Document Head - external resources referenced by every page
3. Rendering - classes, icons and layout values used by the transducer
4. Default Stylesheet
"""

from __future__ import annotations

# =============================================================================
# Run Defaults
# =============================================================================

DEFAULT_OUT_DIR = "out"
DEFAULT_DOMAIN = "localhost"
DEFAULT_STYLE_SHEET_PATH = "./styles.css"
DEFAULT_LOGO_PATH = "./logo.png"

# Output names inside the output directory
LOGO_OUTPUT_NAME = "logo.png"
STYLES_OUTPUT_NAME = "styles.css"
MARKDOWN_AST_SUFFIX = ".md.ast"
HTML_AST_SUFFIX = ".html.ast"

# Words per minute used for the reading time estimate
DEFAULT_READING_SPEED = 120

DEFAULT_HIGHLIGHT_STYLE = "monokai"

# Fence info used when a code block does not name a language
DEFAULT_CODE_INFO = "txt"

# Front matter fence
FRONT_MATTER_DELIMITER = "+++"

ENV_PREFIX = "MD2HTML_"

# =============================================================================
# Document Head
# =============================================================================

FONT_FAMILIES = ("Roboto", "Jetbrains Mono", "Open Sans")
GOOGLE_FONTS_URL = "https://fonts.googleapis.com/css2?family=" + "&family=".join(
    family.replace(" ", "+") for family in FONT_FAMILIES
)
FONT_AWESOME_URL = "https://unpkg.com/@fortawesome/fontawesome-free/css/all.min.css"
VIEWPORT_CONTENT = "width=device-width, initial-scale=1"

# =============================================================================
# Rendering
# =============================================================================

HEADING_ID_PREFIX = "heading__"
SECTION_LOGO = "§"
FOOTNOTE_BACKREF = "↩"
TOC_SUMMARY = "Table of Contents"
TOC_INDENT_PX = 20
MAX_HEADING_LEVEL = 6

EXTERNAL_LINK_CLASS = "fa-solid fa-up-right-from-square href-external"
EMPTY_TASK_CLASS = "fa-regular fa-square"

# Task marker -> (Font Awesome icon, color); unknown markers fall back to ("", "white")
TASK_ICONS: dict[str, tuple[str, str]] = {
    "x": ("square-check", "limegreen"),
    "-": ("square-minus", "grey"),
    "+": ("square-plus", "deepskyblue"),
    "X": ("square-xmark", "red"),
}
UNKNOWN_TASK_ICON = ("", "white")

# Section boundary comments in the document body
META_CONTAINER_START = "META_CONTAINER_START"
META_CONTAINER_END = "META_CONTAINER_END"
TOC_START = "TOC_START"
TOC_END = "TOC_END"
BLOG_SECTION_START = "BLOG_SECTION_START"
BLOG_SECTION_END = "BLOG_SECTION_END"
FOOTNOTES_START = "FOOTNOTES_START"
FOOTNOTES_END = "FOOTNOTES_END"

# Code block layout
CODE_PADDING_TOP_PX = 40
PLAIN_CODE_PADDING_TOP_PX = 20
LINE_NUMBER_BASE_PADDING_PX = 25
LINE_NUMBER_DIGIT_PADDING_PX = 10

# =============================================================================
# Default Stylesheet
# =============================================================================

DEFAULT_STYLESHEET = """
body {
    font-family: "Open Sans", Roboto, "Helvetica Neue", Arial, sans-serif;
    line-height: 1.6;
    max-width: 800px;
    margin: 0 auto;
    padding: 2rem;
    color: #333;
}

h1, h2, h3, h4, h5, h6 {
    font-family: Roboto, sans-serif;
    margin-top: 1.5rem;
    margin-bottom: 0.5rem;
    line-height: 1.25;
}

.section-logo {
    margin-left: 0.5rem;
    color: #bbb;
    text-decoration: none;
    visibility: hidden;
}

h1:hover .section-logo, h2:hover .section-logo, h3:hover .section-logo,
h4:hover .section-logo, h5:hover .section-logo, h6:hover .section-logo {
    visibility: visible;
}

.tag {
    margin-right: 0.5rem;
    color: #0066cc;
}

.meta-container {
    display: flex;
    align-items: center;
    gap: 1rem;
    margin: 1rem 0 2rem;
}

.meta-container img {
    width: 48px;
    height: 48px;
    border-radius: 50%;
}

details {
    background-color: #f9f9f9;
    border: 1px solid #ddd;
    border-radius: 5px;
    padding: 1rem;
    margin-bottom: 2rem;
}

details p {
    margin: 0.25rem 0;
}

.inline-code, pre {
    font-family: "Jetbrains Mono", "Courier New", monospace;
}

.inline-code {
    background-color: #f5f5f5;
    padding: 0.2em 0.4em;
    border-radius: 3px;
    font-size: 0.9em;
}

pre {
    position: relative;
    background-color: #2d2d2d;
    color: #d3d0c8;
    border-radius: 5px;
    overflow-x: auto;
}

pre > div:first-child {
    position: absolute;
    top: 10px;
    right: 20px;
    color: #999;
}

.code-line-number {
    position: absolute;
    color: #747369;
    user-select: none;
}

pre code > div > div {
    white-space: pre;
}

blockquote {
    border-left: 4px solid #ddd;
    padding-left: 1rem;
    margin-left: 0;
    color: #666;
}

table {
    border-collapse: collapse;
    width: 100%;
    margin: 1rem 0;
}

th, td {
    border: 1px solid #ddd;
    padding: 0.5rem;
}

th {
    background-color: #f5f5f5;
}

img {
    max-width: 100%;
    height: auto;
}

figure {
    text-align: center;
}

a {
    color: #0066cc;
    text-decoration: none;
}

a:hover {
    text-decoration: underline;
}

.href-external {
    margin-left: 0.25rem;
    font-size: 0.7em;
}

.task-item {
    list-style: none;
}

.task-item > span:first-child {
    margin-right: 0.5rem;
}

hr {
    border: none;
    border-top: 1px solid #ddd;
    margin: 2rem 0;
}
"""
