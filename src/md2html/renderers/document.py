#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/renderers/document.py
"""Whole-document assembly.

Combines the content section produced by the transducer with everything the
accumulator gathered into the final ``<!DOCTYPE html>`` tree: the head with
fonts, icons and the minified stylesheet, and the body with the post header,
table of contents, content and footnotes.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from md2html.constants import (
    BLOG_SECTION_END,
    BLOG_SECTION_START,
    FONT_AWESOME_URL,
    FOOTNOTES_END,
    FOOTNOTES_START,
    GOOGLE_FONTS_URL,
    META_CONTAINER_END,
    META_CONTAINER_START,
    TOC_END,
    TOC_START,
    TOC_SUMMARY,
    VIEWPORT_CONTENT,
)
from md2html.dom.nodes import (
    CommentNode,
    Doctype,
    Element,
    HtmlNode,
    HtmlRoot,
    RawNode,
    attr,
    element,
    text,
    void,
)
from md2html.exceptions import MissingFrontMatterError
from md2html.options.html import RenderOptions
from md2html.renderers.footnotes import resolve_footnotes
from md2html.renderers.state import FrontMatter, TraversalAccumulator
from md2html.renderers.toc import build_toc
from md2html.utils.css import combine_styles

logger = logging.getLogger(__name__)


def reading_time(word_count: int, reading_speed: int) -> int:
    """Whole minutes needed to read ``word_count`` words."""
    return word_count // reading_speed


def format_post_date(date: datetime) -> str:
    """Format the post date as ``"5 March, 2024"``."""
    return f"{date.day} {date:%B}, {date:%Y}"


def _build_head(front_matter: FrontMatter, state: TraversalAccumulator, options: RenderOptions) -> Element:
    children: list[HtmlNode] = [
        void("meta", [attr("charset", "utf-8")]),
        void("meta", [attr("name", "viewport"), attr("content", VIEWPORT_CONTENT)]),
        void("meta", [attr("property", "og:title"), attr("content", front_matter.title)]),
        void("link", [attr("rel", "stylesheet"), attr("href", GOOGLE_FONTS_URL)]),
        void("link", [attr("rel", "stylesheet"), attr("href", FONT_AWESOME_URL)]),
    ]
    if options.logo:
        children.append(void("link", [attr("rel", "icon"), attr("href", options.logo)]))
    children.append(element("title", text(front_matter.title)))
    children.append(element("style", RawNode(combine_styles(options.stylesheet, state.styles))))
    return element("head", *children)


def _build_meta_container(
    front_matter: FrontMatter, state: TraversalAccumulator, options: RenderOptions, date: datetime
) -> Element:
    minutes = reading_time(state.word_count, options.reading_speed)
    author_href = attr("href", f"{state.domain}/authors/{front_matter.author}")
    return element(
        "div",
        void("img", [attr("src", front_matter.avatar), attr("alt", front_matter.author)]),
        element("span", element("a", text(front_matter.author), attrs=[author_href])),
        element("span", text(f"{minutes} min read • {format_post_date(date)}")),
        attrs=[attr("class", "meta-container")],
    )


def _build_tags(front_matter: FrontMatter, domain: str) -> Element:
    return element(
        "div",
        *(
            element("a", text(f"#{tag}"), attrs=[attr("href", f"{domain}/tags/{tag}"), attr("class", "tag")])
            for tag in front_matter.tags
        ),
    )


def assemble_document(content: Element, state: TraversalAccumulator, options: RenderOptions | None = None) -> Doctype:
    """Build the complete HTML document.

    Parameters
    ----------
    content : Element
        Content ``section`` produced by the transducer
    state : TraversalAccumulator
        Accumulator after the transducer pass
    options : RenderOptions or None, default = None
        Rendering options (stylesheet, logo, reading speed)

    Returns
    -------
    Doctype
        Root of the output tree

    Raises
    ------
    MissingFrontMatterError
        If the document had no front matter block
    FootnoteLabelError
        If a footnote label is not a decimal integer

    """
    options = options or RenderOptions()
    front_matter = state.front_matter
    if front_matter is None:
        raise MissingFrontMatterError()

    date = state.date or datetime.now(timezone.utc)
    footnotes = resolve_footnotes(state)
    toc = build_toc(state.headings)
    logger.debug(
        f"Assembling document: {len(state.headings)} headings, {len(footnotes)} footnotes, "
        f"{state.table_counter} tables, {state.word_count} words"
    )

    body = element(
        "body",
        CommentNode(f"Generated using `md2html` on {date:%d/%m/%Y %H:%M:%S}."),
        CommentNode(META_CONTAINER_START),
        element("h1", text(front_matter.title)),
        _build_tags(front_matter, state.domain),
        _build_meta_container(front_matter, state, options, date),
        CommentNode(META_CONTAINER_END),
        CommentNode(TOC_START),
        element("details", element("summary", element("span", text(TOC_SUMMARY))), toc),
        CommentNode(TOC_END),
        CommentNode(BLOG_SECTION_START),
        content,
        CommentNode(BLOG_SECTION_END),
        CommentNode(FOOTNOTES_START),
        element("section", void("hr"), element("ol", *footnotes)),
        CommentNode(FOOTNOTES_END),
    )

    return Doctype(HtmlRoot(head=_build_head(front_matter, state, options), body=body))


__all__ = ["assemble_document", "format_post_date", "reading_time"]
