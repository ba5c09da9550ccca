# contentindex/toc/transformer.py
"""
Rewrite article HTML so the selected headings get anchors and a listing.

The listing fragment is prepended to the document:

    <p class="title-table-content">What you will find in this article</p>
    <ol class="table-content">
      <li class="index-header-h2"><a class="index-header-link" href="#index-intro">Intro</a></li>
    </ol>

and every matched heading is replaced by an empty anchor followed by the
heading text:

    <span class="index-anchor" id="index-intro"></span><h2>Intro</h2>

Replacement markup keeps only the heading text, re-escaped. Attributes and
inline markup of the original heading are dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from django.utils.html import conditional_escape, escape

from contentindex.headings import HeadingLevel, parse_heading_levels

from .extractor import HeadingMatch, find_headings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TocLabels:
    index_namespace: str
    intro_label: str


@dataclass(frozen=True)
class TocEntry:
    level: HeadingLevel
    display_text: str
    anchor: str


def build_toc_entries(matches: Iterable[HeadingMatch]) -> list[TocEntry]:
    return [
        TocEntry(level=match.level, display_text=match.inner_text, anchor=match.slug)
        for match in matches
    ]


def render_listing(entries: Sequence[TocEntry], labels: TocLabels) -> str:
    """Render the intro label and ordered list of entries."""
    items = "".join(
        f'<li class="index-header-{entry.level.value}">'
        f'<a class="index-header-link" href="#{entry.anchor}">{escape(entry.display_text)}</a>'
        f"</li>"
        for entry in entries
    )
    intro = conditional_escape(labels.intro_label)
    return (
        f'<p class="title-table-content">{intro}</p>\n'
        f'<ol class="table-content">{items}</ol>\n'
    )


def render_anchor_heading(match: HeadingMatch) -> str:
    tag = match.level.value
    return (
        f'<span class="index-anchor" id="{match.slug}"></span>'
        f"<{tag}>{escape(match.inner_text)}</{tag}>"
    )


def _substitute(html: str, matches: Sequence[HeadingMatch]) -> str:
    # Replace by span so identical heading blocks each keep their own replacement.
    parts: list[str] = []
    cursor = 0
    for match in matches:
        parts.append(html[cursor : match.start])
        parts.append(render_anchor_heading(match))
        cursor = match.end
    parts.append(html[cursor:])
    return "".join(parts)


def transform(html: str, selected_levels: Iterable[str], labels: TocLabels) -> str:
    """
    Add a table of contents for the selected heading levels to ``html``.

    Args:
        html: Article HTML
        selected_levels: Heading levels to index (``HeadingLevel`` members or
            tag names such as ``"h2"``, or a string like ``"h2, h3"``). Unknown
            tokens never match.
        labels: Pre-localized namespace token and intro label

    Returns:
        The rewritten HTML, or ``html`` unchanged when nothing is selected or
        no selected heading is present.
    """
    if isinstance(selected_levels, str):
        selected_levels = parse_heading_levels(selected_levels)
    levels = list(selected_levels or ())
    if not levels:
        logger.debug("No heading levels selected, leaving content unchanged")
        return html

    matches = find_headings(html, levels, labels.index_namespace)
    if not matches:
        logger.debug("No headings matched levels %s, leaving content unchanged", levels)
        return html

    logger.debug("Indexed %d headings for table of contents", len(matches))

    listing = render_listing(build_toc_entries(matches), labels)
    return listing + _substitute(html, matches)
