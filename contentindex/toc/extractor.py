# contentindex/toc/extractor.py
"""
Locate heading blocks in raw HTML.

This is a boundary scan, not a parser. A single compiled pattern matches an
opening ``<hN ...>`` tag, the shortest run of content after it, and the next
closing tag with the same name. Consequences worth knowing:

- Attributes on the opening tag are allowed but ignored.
- Inline markup inside the heading is captured and later stripped.
- Unbalanced or nested same-named headings can produce a match that spans
  further than intended. Such input is not corrected.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from contentindex.headings import HeadingLevel

from .slug import generate_slug, heading_text


@dataclass(frozen=True)
class HeadingMatch:
    level: HeadingLevel
    raw_block: str
    inner_text: str
    slug: str
    start: int
    end: int


def build_heading_pattern(levels: Iterable[str]) -> re.Pattern | None:
    """
    Compile one case-insensitive pattern covering every selected level.

    Tokens that are not allowed heading levels are discarded, so a selection
    made only of unknown tokens returns ``None`` rather than a pattern that
    would match other elements.
    """
    allowed = set(HeadingLevel.values)
    names = sorted({str(level).strip().lower() for level in levels} & allowed)
    if not names:
        return None

    alternation = "|".join(re.escape(name) for name in names)
    return re.compile(
        rf"<(?P<tag>{alternation})\b[^>]*>(?P<content>.*?)</(?P=tag)\s*>",
        re.IGNORECASE | re.DOTALL,
    )


def find_headings(html: str, levels: Iterable[str], namespace: str) -> list[HeadingMatch]:
    """Return every selected heading in ``html`` in document order."""
    pattern = build_heading_pattern(levels)
    if pattern is None or not html:
        return []

    matches: list[HeadingMatch] = []
    for match in pattern.finditer(html):
        content = match.group("content")
        matches.append(
            HeadingMatch(
                level=HeadingLevel(match.group("tag").lower()),
                raw_block=match.group(0),
                inner_text=heading_text(content),
                slug=generate_slug(content, namespace),
                start=match.start(),
                end=match.end(),
            )
        )
    return matches
