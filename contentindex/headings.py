# contentindex/headings.py
"""
Heading levels that can take part in a table of contents.

H1 is deliberately absent: it is reserved for the page title and should never
be indexed alongside the headings inside the article body.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from django.db import models

logger = logging.getLogger(__name__)

_TOKEN_SPLIT = re.compile(r"[\s,]+")


class HeadingLevel(models.TextChoices):
    H2 = "h2", "H2"
    H3 = "h3", "H3"
    H4 = "h4", "H4"
    H5 = "h5", "H5"
    H6 = "h6", "H6"


def parse_heading_levels(value: str | Iterable[str] | None) -> tuple[HeadingLevel, ...]:
    """
    Normalize a stored heading selection into ``HeadingLevel`` members.

    Selections usually come from whatever the editor persisted for an article:
    ``["H2", "H3"]``, ``"h2, h4"`` or ``None``. Tokens are matched
    case-insensitively; anything that is not one of the five allowed levels is
    dropped. The result is ordered h2..h6 with no duplicates.
    """
    if not value:
        return ()

    if isinstance(value, str):
        tokens = [token for token in _TOKEN_SPLIT.split(value) if token]
    else:
        tokens = [str(token) for token in value]

    allowed = set(HeadingLevel.values)
    selected = set()
    for token in tokens:
        normalized = token.strip().lower()
        if normalized in allowed:
            selected.add(normalized)
        else:
            logger.warning("Ignoring unknown heading level %r in selection", token)

    return tuple(level for level in HeadingLevel if level.value in selected)
