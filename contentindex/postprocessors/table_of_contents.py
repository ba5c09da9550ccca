# contentindex/postprocessors/table_of_contents.py

import logging

from contentindex.conf import get_content_types, get_default_labels
from contentindex.headings import parse_heading_levels
from contentindex.toc import transform

logger = logging.getLogger(__name__)


def table_of_contents(html: str, context: dict) -> str:
    """
    Prepend a table of contents and anchor the selected headings.

    Context keys:
        heading_levels: Stored selection for the article (e.g. ["H2", "H3"])
        content_type: Kind of content being rendered; only types listed in
            CONTENTINDEX_CONTENT_TYPES are indexed
        is_singular: False for list/archive renders, which are left alone
        toc_labels: Optional TocLabels overriding the configured labels
    """
    levels = parse_heading_levels(context.get("heading_levels"))
    if not levels:
        return html

    content_type = context.get("content_type")
    if content_type is not None and content_type not in get_content_types():
        logger.debug("Skipping table of contents for content type %r", content_type)
        return html

    if context.get("is_singular") is False:
        return html

    labels = context.get("toc_labels") or get_default_labels()
    return transform(html, levels, labels)
