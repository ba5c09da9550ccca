# contentindex/toc/__init__.py

from .extractor import HeadingMatch, build_heading_pattern, find_headings
from .slug import generate_slug
from .transformer import TocEntry, TocLabels, transform

__all__ = [
    "HeadingMatch",
    "TocEntry",
    "TocLabels",
    "build_heading_pattern",
    "find_headings",
    "generate_slug",
    "transform",
]
