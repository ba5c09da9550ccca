# contentindex/conf.py
"""
Settings for the table of contents integration.

    CONTENTINDEX_NAMESPACE       Prefix for generated anchor ids (default: "index")
    CONTENTINDEX_INTRO_LABEL     Label shown above the listing
    CONTENTINDEX_CONTENT_TYPES   Content types the rendering hook indexes (default: ("post",))

Label defaults go through gettext when they are read, so the active language
at render time decides the wording.
"""

from django.conf import settings
from django.utils.translation import gettext

from .toc.transformer import TocLabels


def get_namespace():
    return getattr(settings, "CONTENTINDEX_NAMESPACE", None) or gettext("index")


def get_intro_label():
    return getattr(settings, "CONTENTINDEX_INTRO_LABEL", None) or gettext(
        "What you will find in this article"
    )


def get_content_types():
    return tuple(getattr(settings, "CONTENTINDEX_CONTENT_TYPES", ("post",)))


def get_default_labels() -> TocLabels:
    return TocLabels(index_namespace=get_namespace(), intro_label=get_intro_label())
