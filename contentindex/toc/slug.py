# contentindex/toc/slug.py

import re

from bs4 import BeautifulSoup
from django.utils.text import slugify

_SEPARATORS = re.compile(r"[_-]+")


def heading_text(markup: str) -> str:
    """
    Return the plain text of a heading's inner markup.

    Tags are dropped and entities decoded, so ``"Fish &amp; <em>Chips</em>"``
    gives ``"Fish & Chips"``. Callers must escape the result before putting it
    back into HTML.
    """
    if not markup:
        return ""
    return BeautifulSoup(markup, "html.parser").get_text()


def generate_slug(text: str, namespace: str) -> str:
    """
    Convert heading text into a namespaced anchor id.

    ``"Café &amp; Cream"`` with namespace ``"index"`` becomes
    ``"index-cafe-cream"``. Text without any letters or digits yields the bare
    ``"index-"`` prefix.
    """
    token = _SEPARATORS.sub("-", slugify(heading_text(text))).strip("-")
    return f"{namespace}-{token}"
