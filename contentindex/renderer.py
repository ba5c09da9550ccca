# contentindex/renderer.py

from .postprocessors import apply_postprocessors


def render_content(html, context=None):
    """
    Run already-rendered article HTML through the postprocessor pipeline.

    Args:
        html: Article HTML
        context: Optional dict for processors that need additional data
            (heading_levels, content_type, is_singular, toc_labels)
    """
    context = context or {}
    return apply_postprocessors(html, context)
