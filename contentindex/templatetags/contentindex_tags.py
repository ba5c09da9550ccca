# contentindex/templatetags/contentindex_tags.py

from django import template
from django.utils.safestring import SafeData, mark_safe

from contentindex.renderer import render_content

register = template.Library()


@register.filter(name="table_of_contents", is_safe=True)
def table_of_contents_filter(value, levels=""):
    """
    Usage: {{ post.body|safe|table_of_contents:"h2,h3" }}

    Output stays safe only if the input was; plain strings are autoescaped.
    """
    return render_content(value, context={"heading_levels": levels})


@register.simple_tag(takes_context=True)
def render_content_with_context(context, value):
    """Template tag that passes template context to processors"""
    processor_context = {
        "heading_levels": context.get("heading_levels"),
        "content_type": context.get("content_type"),
        "is_singular": context.get("is_singular"),
    }
    html = render_content(value, context=processor_context)
    if isinstance(value, SafeData):
        return mark_safe(html)
    return html
