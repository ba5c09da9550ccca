from django.template import Context, Template
from django.utils.safestring import mark_safe

from contentindex.templatetags.contentindex_tags import table_of_contents_filter

HTML = "<h2>Intro</h2><h3>Details</h3>"
UNTRUSTED = "<h2>Intro</h2><script>alert(1)</script>"


def test_filter_without_levels_returns_content():
    assert table_of_contents_filter(HTML) == HTML


def test_filter_in_template():
    template = Template('{% load contentindex_tags %}{{ body|table_of_contents:"h3" }}')
    result = template.render(Context({"body": mark_safe(HTML)}))

    assert "<h2>Intro</h2>" in result
    assert '<span class="index-anchor" id="index-details"></span><h3>Details</h3>' in result
    assert "&lt;" not in result


def test_filter_keeps_unsafe_input_escaped():
    template = Template('{% load contentindex_tags %}{{ body|table_of_contents:"h2" }}')
    result = template.render(Context({"body": UNTRUSTED}))

    assert "<script>" not in result
    assert "&lt;script&gt;" in result


def test_filter_without_levels_keeps_unsafe_input_escaped():
    template = Template("{% load contentindex_tags %}{{ body|table_of_contents }}")
    result = template.render(Context({"body": UNTRUSTED}))

    assert result == "&lt;h2&gt;Intro&lt;/h2&gt;&lt;script&gt;alert(1)&lt;/script&gt;"


def test_tag_reads_template_context():
    template = Template("{% load contentindex_tags %}{% render_content_with_context body %}")
    context = Context(
        {"body": mark_safe(HTML), "heading_levels": ["H2", "H3"], "content_type": "post"}
    )
    result = template.render(context)

    assert 'href="#index-intro"' in result
    assert 'href="#index-details"' in result


def test_tag_skips_other_content_types():
    template = Template("{% load contentindex_tags %}{% render_content_with_context body %}")
    context = Context(
        {"body": mark_safe(HTML), "heading_levels": ["H2"], "content_type": "page"}
    )

    assert template.render(context) == HTML


def test_tag_keeps_unsafe_input_escaped():
    template = Template("{% load contentindex_tags %}{% render_content_with_context body %}")
    context = Context({"body": UNTRUSTED, "content_type": "page", "heading_levels": ["H2"]})
    result = template.render(context)

    assert "<script>" not in result
    assert "&lt;script&gt;" in result
