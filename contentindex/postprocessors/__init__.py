# contentindex/postprocessors/__init__.py

from .table_of_contents import table_of_contents

POSTPROCESSORS = [
    table_of_contents,  # Anchor selected headings and prepend the listing
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
