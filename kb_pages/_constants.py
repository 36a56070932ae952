"""Common literal values used across kb_pages.

Marker glyphs and defaults live here so the badge classifier, the navigation
builder, the CLI, and the tests all agree on the same values.

Examples
--------
>>> from kb_pages import _constants
>>> _constants.COMPLETED_MARKER
'✅'
>>> _constants.STATUS_TEMPLATE.format(path="out.html", kb=12)
'Generated: out.html (12KB)'
"""

COMPLETED_MARKER = "✅"
PENDING_MARKER = "⏳"

DEFAULT_CODE_LANGUAGE = "text"
GROUP_LABEL_LIMIT = 40
LINK_LABEL_LIMIT = 35

STATUS_TEMPLATE = "Generated: {path} ({kb}KB)"
