"""Common literal values used across manual_sidebar.

These constants keep metadata keys and filename patterns centralized so the
selector, writers, templates, and tests can import the same values without
drifting. Intended for internal use within the manual_sidebar package.

Examples
--------
>>> from manual_sidebar import _constants
>>> _constants.DATA_KEY_TEMPLATE.format(lang="en")
'sidebar_en'
>>> _constants.MANUAL_DIR_TEMPLATE.format(version="1.0", lang="ja")
'/manuals/1.0/ja/'
"""

MANUAL_CATEGORY = "Manual"
MANUAL_VERSION = "1.0"
MANUAL_DIR_TEMPLATE = "/manuals/{version}/{lang}/"
LAYOUT_TEMPLATE = "docs-{lang}"
DATA_KEY_TEMPLATE = "sidebar_{lang}"
HTML_FILENAME_TEMPLATE = "sidebar-{lang}.html"

INDEX_SUFFIX = "/index.md"
CONVENTION_SEGMENT = "/convention/"
