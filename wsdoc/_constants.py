"""Common literal values used across wsdoc.

These constants keep sentinels, markup fragments and filenames centralized so
the scanner, dispatcher, renderers and tests can import the same values
without drifting. Intended for internal use within the wsdoc package.

Examples
--------
>>> from wsdoc import _constants
>>> _constants.START_SENTINEL
'wsdoc {'
>>> _constants.GLOSSARY_MARKUP.format(term="BID")
'<span class="glossary">BID</span>'
"""

START_SENTINEL = "wsdoc {"
END_SENTINEL = "wsdoc }"
DEFAULT_COMMENT_MARKER = "#"

INDENT_UNIT = "&nbsp;&nbsp;&nbsp;&nbsp;"
GLOSSARY_MARKUP = '<span class="glossary">{term}</span>'

PAGE_SUFFIX = ".html"
INDEX_FILENAME = "docs.html"
DEFAULT_VERSION = "1.0"
