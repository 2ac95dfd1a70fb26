"""Common literal values used across bokiz.

These constants keep the source extension, output naming, and HTML markers in
one place so the parser, renderer, and tests can import the same values.

Examples
--------
>>> from bokiz import _constants
>>> _constants.SOURCE_SUFFIX
'.bokiz'
>>> _constants.OVERVIEW_TEMPLATE.format(index="<ul>\\n</ul>\\n")
'<div class="overview">\\n<ul>\\n</ul>\\n</div>\\n\\n'
"""

SOURCE_SUFFIX = ".bokiz"
HTML_SUFFIX = ".html"
LATEX_SUFFIX = ".tex"
PDF_SUFFIX = ".pdf"
NBSP = "&nbsp;"
OVERVIEW_TEMPLATE = '<div class="overview">\n{index}</div>\n\n'
TEMPORARY_PREFIX = "bokiz-"
