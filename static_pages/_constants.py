"""Common literal values used across static_pages.

These constants keep defaults, CSS hooks, and URL layouts centralized so the
helpers, the view builder, and tests import the same values without drifting.
Intended for internal use within the static_pages package.

Examples
--------
>>> from static_pages import _constants
>>> _constants.PRETTY_URL_TEMPLATE.format(slug="about-us")
'/static/about-us.html'
>>> _constants.DEFAULT_WORDS_PER_MINUTE
200
"""

DEFAULT_WORDS_PER_MINUTE = 200
SLUG_FALLBACK = "section"
TOC_BASE_LEVEL = 2

PRETTY_URL_TEMPLATE = "/static/{slug}.html"
VIEW_URL_PATH = "/local/staticpage/view.php"
DEFAULT_OG_IMAGE = "/theme/pix/og-default.png"
DEFAULT_DATE_FORMAT = "%d/%m/%y"
# 9999-12-31T23:59:59Z, the last second datetime can represent.
MAX_TIMESTAMP = 253_402_300_799
