"""Load and validate the site configuration YAML for static page builds.

This subpackage parses the project's ``pages.yaml`` file, applies the
site-wide defaults, validates every page record, and produces the typed
:class:`SiteConfig` that the view builder and CLI consume. The primary entry
point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from static_pages.config import load_site_config
>>> site = load_site_config(Path("config/pages.yaml"))  # doctest: +SKIP
>>> site.page_url("about-us")  # doctest: +SKIP
'https://example.test/static/about-us.html'
"""

from .loader import load_site_config
from .models import SiteConfig, SiteConfigError

__all__ = ["SiteConfig", "SiteConfigError", "load_site_config"]
