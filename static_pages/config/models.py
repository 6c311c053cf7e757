"""Typed dataclasses describing the static page site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path
from urllib.parse import quote, urlencode

from .._constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_OG_IMAGE,
    DEFAULT_WORDS_PER_MINUTE,
    PRETTY_URL_TEMPLATE,
    VIEW_URL_PATH,
)
from ..context import RenderContext, strftime_formatter
from ..i18n import DEFAULT_LOCALE, StringCatalog, load_catalog
from ..models import Page, TitleSource


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteConfig:
    """Site-wide settings alongside the configured page records.

    Attributes
    ----------
    site_name : str
        Full site name used in metadata.
    site_short_name : str
        Short name appended to document titles.
    base_url : str
        Absolute root URL of the site, without trailing slash.
    locale : str
        Bundled string table used for labels.
    og_locale : str
        Open Graph locale advertised in link previews.
    pretty_urls : bool
        Serve pages under ``/static/<slug>.html`` instead of the view script.
    words_per_minute : int
        Reading speed for reading-time estimates.
    title_source : TitleSource
        Element that uploaded HTML documents take their title from when a page
        sets no ``title``.
    date_format : str
        ``strftime`` pattern for the last-updated banner.
    pygments_style : str
        Pygments style for code blocks in Markdown pages.
    default_og_image : str
        Share image used when a page has none; relative paths are joined onto
        ``base_url``.
    output_dir : Path
        Directory receiving rendered HTML files.
    strings : dict[str, str]
        Overrides for the bundled string table.
    pages : dict[str, Page]
        Page records keyed by slug, in configuration order.
    """

    site_name: str
    base_url: str
    site_short_name: str = ""
    locale: str = DEFAULT_LOCALE
    og_locale: str = "en_US"
    pretty_urls: bool = True
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
    title_source: TitleSource = TitleSource.H1
    date_format: str = DEFAULT_DATE_FORMAT
    pygments_style: str = "monokai"
    default_og_image: str = DEFAULT_OG_IMAGE
    output_dir: Path = Path("public")
    strings: dict[str, str] = dc.field(default_factory=dict)
    pages: dict[str, Page] = dc.field(default_factory=dict)

    @property
    def short_name(self) -> str:
        """Return the short site name, falling back to the full name."""
        return self.site_short_name or self.site_name

    def absolute_url(self, path: str) -> str:
        """Join ``path`` onto the base URL unless it is already absolute."""
        if "://" in path or path.startswith("//"):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def page_url(self, slug: str) -> str:
        """Return the absolute URL at which ``slug`` is served."""
        if self.pretty_urls:
            return self.absolute_url(PRETTY_URL_TEMPLATE.format(slug=quote(slug)))
        query = urlencode({"page": slug})
        return self.absolute_url(f"{VIEW_URL_PATH}?{query}")

    def og_image_for(self, page: Page) -> str:
        """Return the share image for ``page``, falling back to the site default."""
        return self.absolute_url(page.og_image or self.default_og_image)

    def translator(self) -> StringCatalog:
        """Return the string catalog for the configured locale and overrides."""
        return load_catalog(self.locale, self.strings)

    def render_context(self) -> RenderContext:
        """Build the context injected into the rendering helpers."""
        return RenderContext(
            site_name=self.site_name,
            base_url=self.base_url,
            translate=self.translator(),
            format_date=strftime_formatter(self.date_format),
            words_per_minute=self.words_per_minute,
        )


__all__ = ["SiteConfig", "SiteConfigError"]
