"""Assemble and render complete static page views.

This module plays the part of the host's view controller. It resolves a page
through a :class:`~static_pages.repository.PageRepository`, signals unknown
or unpublished slugs with :class:`~static_pages.repository.PageNotFoundError`,
runs every rendering helper, and renders the ``static_page.jinja`` document.
:class:`PageViewBuilder.run` writes every published page to disk the way the
CLI uses it.

Example
-------
>>> from pathlib import Path
>>> from static_pages.config import load_site_config
>>> from static_pages.repository import InMemoryPageRepository
>>> from static_pages.view import PageViewBuilder
>>> site = load_site_config(Path("config/pages.yaml"))  # doctest: +SKIP
>>> repo = InMemoryPageRepository(site.pages.values())  # doctest: +SKIP
>>> PageViewBuilder(site, repo).run()  # doctest: +SKIP
[PosixPath('public/about-us.html'), ...]
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .fragments import format_last_modified, generate_breadcrumbs, generate_pagination
from .navigation import resolve_navigation
from .reading_time import calculate_reading_time
from .renderer import HtmlContentRenderer
from .repository import PageNotFoundError
from .seo import build_meta_tags
from .share import generate_share_buttons
from .toc import generate_toc

if typ.TYPE_CHECKING:
    from .config import SiteConfig
    from .models import Page, PageNavigation, ReadingTime
    from .repository import PageRepository

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class PageView:
    """Everything the page template needs for one page.

    Attributes
    ----------
    page : Page
        The stored page record.
    url : str
        Canonical URL of the page.
    document_title : str
        ``<title>`` text: page title followed by the site short name.
    head_tags : tuple[str, ...]
        SEO, Open Graph, Twitter and JSON-LD markup for ``<head>``, followed
        by any styles and links carried over from an uploaded document.
    breadcrumbs : str
        Breadcrumb markup.
    reading_time : ReadingTime
        Reading-time estimate of the rendered body.
    toc : str
        Table-of-contents markup; empty without headings.
    content : str
        Rendered body with heading anchors.
    last_modified : str
        "Last updated" banner; empty when the page has no timestamp.
    share_buttons : str
        Social sharing markup.
    navigation : PageNavigation
        Previous and next pages.
    pagination : str
        Previous/next link markup; empty without neighbours.
    """

    page: Page
    url: str
    document_title: str
    head_tags: tuple[str, ...]
    breadcrumbs: str
    reading_time: ReadingTime
    toc: str
    content: str
    last_modified: str
    share_buttons: str
    navigation: PageNavigation
    pagination: str


class PageViewBuilder:
    """Build and render page views for a configured site."""

    def __init__(
        self,
        site: SiteConfig,
        repository: PageRepository,
        *,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the builder with configuration and template context.

        Parameters
        ----------
        site : SiteConfig
            Site identity, URL layout and rendering defaults.
        repository : PageRepository
            Source of page records and the navigation order.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        output_dir : Path, optional
            Override for the HTML output directory; defaults to the site config.
        """
        self.site = site
        self.repository = repository
        self.context = site.render_context()
        self.renderer = HtmlContentRenderer(site.pygments_style)
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.output_dir = output_dir or site.output_dir
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("static_page.jinja")

    def build(self, slug: str) -> PageView:
        """Assemble the view of the published page called ``slug``.

        Raises
        ------
        PageNotFoundError
            If no published page has that slug; the message is the localized
            ``pagenotfound`` string.
        """
        page = self.repository.get_published(slug)
        if page is None:
            logger.info("page not found", extra={"slug": slug})
            raise PageNotFoundError(slug, self.context.translate("pagenotfound"))

        url = self.site.page_url(page.slug)
        body = self.renderer.render(page.content, page.content_format)
        toc = generate_toc(body, self.context.translate)
        navigation = resolve_navigation(page.slug, self.repository.list_navigable())
        head_tags = build_meta_tags(
            page,
            title=page.title,
            canonical_url=url,
            site_name=self.site.site_name,
            site_url=self.context.home_url,
            og_image=self.site.og_image_for(page),
            og_locale=self.site.og_locale,
        )
        if page.head_markup:
            head_tags.append(page.head_markup)

        view = PageView(
            page=page,
            url=url,
            document_title=f"{page.title} | {self.site.short_name}",
            head_tags=tuple(head_tags),
            breadcrumbs=generate_breadcrumbs(page.title, self.context),
            reading_time=calculate_reading_time(
                body, self.context.translate, self.context.words_per_minute
            ),
            toc=toc.toc,
            content=toc.content,
            last_modified=format_last_modified(page.time_modified, self.context),
            share_buttons=generate_share_buttons(
                url, page.title, self.context.translate, page.meta_description
            ),
            navigation=navigation,
            pagination=generate_pagination(
                navigation, self.context, self.site.page_url
            ),
        )
        logger.info(
            "page viewed",
            extra={
                "slug": page.slug,
                "title": page.title,
                "headings": len(toc.headings),
                "words": view.reading_time.word_count,
            },
        )
        return view

    def render(self, slug: str) -> str:
        """Render the full HTML document for ``slug``."""
        view = self.build(slug)
        html = self.template.render(
            view=view,
            site=self.site,
            lang=self.site.locale,
            pygments_css=self.renderer.stylesheet,
        )
        if not html.endswith("\n"):
            html += "\n"
        return html

    def output_path(self, slug: str) -> Path:
        """Return where the rendered document for ``slug`` is written."""
        return self.output_dir / f"{slug}.html"

    def write(self, slug: str) -> Path:
        """Render ``slug`` and write it to :meth:`output_path`."""
        html = self.render(slug)
        path = self.output_path(slug)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
        return path

    def run(self) -> list[Path]:
        """Render every published page to the output directory.

        Returns
        -------
        list[Path]
            Paths of the written documents in navigation order.
        """
        written = [self.write(page.slug) for page in self.repository.list_published()]
        logger.info(
            "rendered pages",
            extra={"count": len(written), "output_dir": str(self.output_dir)},
        )
        return written


__all__ = ["PageView", "PageViewBuilder"]
