"""Typed records shared by the page rendering helpers.

Page rows arrive from storage as :class:`Page` instances; everything else in
this module is derived per render and never persisted.
"""

from __future__ import annotations

import dataclasses as dc
import enum


class PageStatus(enum.StrEnum):
    """Publication state of a stored page."""

    DRAFT = "draft"
    PUBLISHED = "published"


class ContentFormat(enum.StrEnum):
    """Markup language the page body was authored in."""

    HTML = "html"
    MARKDOWN = "markdown"
    PLAIN = "plain"


class TitleSource(enum.StrEnum):
    """Element an uploaded HTML document takes its page title from."""

    H1 = "h1"
    TITLE = "title"


@dc.dataclass(frozen=True, slots=True)
class Page:
    """A static page record as owned by persistent storage.

    Attributes
    ----------
    slug : str
        Unique, URL-safe identifier of the page.
    title : str
        Human-readable page title.
    content : str
        Page body in ``content_format``.
    content_format : ContentFormat
        Markup language of ``content``.
    status : PageStatus
        Draft pages are never served.
    show_in_navigation : bool
        Whether the page takes part in previous/next navigation.
    sort_order : int
        Navigation position; ties are broken by title.
    time_created : int
        Unix timestamp of creation, ``0`` when unknown.
    time_modified : int
        Unix timestamp of the last edit, ``0`` when unknown.
    modified_by : int, optional
        Identifier of the user who last edited the page.
    meta_description : str, optional
        Short description for search engines and link previews.
    og_image : str, optional
        Absolute URL of the image used when the page is shared.
    head_markup : str
        Extra ``<style>`` and ``<link>`` markup for the document head, carried
        over from an uploaded HTML document.
    """

    slug: str
    title: str
    content: str = ""
    content_format: ContentFormat = ContentFormat.HTML
    status: PageStatus = PageStatus.DRAFT
    show_in_navigation: bool = True
    sort_order: int = 0
    time_created: int = 0
    time_modified: int = 0
    modified_by: int | None = None
    meta_description: str | None = None
    og_image: str | None = None
    head_markup: str = ""

    @property
    def is_published(self) -> bool:
        """Return ``True`` when the page may be served to visitors."""
        return self.status == PageStatus.PUBLISHED


@dc.dataclass(frozen=True, slots=True)
class Heading:
    """A level-two or level-three heading found in page content."""

    level: int
    text: str
    slug: str
    original: str
    start: int
    end: int


@dc.dataclass(frozen=True, slots=True)
class TocResult:
    """Table-of-contents markup alongside the anchored content."""

    toc: str
    content: str
    headings: tuple[Heading, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class ReadingTime:
    """Estimated reading time for a page body."""

    minutes: int
    word_count: int
    formatted: str


@dc.dataclass(frozen=True, slots=True)
class PageNavigation:
    """Neighbouring pages in navigation order; ``None`` at either boundary."""

    prev: Page | None = None
    next: Page | None = None

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when neither neighbour exists."""
        return self.prev is None and self.next is None


__all__ = [
    "ContentFormat",
    "Heading",
    "Page",
    "PageNavigation",
    "PageStatus",
    "ReadingTime",
    "TitleSource",
    "TocResult",
]
