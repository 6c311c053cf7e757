"""Read-only access to stored page records.

The rendering helpers never query storage themselves; the view builder asks a
:class:`PageRepository` for the page being viewed and for the ordered
navigation list. :class:`InMemoryPageRepository` serves the records loaded
from the site configuration.
"""

from __future__ import annotations

import typing as typ

from .navigation import navigation_sort_key, order_navigable_pages

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import Page


class PageNotFoundError(LookupError):
    """Raised when a requested page does not exist or is not published."""

    def __init__(self, slug: str, message: str | None = None) -> None:
        self.slug = slug
        super().__init__(message or f"Page '{slug}' not found.")


class PageRepository(typ.Protocol):
    """Storage capability consumed by the view builder."""

    def get_published(self, slug: str) -> Page | None:
        """Return the published page called ``slug``, if any."""
        ...

    def list_navigable(self) -> list[Page]:
        """Return published, navigation-visible pages in navigation order."""
        ...

    def list_published(self) -> list[Page]:
        """Return every published page in navigation order."""
        ...


class InMemoryPageRepository:
    """Serve page records held in memory, keyed by slug."""

    def __init__(self, pages: cabc.Iterable[Page]) -> None:
        self._pages: dict[str, Page] = {page.slug: page for page in pages}

    def get_published(self, slug: str) -> Page | None:
        """Return the page called ``slug`` when it exists and is published."""
        page = self._pages.get(slug)
        if page is None or not page.is_published:
            return None
        return page

    def list_navigable(self) -> list[Page]:
        """Return published, navigation-visible pages in navigation order."""
        return order_navigable_pages(self._pages.values())

    def list_published(self) -> list[Page]:
        """Return every published page ordered by sort order, then title."""
        published = [page for page in self._pages.values() if page.is_published]
        return sorted(published, key=navigation_sort_key)


__all__ = ["InMemoryPageRepository", "PageNotFoundError", "PageRepository"]
