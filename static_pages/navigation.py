"""Previous/next navigation among published pages.

Example
-------
>>> from static_pages.models import Page
>>> from static_pages.navigation import resolve_navigation
>>> pages = [Page("a", "A"), Page("b", "B"), Page("c", "C")]
>>> nav = resolve_navigation("b", pages)
>>> (nav.prev.slug, nav.next.slug)
('a', 'c')
"""

from __future__ import annotations

import typing as typ

from .models import Page, PageNavigation

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def navigation_sort_key(page: Page) -> tuple[int, str]:
    """Order pages by sort order, then title ignoring case."""
    return (page.sort_order, page.title.casefold())


def order_navigable_pages(pages: cabc.Iterable[Page]) -> list[Page]:
    """Return the published, navigation-visible pages in navigation order."""
    visible = [page for page in pages if page.is_published and page.show_in_navigation]
    return sorted(visible, key=navigation_sort_key)


def resolve_navigation(current_slug: str, pages: typ.Sequence[Page]) -> PageNavigation:
    """Return the neighbours of ``current_slug`` within ``pages``.

    Parameters
    ----------
    current_slug : str
        Slug of the page being viewed.
    pages : Sequence[Page]
        Published, navigation-visible pages already in navigation order.

    Returns
    -------
    PageNavigation
        The pages immediately before and after the current one. Both are
        ``None`` when ``current_slug`` is not in ``pages``.
    """
    index = next(
        (idx for idx, page in enumerate(pages) if page.slug == current_slug), None
    )
    if index is None:
        return PageNavigation()
    prev = pages[index - 1] if index > 0 else None
    following = pages[index + 1] if index + 1 < len(pages) else None
    return PageNavigation(prev=prev, next=following)


__all__ = ["navigation_sort_key", "order_navigable_pages", "resolve_navigation"]
