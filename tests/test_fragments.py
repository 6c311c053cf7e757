"""Unit tests for breadcrumbs, last-updated banner and pagination markup."""

from __future__ import annotations

import typing as typ

from _page_helpers import make_page
from bs4 import BeautifulSoup

from static_pages.fragments import (
    format_last_modified,
    generate_breadcrumbs,
    generate_pagination,
)
from static_pages.models import PageNavigation

if typ.TYPE_CHECKING:
    from static_pages.context import RenderContext


def test_breadcrumbs_link_home_and_end_with_title(
    render_context: RenderContext,
) -> None:
    """The trail links home and ends with the unlinked, escaped title."""
    html = generate_breadcrumbs("Fees & <grants>", render_context)
    soup = BeautifulSoup(html, "html.parser")
    items = soup.select("li.breadcrumb-item")

    assert len(items) == 2
    assert items[0].a["href"] == "https://academy.example.test"
    assert items[0].get_text(strip=True) == "Home"
    assert items[1].a is None
    assert items[1]["aria-current"] == "page"
    assert items[1].get_text() == "Fees & <grants>"
    assert "<grants>" not in html


def test_last_modified_empty_for_unset_timestamp(
    render_context: RenderContext,
) -> None:
    """Zero and negative timestamps produce no banner."""
    assert format_last_modified(0, render_context) == ""
    assert format_last_modified(-5, render_context) == ""


def test_last_modified_uses_host_formatter(render_context: RenderContext) -> None:
    """The banner interpolates the host-formatted date."""
    html = format_last_modified(1_700_000_000, render_context)
    div = BeautifulSoup(html, "html.parser").select_one("div.last-updated")
    assert div.get_text(strip=True) == "Last updated: day-1700000000"


def test_pagination_empty_without_neighbours(render_context: RenderContext) -> None:
    """No markup is produced when there is nothing to link to."""
    assert generate_pagination(PageNavigation(), render_context, str) == ""


def test_pagination_links_both_neighbours(render_context: RenderContext) -> None:
    """Both neighbours are linked with their titles."""
    navigation = PageNavigation(prev=make_page("a", "Alpha"), next=make_page("c"))
    html = generate_pagination(navigation, render_context, lambda s: f"/p/{s}")
    soup = BeautifulSoup(html, "html.parser")

    prev_link = soup.select_one("a.pagination-prev")
    next_link = soup.select_one("a.pagination-next")
    assert prev_link["href"] == "/p/a"
    assert prev_link.select_one(".pagination-title").get_text() == "Alpha"
    assert next_link["href"] == "/p/c"
    assert "Next" in next_link.get_text()


def test_pagination_marks_missing_side_disabled(
    render_context: RenderContext,
) -> None:
    """A missing neighbour renders as a disabled placeholder."""
    navigation = PageNavigation(next=make_page("b"))
    soup = BeautifulSoup(
        generate_pagination(navigation, render_context, str), "html.parser"
    )
    assert soup.select_one("span.pagination-prev.disabled") is not None
    assert soup.select_one("a.pagination-prev") is None
