"""Small HTML fragments surrounding the page body."""

from __future__ import annotations

import typing as typ
from html import escape

if typ.TYPE_CHECKING:
    from .context import RenderContext
    from .models import PageNavigation


def generate_breadcrumbs(title: str, context: RenderContext) -> str:
    """Return a home → current page breadcrumb trail.

    The current page is the terminal, non-linked node.
    """
    translate = context.translate
    label = escape(translate("breadcrumbs"))
    home = escape(translate("home"))
    return (
        f'<nav class="staticpage-breadcrumbs" aria-label="{label}">'
        '<ol class="breadcrumb-list">'
        f'<li class="breadcrumb-item"><a href="{escape(context.home_url)}">'
        f'<i class="fa fa-home"></i> {home}</a></li>'
        '<li class="breadcrumb-item active" aria-current="page">'
        f"{escape(title)}</li>"
        "</ol></nav>"
    )


def format_last_modified(timestamp: int, context: RenderContext) -> str:
    """Return the "last updated" banner, or ``""`` for an unset timestamp."""
    if timestamp <= 0:
        return ""
    when = context.format_date(timestamp)
    text = escape(context.translate("lastupdated", when))
    return f'<div class="last-updated"><i class="fa fa-clock-o"></i> {text}</div>'


def generate_pagination(
    navigation: PageNavigation,
    context: RenderContext,
    page_url: typ.Callable[[str], str],
) -> str:
    """Return previous/next links, or ``""`` when there is no neighbour.

    Parameters
    ----------
    navigation : PageNavigation
        Neighbours resolved for the current page.
    context : RenderContext
        Supplies the translator for the link labels.
    page_url : Callable[[str], str]
        Maps a page slug to its URL.
    """
    if navigation.is_empty:
        return ""

    translate = context.translate
    parts = [
        f'<nav class="staticpage-pagination" '
        f'aria-label="{escape(translate("pagination"))}">'
    ]
    if navigation.prev is not None:
        parts.append(
            f'<a href="{escape(page_url(navigation.prev.slug))}" '
            'class="pagination-prev">'
            f'<i class="fa fa-arrow-left"></i> {escape(translate("previouspage"))}'
            f'<span class="pagination-title">{escape(navigation.prev.title)}</span>'
            "</a>"
        )
    else:
        parts.append('<span class="pagination-prev disabled"></span>')
    if navigation.next is not None:
        parts.append(
            f'<a href="{escape(page_url(navigation.next.slug))}" '
            'class="pagination-next">'
            f'{escape(translate("nextpage"))} <i class="fa fa-arrow-right"></i>'
            f'<span class="pagination-title">{escape(navigation.next.title)}</span>'
            "</a>"
        )
    else:
        parts.append('<span class="pagination-next disabled"></span>')
    parts.append("</nav>")
    return "".join(parts)


__all__ = ["format_last_modified", "generate_breadcrumbs", "generate_pagination"]
