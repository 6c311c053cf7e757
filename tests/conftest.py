"""Shared fixtures for the static_pages test suite."""

from __future__ import annotations

import typing as typ

import pytest
from _page_helpers import make_page

from static_pages.config import SiteConfig
from static_pages.context import RenderContext
from static_pages.i18n import StringCatalog, load_catalog
from static_pages.models import PageStatus

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def strings() -> StringCatalog:
    """Return the bundled English string catalog."""
    return load_catalog("en")


@pytest.fixture
def render_context(strings: StringCatalog) -> RenderContext:
    """Return a render context for a fixed test site."""
    return RenderContext(
        site_name="Example Academy",
        base_url="https://academy.example.test",
        translate=strings,
        format_date=lambda timestamp: f"day-{timestamp}",
    )


@pytest.fixture
def site_config(tmp_path: Path) -> SiteConfig:
    """Return a site configuration with three navigable pages and a draft."""
    pages = [
        make_page(
            "intro",
            "Introduction",
            sort_order=1,
            content="<h2>Start</h2><p>one two three</p><h3>Detail</h3><p>four</p>",
            time_modified=1_700_000_000,
            time_created=1_690_000_000,
            meta_description="All about the course.",
        ),
        make_page("guide", "Guide", sort_order=2),
        make_page("faq", "FAQ", sort_order=3),
        make_page("legal", "Legal", show_in_navigation=False),
        make_page("soon", "Coming soon", status=PageStatus.DRAFT),
    ]
    return SiteConfig(
        site_name="Example Academy",
        site_short_name="Academy",
        base_url="https://academy.example.test",
        output_dir=tmp_path / "public",
        pages={page.slug: page for page in pages},
    )
