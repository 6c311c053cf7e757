"""Unit tests for SEO, Open Graph and JSON-LD head tags."""

from __future__ import annotations

import msgspec.json as msgspec_json
from _page_helpers import make_page
from bs4 import BeautifulSoup

from static_pages.seo import build_meta_tags, encode_json_ld


def _tags(**page_overrides: object) -> BeautifulSoup:
    page = make_page("about", "About us", **page_overrides)
    tags = build_meta_tags(
        page,
        title=page.title,
        canonical_url="https://site.test/static/about.html",
        site_name="Site",
        site_url="https://site.test",
        og_image="https://site.test/og.png",
        og_locale="es_ES",
    )
    return BeautifulSoup("".join(tags), "html.parser")


def test_open_graph_and_twitter_tags_are_emitted() -> None:
    """Core tags are present even without a description."""
    soup = _tags()
    assert soup.select_one('link[rel="canonical"]')["href"] == (
        "https://site.test/static/about.html"
    )
    og = {tag["property"]: tag["content"] for tag in soup.select("meta[property]")}
    assert og == {
        "og:type": "article",
        "og:title": "About us",
        "og:url": "https://site.test/static/about.html",
        "og:site_name": "Site",
        "og:image": "https://site.test/og.png",
        "og:locale": "es_ES",
    }
    assert soup.select_one('meta[name="twitter:card"]')["content"] == (
        "summary_large_image"
    )
    assert soup.select_one('meta[name="description"]') is None


def test_description_adds_optional_tags() -> None:
    """A description appears in the plain, Open Graph and Twitter tags."""
    soup = _tags(meta_description='Who we are & "why"')
    assert soup.select_one('meta[name="description"]')["content"] == (
        'Who we are & "why"'
    )
    assert soup.select_one('meta[property="og:description"]') is not None
    assert soup.select_one('meta[name="twitter:description"]') is not None


def test_json_ld_describes_the_page() -> None:
    """The JSON-LD block carries publisher and ISO dates when available."""
    soup = _tags(
        meta_description="Desc", time_created=86_400, time_modified=172_800
    )
    script = soup.select_one('script[type="application/ld+json"]')
    payload = msgspec_json.decode(script.get_text())
    assert payload["@type"] == "WebPage"
    assert payload["publisher"] == {
        "@type": "Organization",
        "name": "Site",
        "url": "https://site.test",
    }
    assert payload["description"] == "Desc"
    assert payload["datePublished"] == "1970-01-02T00:00:00+00:00"
    assert payload["dateModified"] == "1970-01-03T00:00:00+00:00"


def test_json_ld_omits_unset_dates() -> None:
    """Pages without timestamps do not advertise dates."""
    script = _tags().select_one('script[type="application/ld+json"]')
    payload = msgspec_json.decode(script.get_text())
    assert "dateModified" not in payload
    assert "datePublished" not in payload


def test_json_ld_cannot_close_script_element() -> None:
    """``<`` is escaped while slashes and unicode stay readable."""
    encoded = encode_json_ld({"name": "</script> Título", "url": "https://a/b"})
    assert "</script>" not in encoded
    assert "Título" in encoded
    assert "https://a/b" in encoded
    assert msgspec_json.decode(encoded)["name"] == "</script> Título"
