"""Search-engine and link-preview metadata for a page view.

Builds the ``<head>`` additions for a page: description and canonical link,
Open Graph and Twitter card tags, and a schema.org ``WebPage`` JSON-LD block.
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from html import escape

import msgspec.json as msgspec_json

if typ.TYPE_CHECKING:
    from .models import Page


def _meta(attribute: str, name: str, content: str) -> str:
    return f'<meta {attribute}="{escape(name)}" content="{escape(content)}">'


def _iso_timestamp(timestamp: int) -> str:
    return dt.datetime.fromtimestamp(timestamp, tz=dt.UTC).isoformat()


def build_schema_org(
    page: Page,
    *,
    title: str,
    canonical_url: str,
    site_name: str,
    site_url: str,
) -> dict[str, typ.Any]:
    """Return the schema.org ``WebPage`` description of ``page``."""
    schema: dict[str, typ.Any] = {
        "@context": "https://schema.org",
        "@type": "WebPage",
        "name": title,
        "url": canonical_url,
        "publisher": {"@type": "Organization", "name": site_name, "url": site_url},
    }
    if page.meta_description:
        schema["description"] = page.meta_description
    if page.time_modified > 0:
        schema["dateModified"] = _iso_timestamp(page.time_modified)
    if page.time_created > 0:
        schema["datePublished"] = _iso_timestamp(page.time_created)
    return schema


def encode_json_ld(payload: typ.Mapping[str, typ.Any]) -> str:
    """Encode ``payload`` for embedding inside a ``<script>`` element.

    ``<`` is escaped so the payload cannot close the script element early.
    """
    encoded = msgspec_json.encode(payload).decode("utf-8")
    return encoded.replace("<", "\\u003c")


def build_meta_tags(
    page: Page,
    *,
    title: str,
    canonical_url: str,
    site_name: str,
    site_url: str,
    og_image: str,
    og_locale: str,
) -> list[str]:
    """Return the head tags for ``page`` in output order.

    Parameters
    ----------
    page : Page
        Page being rendered; supplies description and timestamps.
    title : str
        Display title of the page.
    canonical_url : str
        Authoritative URL of the page.
    site_name : str
        Full site name for ``og:site_name`` and the JSON-LD publisher.
    site_url : str
        Root URL of the site for the JSON-LD publisher.
    og_image : str
        Share image URL, already resolved against the site default.
    og_locale : str
        Open Graph locale such as ``es_ES``.

    Returns
    -------
    list[str]
        One markup string per tag; optional tags are omitted when the page has
        no description.
    """
    description = page.meta_description
    tags: list[str] = []
    if description:
        tags.append(_meta("name", "description", description))
    tags.append(f'<link rel="canonical" href="{escape(canonical_url)}">')

    tags.append(_meta("property", "og:type", "article"))
    tags.append(_meta("property", "og:title", title))
    tags.append(_meta("property", "og:url", canonical_url))
    tags.append(_meta("property", "og:site_name", site_name))
    if description:
        tags.append(_meta("property", "og:description", description))
    tags.append(_meta("property", "og:image", og_image))
    tags.append(_meta("property", "og:locale", og_locale))

    tags.append(_meta("name", "twitter:card", "summary_large_image"))
    tags.append(_meta("name", "twitter:title", title))
    if description:
        tags.append(_meta("name", "twitter:description", description))
    tags.append(_meta("name", "twitter:image", og_image))

    schema = build_schema_org(
        page,
        title=title,
        canonical_url=canonical_url,
        site_name=site_name,
        site_url=site_url,
    )
    tags.append(
        f'<script type="application/ld+json">{encode_json_ld(schema)}</script>'
    )
    return tags


__all__ = ["build_meta_tags", "build_schema_org", "encode_json_ld"]
