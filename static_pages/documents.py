"""Read complete HTML documents uploaded as page sources.

Editors can drop a standalone ``.html`` file next to the configuration instead
of pasting a body fragment. :func:`parse_html_document` pulls out what a page
record needs: the candidate titles (first ``<h1>`` and ``<title>``), the
``<meta name="description">`` text, the markup inside ``<body>``, and the
document's ``<style>`` and ``<link>`` elements, which move into the rendered
page's ``<head>``.

Example
-------
>>> from static_pages.documents import parse_html_document
>>> doc = parse_html_document(
...     "<html><head><title>Cookies</title></head>"
...     "<body><h1>Cookie policy</h1><p>We use cookies.</p></body></html>"
... )
>>> (doc.title, doc.heading)
('Cookies', 'Cookie policy')
>>> doc.body
'<h1>Cookie policy</h1><p>We use cookies.</p>'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from bs4 import BeautifulSoup

from .models import TitleSource

if typ.TYPE_CHECKING:
    from bs4 import Tag

HEAD_ASSET_TAGS = ["style", "link"]
HEAD_ONLY_TAGS = ["head", "title", "meta"]


@dc.dataclass(frozen=True, slots=True)
class HtmlDocument:
    """The parts of an uploaded HTML document a page is built from.

    Attributes
    ----------
    title : str or None
        Text of the ``<title>`` element.
    heading : str or None
        Text of the first ``<h1>`` element.
    description : str or None
        ``content`` of ``<meta name="description">``.
    body : str
        Markup inside ``<body>``, without the moved head assets.
    head_markup : str
        Serialized ``<style>`` and ``<link>`` elements in document order.
    """

    title: str | None
    heading: str | None
    description: str | None
    body: str
    head_markup: str = ""

    def title_for(self, source: TitleSource) -> str | None:
        """Return the title candidate selected by ``source``."""
        if source == TitleSource.H1:
            return self.heading
        return self.title


def _text_of(tag: Tag | None) -> str | None:
    if tag is None:
        return None
    text = " ".join(tag.get_text().split())
    return text or None


def _description_of(soup: BeautifulSoup) -> str | None:
    for meta in soup.find_all("meta"):
        if str(meta.get("name", "")).lower() == "description":
            text = str(meta.get("content", "")).strip()
            return text or None
    return None


def parse_html_document(source: str) -> HtmlDocument:
    """Split a standalone HTML document into page fields.

    Parameters
    ----------
    source : str
        Full HTML document text. Fragments without ``<html>`` or ``<body>``
        are accepted; everything outside the head-only elements becomes the
        body.

    Returns
    -------
    HtmlDocument
        Title candidates, description, body markup and head assets.
    """
    soup = BeautifulSoup(source, "html.parser")
    heading = _text_of(soup.find("h1"))
    title = _text_of(soup.find("title"))
    description = _description_of(soup)

    assets = soup.find_all(HEAD_ASSET_TAGS)
    head_markup = "".join(str(asset) for asset in assets)
    for asset in assets:
        asset.extract()

    body = soup.body
    if body is not None:
        content = body.decode_contents()
    else:
        for tag in soup.find_all(HEAD_ONLY_TAGS):
            if not tag.decomposed:
                tag.decompose()
        html = soup.html
        content = html.decode_contents() if html is not None else soup.decode()

    return HtmlDocument(
        title=title,
        heading=heading,
        description=description,
        body=content.strip(),
        head_markup=head_markup,
    )


__all__ = ["HtmlDocument", "parse_html_document"]
