r"""Extract headings from HTML content and build a table of contents.

Level-two and level-three headings are anchored with ids of the form
``<slug>-<index>`` where ``index`` is the heading's zero-based position in the
document, so identical headings never share an anchor. The content is rebuilt
by offset in a single pass; heading markup is never located by substring
search, so byte-identical headings are each rewritten in place.

Example
-------
>>> from static_pages.toc import extract_headings
>>> [h.slug for h in extract_headings("<h2>Intro</h2><h3>Intro</h3>")]
['intro-0', 'intro-1']
"""

from __future__ import annotations

import re
import typing as typ
from html import escape, unescape

from ._constants import TOC_BASE_LEVEL
from .models import Heading, TocResult
from .slugs import slugify

if typ.TYPE_CHECKING:
    from .i18n import Translator

HEADING_PATTERN = re.compile(
    r"<h(?P<level>[23])(?P<attrs>\s[^>]*)?>(?P<inner>.*?)</h(?P=level)\s*>",
    re.IGNORECASE | re.DOTALL,
)
TAG_PATTERN = re.compile(r"</?(?P<name>[A-Za-z][A-Za-z0-9]*)?[^>]*>")
ATTRIBUTE_PATTERN = re.compile(
    r"""\s+(?P<name>[^\s=>]+)(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s>]+))?"""
)
BLOCK_TAGS = frozenset(
    "address article aside blockquote br dd div dl dt figcaption figure footer "
    "h1 h2 h3 h4 h5 h6 header hr li main nav ol p pre section table td th tr ul"
    .split()
)
WHITESPACE_PATTERN = re.compile(r"\s+")


def _tag_separator(match: re.Match[str]) -> str:
    name = (match.group("name") or "").lower()
    return " " if name in BLOCK_TAGS else ""


def strip_tags(html: str) -> str:
    """Remove markup from ``html``.

    Inline tags vanish without a trace so ``Java<b>Script</b>`` stays one word;
    block-level tags and ``<br>`` leave a space so adjacent blocks never merge.
    """
    return TAG_PATTERN.sub(_tag_separator, html)


def _drop_id_attribute(match: re.Match[str]) -> str:
    return "" if match.group("name").lower() == "id" else match.group(0)


def _heading_text(inner: str) -> str:
    """Return the display text of a heading's inner markup."""
    text = unescape(strip_tags(inner))
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def extract_headings(content: str) -> list[Heading]:
    """Return every level-two and level-three heading in document order.

    Parameters
    ----------
    content : str
        HTML fragment to scan. Unbalanced or malformed headings are skipped.

    Returns
    -------
    list[Heading]
        Headings with their anchored slug and source offsets.
    """
    headings: list[Heading] = []
    for index, match in enumerate(HEADING_PATTERN.finditer(content)):
        text = _heading_text(match.group("inner"))
        headings.append(
            Heading(
                level=int(match.group("level")),
                text=text,
                slug=f"{slugify(text)}-{index}",
                original=match.group(0),
                start=match.start(),
                end=match.end(),
            )
        )
    return headings


def anchor_headings(content: str, headings: typ.Sequence[Heading]) -> str:
    """Rebuild ``content`` with an ``id`` on each heading, walking by offset.

    Any ``id`` the author already set on a matched heading is replaced so the
    table of contents links always resolve.
    """
    parts: list[str] = []
    cursor = 0
    for heading in headings:
        parts.append(content[cursor : heading.start])
        parts.append(_with_anchor(heading))
        cursor = heading.end
    parts.append(content[cursor:])
    return "".join(parts)


def _with_anchor(heading: Heading) -> str:
    match = HEADING_PATTERN.fullmatch(heading.original)
    if match is None:  # pragma: no cover - headings come from the same pattern
        return heading.original
    tag = heading.original[1:3]
    attrs = ATTRIBUTE_PATTERN.sub(_drop_id_attribute, match.group("attrs") or "")
    inner = match.group("inner")
    return f'<{tag} id="{escape(heading.slug)}"{attrs}>{inner}</{tag}>'


def build_toc(headings: typ.Sequence[Heading], translate: Translator) -> str:
    """Render nested TOC markup for ``headings``; empty when there are none."""
    if not headings:
        return ""

    title = escape(translate("tableofcontents"))
    parts = [
        f'<nav class="staticpage-toc" aria-label="{title}">',
        f'<h4 class="toc-title">{title}</h4>',
        '<ul class="toc-list">',
    ]
    current_level = TOC_BASE_LEVEL
    open_sublists = 0
    for heading in headings:
        if heading.level > current_level:
            parts.append('<ul class="toc-sublist">')
            open_sublists += 1
        elif heading.level < current_level and open_sublists:
            parts.append("</ul>")
            open_sublists -= 1
        current_level = heading.level
        parts.append(
            f'<li class="toc-item toc-level-{heading.level}">'
            f'<a href="#{escape(heading.slug)}">{escape(heading.text)}</a></li>'
        )

    parts.extend("</ul>" for _ in range(open_sublists))
    parts.append("</ul></nav>")
    return "".join(parts)


def generate_toc(content: str, translate: Translator) -> TocResult:
    """Anchor the headings in ``content`` and build its table of contents.

    Parameters
    ----------
    content : str
        HTML page body.
    translate : Translator
        Localization lookup for the TOC title.

    Returns
    -------
    TocResult
        ``toc`` markup (empty without headings) and the anchored ``content``.
    """
    headings = extract_headings(content)
    if not headings:
        return TocResult(toc="", content=content)
    return TocResult(
        toc=build_toc(headings, translate),
        content=anchor_headings(content, headings),
        headings=tuple(headings),
    )


__all__ = [
    "HEADING_PATTERN",
    "anchor_headings",
    "build_toc",
    "extract_headings",
    "generate_toc",
    "strip_tags",
]
