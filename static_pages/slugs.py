"""Turn free text into URL-safe slugs.

The same normalisation backs heading anchors in the table of contents and
the page slugs suggested to editors.

Example
-------
>>> from static_pages.slugs import slugify
>>> slugify("Título: Sección 1!")
'titulo-seccion-1'
>>> slugify("***")
'section'
"""

from __future__ import annotations

import re
import unicodedata

from ._constants import SLUG_FALLBACK

NON_ALNUM_PATTERN = re.compile(r"[^a-z0-9]+")

# Letters that do not decompose into a base letter plus combining marks.
_TRANSLITERATIONS = str.maketrans(
    {
        "ß": "ss",
        "æ": "ae",
        "ø": "o",
        "œ": "oe",
        "đ": "d",
        "ð": "d",
        "ł": "l",
        "þ": "th",
        "ı": "i",
    }
)


def fold_to_ascii(text: str) -> str:
    """Drop diacritics and spell out ligatures, discarding anything non-ASCII."""
    decomposed = unicodedata.normalize("NFKD", text.translate(_TRANSLITERATIONS))
    return decomposed.encode("ascii", "ignore").decode("ascii")


def slugify(text: str, *, fallback: str = SLUG_FALLBACK) -> str:
    """Convert ``text`` into a lowercase hyphen-separated slug.

    Parameters
    ----------
    text : str
        Arbitrary text such as a heading or page title.
    fallback : str, optional
        Token returned when nothing alphanumeric survives normalisation.

    Returns
    -------
    str
        Slug made of ``[a-z0-9]`` runs joined by single hyphens, never empty.
    """
    folded = fold_to_ascii(text.lower()).lower()
    slug = NON_ALNUM_PATTERN.sub("-", folded).strip("-")
    return slug or fallback


__all__ = ["fold_to_ascii", "slugify"]
