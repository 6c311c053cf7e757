"""Estimate how long a page takes to read."""

from __future__ import annotations

import math
import typing as typ
from html import unescape

from ._constants import DEFAULT_WORDS_PER_MINUTE
from .models import ReadingTime
from .toc import strip_tags

if typ.TYPE_CHECKING:
    from .i18n import Translator


def count_words(content: str) -> int:
    """Return the number of whitespace-delimited words in ``content``'s text."""
    return len(unescape(strip_tags(content)).split())


def calculate_reading_time(
    content: str,
    translate: Translator,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> ReadingTime:
    """Estimate reading time for an HTML body.

    Parameters
    ----------
    content : str
        HTML page body; markup is ignored.
    translate : Translator
        Localization lookup used for the ``readingtime`` string.
    words_per_minute : int, optional
        Average reading speed. Defaults to 200.

    Returns
    -------
    ReadingTime
        Whole minutes rounded up and never below one, the word count, and the
        localized label.

    Raises
    ------
    ValueError
        If ``words_per_minute`` is not positive.
    """
    if words_per_minute <= 0:
        msg = f"words_per_minute must be positive, got {words_per_minute}"
        raise ValueError(msg)
    word_count = count_words(content)
    minutes = max(1, math.ceil(word_count / words_per_minute))
    return ReadingTime(
        minutes=minutes,
        word_count=word_count,
        formatted=translate("readingtime", minutes),
    )


__all__ = ["calculate_reading_time", "count_words"]
