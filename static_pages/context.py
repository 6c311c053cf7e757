"""Host-wide values injected into every rendering helper.

Rather than reading site globals, each helper receives a
:class:`RenderContext` carrying the site identity, the translator, and the
date formatter the host wants to use.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ

from ._constants import DEFAULT_DATE_FORMAT, DEFAULT_WORDS_PER_MINUTE
from .i18n import load_catalog

if typ.TYPE_CHECKING:
    from .i18n import Translator

DateFormatter = typ.Callable[[int], str]


def strftime_formatter(date_format: str = DEFAULT_DATE_FORMAT) -> DateFormatter:
    """Return a formatter rendering Unix timestamps (UTC) with ``date_format``."""

    def _format(timestamp: int) -> str:
        moment = dt.datetime.fromtimestamp(timestamp, tz=dt.UTC)
        return moment.strftime(date_format)

    return _format


@dc.dataclass(frozen=True, slots=True)
class RenderContext:
    """Site identity and capabilities shared by one render.

    Attributes
    ----------
    site_name : str
        Full site name used in Open Graph and JSON-LD metadata.
    base_url : str
        Absolute root URL of the host site, without trailing slash.
    translate : Translator
        Localization lookup used for every visible label.
    format_date : DateFormatter
        Host-provided formatter for Unix timestamps.
    words_per_minute : int
        Reading speed used by the reading-time estimator.
    """

    site_name: str
    base_url: str
    translate: Translator = dc.field(default_factory=load_catalog)
    format_date: DateFormatter = dc.field(default_factory=strftime_formatter)
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE

    @property
    def home_url(self) -> str:
        """Return the link target for the site's home page."""
        return self.base_url or "/"


__all__ = ["DateFormatter", "RenderContext", "strftime_formatter"]
