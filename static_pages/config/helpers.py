"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import datetime as dt
import re

from .._constants import MAX_TIMESTAMP
from ..models import ContentFormat, PageStatus, TitleSource
from .models import SiteConfigError

PAGE_SLUG_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _normalize_base_url(value: object | None) -> str:
    """Return the base URL without trailing slashes."""
    return (_optional_str(value) or "").rstrip("/")


def _parse_timestamp(
    key: str, field: str, value: dt.date | int | str | None
) -> int:
    """Return Unix seconds for ``value``, or ``0`` when unset or unparseable.

    Raises
    ------
    SiteConfigError
        If the value lies beyond the year 9999, which usually means it was
        given in milliseconds.
    """
    seconds = _timestamp_seconds(value)
    if seconds > MAX_TIMESTAMP:
        msg = (
            f"Page '{key}' has out-of-range {field} {value!r}; "
            "expected Unix seconds."
        )
        raise SiteConfigError(msg)
    return seconds


def _timestamp_seconds(value: dt.date | int | str | None) -> int:
    match value:
        case bool():
            return 0
        case int():
            return max(value, 0)
        case dt.datetime():
            parsed = value
        case dt.date():
            parsed = dt.datetime.combine(value, dt.time())
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return 0
            if sanitized.isdigit():
                return int(sanitized)
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                parsed = dt.datetime.fromisoformat(sanitized)
            except ValueError:
                return 0
        case _:
            return 0
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=dt.UTC)
    return max(int(parsed.timestamp()), 0)


def _parse_status(key: str, value: object | None) -> PageStatus:
    """Return the PageStatus named by ``value``; pages default to draft."""
    if value is None:
        return PageStatus.DRAFT
    try:
        return PageStatus(str(value).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(status.value for status in PageStatus)
        msg = f"Page '{key}' has unknown status '{value}'. Expected one of: {allowed}"
        raise SiteConfigError(msg) from exc


def _parse_format(key: str, value: object | None) -> ContentFormat:
    """Return the ContentFormat named by ``value``; pages default to HTML."""
    if value is None:
        return ContentFormat.HTML
    try:
        return ContentFormat(str(value).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(fmt.value for fmt in ContentFormat)
        msg = f"Page '{key}' has unknown format '{value}'. Expected one of: {allowed}"
        raise SiteConfigError(msg) from exc


def _parse_title_source(
    name: str, value: object | None, default: TitleSource = TitleSource.H1
) -> TitleSource:
    """Return the TitleSource named by ``value``, or ``default`` when unset."""
    if value is None:
        return default
    try:
        return TitleSource(str(value).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(source.value for source in TitleSource)
        msg = f"'{name}' must be one of: {allowed}; got {value!r}"
        raise SiteConfigError(msg) from exc


def _parse_positive_int(name: str, value: object) -> int:
    """Return ``value`` as a positive integer or raise SiteConfigError."""
    try:
        number = int(str(value))
    except ValueError as exc:
        msg = f"'{name}' must be an integer, got {value!r}"
        raise SiteConfigError(msg) from exc
    if number <= 0:
        msg = f"'{name}' must be positive, got {number}"
        raise SiteConfigError(msg)
    return number


def _validate_slug(key: object) -> str:
    """Return ``key`` as a page slug, rejecting characters unsafe in URLs."""
    slug = str(key).strip()
    if not PAGE_SLUG_PATTERN.match(slug):
        msg = (
            f"Page slug '{key}' may only contain letters, digits, "
            "hyphens and underscores."
        )
        raise SiteConfigError(msg)
    return slug


__all__ = [
    "PAGE_SLUG_PATTERN",
    "_normalize_base_url",
    "_optional_str",
    "_parse_format",
    "_parse_positive_int",
    "_parse_status",
    "_parse_timestamp",
    "_parse_title_source",
    "_validate_slug",
]
