"""Unit tests for the bundled string catalogs."""

from __future__ import annotations

import pytest

from static_pages.i18n import available_locales, load_catalog


def test_bundled_locales_share_keys() -> None:
    """Every bundled table defines the same string ids."""
    locales = available_locales()
    assert locales == ["en", "es"]
    keys = [set(load_catalog(locale).strings) for locale in locales]
    assert keys[0] == keys[1], f"string ids differ: {keys[0] ^ keys[1]}"


def test_placeholder_is_interpolated() -> None:
    """``{a}`` is replaced by the argument."""
    assert load_catalog("es")("shareon", "LinkedIn") == "Compartir en LinkedIn"
    assert load_catalog("en")("lastupdated", "01/02/25") == "Last updated: 01/02/25"


def test_missing_key_is_visible() -> None:
    """Unknown ids render as ``[[id]]`` rather than failing."""
    assert load_catalog()("nope") == "[[nope]]"


def test_overrides_replace_bundled_strings() -> None:
    """Site overrides win over the bundled table without mutating it."""
    custom = load_catalog("en", {"home": "Start"})
    assert custom("home") == "Start"
    assert load_catalog("en")("home") == "Home"


def test_unknown_locale_is_rejected() -> None:
    """Requesting a locale without a table raises LookupError."""
    with pytest.raises(LookupError, match="Known locales: en, es"):
        load_catalog("xx")
