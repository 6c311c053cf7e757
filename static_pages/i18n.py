"""Localized strings for the page rendering helpers.

The helpers never hold language-specific text. They receive a
:class:`Translator`, a callable mapping a string identifier and an optional
interpolation argument to display text. :class:`StringCatalog` is the
implementation shipped with the package: a flat table loaded from the bundled
``lang/<locale>.yaml`` files, optionally overlaid with site overrides.

Examples
--------
>>> from static_pages.i18n import load_catalog
>>> strings = load_catalog("es")
>>> strings("readingtime", 3)
'3 min de lectura'
>>> strings("nosuchstring")
'[[nosuchstring]]'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from importlib import resources

from ruamel.yaml import YAML

if typ.TYPE_CHECKING:
    import collections.abc as cabc

DEFAULT_LOCALE = "en"
PLACEHOLDER = "{a}"


class Translator(typ.Protocol):
    """Capability turning a string id (plus optional argument) into text."""

    def __call__(self, key: str, arg: object | None = None) -> str:
        """Return the localized text for ``key``."""
        ...


@dc.dataclass(frozen=True, slots=True)
class StringCatalog:
    """Flat string table for one locale."""

    locale: str
    strings: cabc.Mapping[str, str]

    def __call__(self, key: str, arg: object | None = None) -> str:
        """Return the string for ``key`` with ``arg`` substituted for ``{a}``.

        Unknown keys render as ``[[key]]`` so missing translations are visible
        on the page instead of failing the render.
        """
        template = self.strings.get(key)
        if template is None:
            return f"[[{key}]]"
        if arg is None:
            return template
        return template.replace(PLACEHOLDER, str(arg))

    def with_overrides(self, overrides: cabc.Mapping[str, object]) -> StringCatalog:
        """Return a copy whose strings are overlaid with ``overrides``."""
        if not overrides:
            return self
        merged = dict(self.strings)
        merged.update({str(key): str(value) for key, value in overrides.items()})
        return StringCatalog(locale=self.locale, strings=merged)


def available_locales() -> list[str]:
    """Return the locales with a bundled string table, sorted."""
    lang_dir = resources.files("static_pages") / "lang"
    return sorted(
        entry.name.removesuffix(".yaml")
        for entry in lang_dir.iterdir()
        if entry.name.endswith(".yaml")
    )


def load_catalog(
    locale: str = DEFAULT_LOCALE,
    overrides: cabc.Mapping[str, object] | None = None,
) -> StringCatalog:
    """Load the bundled string table for ``locale``.

    Parameters
    ----------
    locale : str, optional
        Language code of a bundled table (``"en"`` or ``"es"``).
    overrides : Mapping[str, object], optional
        Site-specific strings replacing bundled entries.

    Returns
    -------
    StringCatalog
        Catalog ready to be used as a :class:`Translator`.

    Raises
    ------
    LookupError
        If no table is bundled for ``locale``.
    """
    resource = resources.files("static_pages") / "lang" / f"{locale}.yaml"
    if not resource.is_file():
        known = ", ".join(available_locales())
        msg = f"No bundled strings for locale '{locale}'. Known locales: {known}"
        raise LookupError(msg)
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    loaded = loader.load(resource.read_text(encoding="utf-8")) or {}
    strings = {str(key): str(value) for key, value in dict(loaded).items()}
    return StringCatalog(locale=locale, strings=strings).with_overrides(
        overrides or {}
    )


__all__ = [
    "DEFAULT_LOCALE",
    "StringCatalog",
    "Translator",
    "available_locales",
    "load_catalog",
]
