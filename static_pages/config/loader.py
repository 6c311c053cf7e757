"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .._constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_OG_IMAGE,
    DEFAULT_WORDS_PER_MINUTE,
)
from ..documents import parse_html_document
from ..i18n import DEFAULT_LOCALE, available_locales
from ..models import ContentFormat, Page, TitleSource
from .helpers import (
    _normalize_base_url,
    _optional_str,
    _parse_format,
    _parse_positive_int,
    _parse_status,
    _parse_timestamp,
    _parse_title_source,
    _validate_slug,
)
from .models import SiteConfig, SiteConfigError

if typ.TYPE_CHECKING:
    from ..documents import HtmlDocument


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the site and its pages.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/pages.yaml``). ``content_file`` and ``document_file`` entries
        are resolved relative to this file's directory.

    Returns
    -------
    SiteConfig
        Parsed site configuration with every page record.

    Raises
    ------
    FileNotFoundError
        If the configuration file, or a page's ``content_file`` or
        ``document_file``, does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required sections or fields are missing or invalid (for example, no
        pages are defined or a page has an unknown status).
    YAMLError
        If the YAML content cannot be parsed, including duplicate page slugs.

    Examples
    --------
    >>> from pathlib import Path
    >>> from static_pages.config import load_site_config
    >>> config = load_site_config(Path("config/pages.yaml"))  # doctest: +SKIP
    >>> list(config.pages)[:1]  # doctest: +SKIP
    ['about-us']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}

    site_name = _optional_str(defaults.get("site_name"))
    if not site_name:
        msg = "The 'defaults.site_name' setting is required."
        raise SiteConfigError(msg)

    locale = str(defaults.get("locale", DEFAULT_LOCALE))
    if locale not in available_locales():
        known = ", ".join(available_locales())
        msg = f"Unknown locale '{locale}'. Known locales: {known}"
        raise SiteConfigError(msg)

    strings_raw = raw.get("strings") or {}
    if not isinstance(strings_raw, dict):
        msg = "The 'strings' section must be a mapping of string ids to text."
        raise SiteConfigError(msg)

    pages_raw = raw.get("pages") or {}
    if not pages_raw:
        msg = "No pages defined in site configuration."
        raise SiteConfigError(msg)
    if not isinstance(pages_raw, dict):
        msg = "The 'pages' section must be a mapping keyed by page slug."
        raise SiteConfigError(msg)

    title_source = _parse_title_source(
        "defaults.title_source", defaults.get("title_source")
    )

    pages: dict[str, Page] = {}
    for key, payload in pages_raw.items():
        match payload:
            case dict():
                page = _build_page(
                    key, payload, base_dir=path.parent, title_source=title_source
                )
                pages[page.slug] = page
            case _:
                continue

    return SiteConfig(
        site_name=site_name,
        site_short_name=_optional_str(defaults.get("site_short_name")) or "",
        base_url=_normalize_base_url(defaults.get("base_url")),
        locale=locale,
        og_locale=str(defaults.get("og_locale", "en_US")),
        pretty_urls=bool(defaults.get("pretty_urls", True)),
        words_per_minute=_parse_positive_int(
            "words_per_minute",
            defaults.get("words_per_minute", DEFAULT_WORDS_PER_MINUTE),
        ),
        title_source=title_source,
        date_format=str(defaults.get("date_format", DEFAULT_DATE_FORMAT)),
        pygments_style=str(defaults.get("pygments_style", "monokai")),
        default_og_image=str(defaults.get("default_og_image", DEFAULT_OG_IMAGE)),
        output_dir=Path(defaults.get("output_dir", "public")),
        strings={str(key): str(value) for key, value in strings_raw.items()},
        pages=pages,
    )


def _build_page(
    key: object,
    payload: typ.Mapping[str, typ.Any],
    *,
    base_dir: Path,
    title_source: TitleSource,
) -> Page:
    """Build a Page record for a single entry of the ``pages`` mapping."""
    slug = _validate_slug(key)
    title = _optional_str(payload.get("title"))
    meta_description = _optional_str(payload.get("meta_description"))
    content_format = _parse_format(slug, payload.get("format"))
    head_markup = ""

    document = _load_document(slug, payload, base_dir)
    if document is None:
        content = _resolve_content(slug, payload, base_dir)
    else:
        if content_format != ContentFormat.HTML:
            msg = f"Page '{slug}' uses 'document_file', which is always HTML."
            raise SiteConfigError(msg)
        source = _parse_title_source(
            f"pages.{slug}.title_source", payload.get("title_source"), title_source
        )
        title = title or document.title_for(source)
        meta_description = meta_description or document.description
        content = document.body
        head_markup = document.head_markup

    modified_by = payload.get("modified_by")
    return Page(
        slug=slug,
        title=title or slug.replace("-", " ").title(),
        content=content,
        content_format=content_format,
        status=_parse_status(slug, payload.get("status")),
        show_in_navigation=bool(payload.get("show_in_navigation", True)),
        sort_order=int(payload.get("sort_order", 0) or 0),
        time_created=_parse_timestamp(
            slug, "time_created", payload.get("time_created")
        ),
        time_modified=_parse_timestamp(
            slug, "time_modified", payload.get("time_modified")
        ),
        modified_by=int(modified_by) if modified_by is not None else None,
        meta_description=meta_description,
        og_image=_optional_str(payload.get("og_image")),
        head_markup=head_markup,
    )


def _read_source(slug: str, base_dir: Path, name: str) -> str:
    source = base_dir / name
    if not source.exists():
        msg = f"Content file '{source}' for page '{slug}' not found."
        raise FileNotFoundError(msg)
    return source.read_text(encoding="utf-8")


def _resolve_content(
    slug: str, payload: typ.Mapping[str, typ.Any], base_dir: Path
) -> str:
    """Return inline ``content`` or the text of ``content_file``."""
    content_file = _optional_str(payload.get("content_file"))
    if content_file is None:
        return str(payload.get("content", "") or "")
    if "content" in payload:
        msg = f"Page '{slug}' sets both 'content' and 'content_file'."
        raise SiteConfigError(msg)
    return _read_source(slug, base_dir, content_file)


def _load_document(
    slug: str, payload: typ.Mapping[str, typ.Any], base_dir: Path
) -> HtmlDocument | None:
    """Parse the page's ``document_file``, if it names one."""
    document_file = _optional_str(payload.get("document_file"))
    if document_file is None:
        return None
    if "content" in payload or "content_file" in payload:
        msg = (
            f"Page '{slug}' sets 'document_file' together with "
            "'content' or 'content_file'."
        )
        raise SiteConfigError(msg)
    return parse_html_document(_read_source(slug, base_dir, document_file))


__all__ = ["load_site_config"]
