"""Render social sharing links for a page.

Only links are generated; nothing here talks to the networks themselves. The
targets are rendered in a fixed order followed by a "copy link" button whose
``data-url`` carries the raw page URL for a client-side clipboard script.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from html import escape
from urllib.parse import quote_plus

if typ.TYPE_CHECKING:
    from .i18n import Translator


@dc.dataclass(frozen=True, slots=True)
class ShareTarget:
    """A social network and the share-intent URL it accepts.

    Attributes
    ----------
    key : str
        Stable identifier, also used in the ``share-btn-<key>`` CSS class.
    label : str
        Network name shown to screen readers and in the tooltip.
    icon : str
        Font Awesome icon class.
    build_url : Callable[[str, str, str], str]
        Builds the share URL from the page URL, title and description.
    """

    key: str
    label: str
    icon: str
    build_url: typ.Callable[[str, str, str], str]

    @property
    def css_class(self) -> str:
        """Return the per-network CSS class."""
        return f"share-btn-{self.key}"


def _twitter(url: str, title: str, _description: str) -> str:
    return (
        f"https://twitter.com/intent/tweet?url={quote_plus(url)}"
        f"&text={quote_plus(title)}"
    )


def _linkedin(url: str, _title: str, _description: str) -> str:
    return f"https://www.linkedin.com/sharing/share-offsite/?url={quote_plus(url)}"


def _whatsapp(url: str, title: str, _description: str) -> str:
    return f"https://wa.me/?text={quote_plus(title)}%20{quote_plus(url)}"


def _facebook(url: str, _title: str, _description: str) -> str:
    return f"https://www.facebook.com/sharer/sharer.php?u={quote_plus(url)}"


def _telegram(url: str, title: str, _description: str) -> str:
    return f"https://t.me/share/url?url={quote_plus(url)}&text={quote_plus(title)}"


SHARE_TARGETS: tuple[ShareTarget, ...] = (
    ShareTarget("twitter", "Twitter", "fa-twitter", _twitter),
    ShareTarget("linkedin", "LinkedIn", "fa-linkedin", _linkedin),
    ShareTarget("whatsapp", "WhatsApp", "fa-whatsapp", _whatsapp),
    ShareTarget("facebook", "Facebook", "fa-facebook", _facebook),
    ShareTarget("telegram", "Telegram", "fa-telegram", _telegram),
)


def generate_share_buttons(
    url: str,
    title: str,
    translate: Translator,
    description: str | None = None,
    *,
    targets: typ.Sequence[ShareTarget] = SHARE_TARGETS,
) -> str:
    """Return the share bar markup for a page.

    Parameters
    ----------
    url : str
        Canonical page URL.
    title : str
        Page title used as share text where the network accepts one.
    translate : Translator
        Localization lookup for the labels.
    description : str, optional
        Page description, handed to targets whose intent URL accepts one.
    targets : Sequence[ShareTarget], optional
        Networks to render, in order. Defaults to :data:`SHARE_TARGETS`.

    Returns
    -------
    str
        A ``div.share-buttons`` element with one link per target and a single
        copy-link button. The button carries the confirmation text scripts
        show after copying in ``data-copied-label``.
    """
    parts = [
        '<div class="share-buttons">',
        f'<span class="share-label">{escape(translate("sharethispage"))}</span>',
    ]
    for target in targets:
        href = target.build_url(url, title, description or "")
        tooltip = translate("shareon", target.label)
        parts.append(
            f'<a href="{escape(href)}" class="share-btn {target.css_class}" '
            f'target="_blank" rel="noopener noreferrer" title="{escape(tooltip)}">'
            f'<i class="fa {target.icon}"></i>'
            f'<span class="sr-only">{escape(target.label)}</span></a>'
        )

    copy_label = escape(translate("copylink"))
    copied_label = escape(translate("linkcopied"))
    parts.append(
        f'<button type="button" class="share-btn share-btn-copy" '
        f'data-url="{escape(url)}" data-copied-label="{copied_label}" '
        f'title="{copy_label}">'
        f'<i class="fa fa-link"></i><span class="sr-only">{copy_label}</span>'
        "</button>"
    )
    parts.append("</div>")
    return "".join(parts)


__all__ = ["SHARE_TARGETS", "ShareTarget", "generate_share_buttons"]
