"""Convert page bodies into HTML according to their content format."""

from __future__ import annotations

import re
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from .models import ContentFormat

CODE_BLOCK_PATTERN = re.compile(r"```([A-Za-z0-9_+#.-]+)?[^\n]*\n(.*?)```", re.DOTALL)
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
PARAGRAPH_BREAK_PATTERN = re.compile(r"\n\s*\n")


class HtmlContentRenderer:
    """Render page content into HTML with consistent code highlighting."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize a renderer using the given Pygments style.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting in
            Markdown pages. Defaults to ``"monokai"``.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def render(self, content: str, content_format: ContentFormat) -> str:
        """Return ``content`` as HTML.

        HTML bodies pass through untouched, Markdown is converted, and plain
        text is escaped and split into paragraphs.
        """
        match content_format:
            case ContentFormat.MARKDOWN:
                return self.markdown(content)
            case ContentFormat.PLAIN:
                return self.plain_text(content)
            case _:
                return content

    def markdown(self, text: str) -> str:
        """Render markdown into HTML with fenced code highlighting."""
        normalized = FENCED_INDENT_PATTERN.sub(r"\1", text)
        if not normalized.strip():
            return ""
        md = Markdown(
            extensions=["fenced_code", "codehilite", "tables", "sane_lists"],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        html = md.convert(normalized)
        return self._annotate_codehilite(html, normalized)

    @staticmethod
    def plain_text(text: str) -> str:
        """Escape plain text and wrap each blank-line separated block in ``<p>``."""
        blocks = [block.strip() for block in PARAGRAPH_BREAK_PATTERN.split(text)]
        return "".join(
            "<p>" + escape(block).replace("\n", "<br>") + "</p>"
            for block in blocks
            if block
        )

    @staticmethod
    def _annotate_codehilite(html: str, source_markdown: str) -> str:
        """Attach language metadata to each highlighted block in converted markdown."""
        languages = [
            match.group(1) or "text"
            for match in CODE_BLOCK_PATTERN.finditer(source_markdown)
        ]
        if not languages:
            return html
        lang_iter = iter(languages)

        def _repl(match: re.Match[str]) -> str:
            lang = next(lang_iter, "text")
            return (
                f'<div class="codehilite" data-language="{escape(lang, quote=True)}">'
            )

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(languages))


__all__ = ["CODE_BLOCK_PATTERN", "HtmlContentRenderer"]
