"""Cyclopts CLI entrypoint for rendering static pages.

The ``static-pages`` console script defined here renders every published page
described by ``config/pages.yaml`` into standalone HTML documents, or a single
page on request. It also exposes the slug generator so editors can preview the
slug a title will receive.

Examples
--------
Render all published pages for the default configuration:

>>> from static_pages.cli import main
>>> main()  # doctest: +SKIP

Render a single page into a custom directory:

>>> from static_pages.cli import app
>>> app(["render", "--page", "about-us", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .logging_config import configure
from .repository import InMemoryPageRepository, PageNotFoundError
from .slugs import slugify as make_slug
from .view import PageViewBuilder

DEFAULT_CONFIG = Path("config/pages.yaml")

app = App(name="static-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render published pages to standalone HTML documents.")
def render(
    *,
    page: typ.Annotated[
        str | None, Parameter(help="Page slug", env_var="INPUT_PAGE")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    json_logs: typ.Annotated[
        bool, Parameter(help="Emit JSON log lines", env_var="INPUT_JSON_LOGS")
    ] = False,
) -> None:
    """Render one or all published pages for the site configuration.

    Parameters
    ----------
    page : str or None, optional
        Slug of the page to render; when ``None`` (default) every published
        page is rendered.
    config : Path, optional
        Path to the ``pages.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override the configured output directory.
    json_logs : bool, optional
        Emit structured JSON logs instead of console output.

    Returns
    -------
    None
        Writes rendered documents and prints the generated paths.

    Raises
    ------
    SystemExit
        With status 1 when ``page`` is not a published page; the localized
        not-found message is printed to stderr.
    """
    configure(json_output=json_logs)
    site_config = load_site_config(config)
    repository = InMemoryPageRepository(site_config.pages.values())
    builder = PageViewBuilder(site_config, repository, output_dir=output_dir)

    if page:
        try:
            written = [builder.write(page)]
        except PageNotFoundError as exc:
            print(f"{exc.slug}: {exc}", file=sys.stderr)
            raise SystemExit(1) from exc
    else:
        written = builder.run()

    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the URL slug generated for a piece of text.")
def slugify(text: str) -> None:
    """Print the slug for ``text``.

    Parameters
    ----------
    text : str
        Title or heading to normalise.
    """
    print(make_slug(text))


def main() -> None:
    """Invoke the Cyclopts application that powers the ``static-pages`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
