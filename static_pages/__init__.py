"""Render static content pages for a host web application.

This package turns stored page records into enriched HTML: anchored headings
with a table of contents, reading-time estimates, share links, breadcrumbs,
previous/next navigation and SEO metadata. The ``static-pages`` CLI renders
the configured pages to disk.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from static_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
