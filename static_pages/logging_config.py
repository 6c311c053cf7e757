"""Configure logging for the static-pages CLI.

Modules log through :func:`logging.getLogger`; :func:`configure` routes those
records through structlog so ``extra=`` fields become structured keys. The CLI
renders them for a terminal by default and as JSON lines when ``--json-logs``
is passed, which suits CI runs that collect build output.

Examples
--------
>>> from static_pages.logging_config import configure
>>> configure(json_output=True, level="DEBUG")  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure(*, json_output: bool = False, level: str = "INFO") -> None:
    """Configure structlog with the stdlib bridge.

    Parameters
    ----------
    json_output : bool, optional
        Emit JSON lines instead of human-readable console output.
    level : str, optional
        Root logger level name. Defaults to ``"INFO"``.
    """
    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


__all__ = ["configure"]
