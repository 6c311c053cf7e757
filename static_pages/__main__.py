"""Allow ``python -m static_pages`` to run the CLI."""

from .cli import main

main()
