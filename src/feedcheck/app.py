from __future__ import annotations

import logging
import sys

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    - `feedcheck`: check every enabled exchange
    - `feedcheck <subcommand>`: run a CLI subcommand (e.g. `feedcheck check -e okx`)
    """
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        argv = ["check"]

    return _run_cli_mode(argv)


def _run_cli_mode(argv: list[str]) -> int:
    """Run in CLI mode using Typer."""
    try:
        # Import CLI app here to avoid circular import
        from .cli import run_cli
        run_cli(argv)
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else (0 if e.code is None else 1)
    except Exception as e:
        logger.error("CLI error: %s", e, exc_info=True)
        return 1
