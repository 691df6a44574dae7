"""
Anima — entry point.

Configures logging and hands over to the Click command group. The core itself
never configures logging; embedding applications do that their own way, and
the CLI does it here.
"""

from __future__ import annotations

import logging

import structlog

_logging_configured = False


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog and standard-library logging for Anima entry points.

    Safe to call more than once — subsequent calls are no-ops.
    """
    global _logging_configured  # noqa: PLW0603
    if _logging_configured:
        return
    _logging_configured = True

    logging.basicConfig(format="%(message)s", level=logging.DEBUG if verbose else logging.WARNING)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.dev.ConsoleRenderer(colors=True),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def main() -> None:
    from anima.cli.app import cli

    cli()


if __name__ == "__main__":
    main()
