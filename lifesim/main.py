"""
Lifesim entry point.

Sets up structured logging and hands control to the Click CLI.
"""

from __future__ import annotations

import logging
from typing import Optional

import structlog

_logging_configured = False


def configure_logging(level: str = "WARNING", colors: bool = True, force: bool = False) -> None:
    """Configure structlog and standard-library logging.

    Safe to call more than once; later calls are no-ops unless `force`.
    """
    global _logging_configured  # noqa: PLW0603
    if _logging_configured and not force:
        return
    _logging_configured = True

    logging.basicConfig(format="%(message)s", level=getattr(logging, level, logging.WARNING), force=force)
    logging.getLogger().setLevel(getattr(logging, level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=colors),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def main(argv: Optional[list[str]] = None) -> None:
    from lifesim.cli.app import cli

    cli.main(args=argv, prog_name="lifesim")


if __name__ == "__main__":
    main()
