"""structlog setup shared by the API process and scripts."""

import logging

import structlog

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Install the console processor chain and drop events below ``level``.

    Unknown level names fall back to INFO.

    Only the first call takes effect, so entry points and test fixtures can
    both call it.
    """
    global _configured
    if _configured:
        return
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
        ),
    )
    _configured = True
