"""
Structured Logging Configuration

The ledger core never logs; the service layer does. This module wires
structlog on top of the standard library logging module so log lines
from the service and any host application end up in the same stream.
"""

import logging
import sys
from typing import Optional

import structlog

from account_ledger.config import LoggingSettings, get_settings


def configure_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Configure structlog for the process.

    Safe to call more than once; the last call wins.
    """
    settings = settings or get_settings().logging
    level = getattr(logging, settings.level)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger("account_ledger").setLevel(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "account_ledger"):
    """Get a structlog logger bound to a module name."""
    return structlog.get_logger(name)
