"""
Logging Setup

Builds the logger handed to the validation runner and its checks.
"""

import logging
from typing import Any, Dict, Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "aiservices"


class FieldsFormatter(logging.Formatter):
    """
    Appends structured fields to the message.

    Fields are passed as ``extra={"fields": {...}}`` and rendered as
    ``key=value`` pairs after the message text.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        fields: Dict[str, Any] = getattr(record, "fields", None) or {}
        if not fields:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in fields.items())
        return f"{message}  {pairs}"


def create_logger(verbose: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """
    Create the process logger.

    Args:
        verbose: Log debug messages when set
        console: Console to write to (defaults to stderr)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(FieldsFormatter("%(message)s"))
    logger.addHandler(handler)

    return logger
