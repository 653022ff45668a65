"""Logging configuration for the Task Management API."""

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_handler: Optional[logging.Handler] = None


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """Attach a single stderr handler to the root logger.

    Calling this again swaps the handler it installed earlier instead of
    stacking a second one; handlers added by others are left alone.
    """
    global _handler

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_handler)
    root.setLevel(level)
