"""
Note Organizer: Logging Configuration
=====================================

What:  One place that configures the root logger for both front ends.
How:   logging.basicConfig with a single stream handler.

    The HTTP server logs to stdout. The CLI logs to stderr so log lines
    never mix with the menu on stdout.

Format: %(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s

    request_id comes from RequestIDLogFilter: the HTTP request being handled,
    or "-" in the CLI and at startup.
"""

import logging
import sys
from typing import Optional, TextIO

from note_organizer.config import settings
from note_organizer.middleware.request_id import RequestIDLogFilter

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """
    Configure logging for the whole process.

    Args:
        level:  Level name; defaults to settings.log_level
        stream: Output stream; defaults to sys.stdout
    """
    level_name = (level or settings.log_level).upper()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.addFilter(RequestIDLogFilter())

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[handler],
        force=True,  # Override any existing logging config
    )

    # Third-party loggers are chatty at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
