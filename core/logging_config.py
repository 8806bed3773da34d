"""
Logging setup for the command line entry points.
Library modules only create loggers via logging.getLogger(__name__).
"""

import logging
import sys
from typing import Optional

from core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once, writing to stderr."""
    resolved = (level or settings.LOG_LEVEL or "INFO").upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger().setLevel(resolved)
