import logging
import sys
from typing import Optional

from config import settings
from loggers.config import DEFAULT_LOG_LEVELS, configure_loggers


def setup_logging(log_file: Optional[str] = None, level: Optional[str] = None) -> None:
    """
    Configure logging for an embedding server or a local session.

    Sets up console output and, when ``log_file`` is given, a UTF-8 file that
    is overwritten on every call. All settlement loggers get the same level.

    Args:
        log_file (Optional[str]): Path of a log file to write as well as stdout
        level (Optional[str]): Level name; defaults to ``settings.log_level``

    Side Effects:
        - Clears existing root logging handlers
        - Creates/overwrites ``log_file`` if provided
    """
    level = (level or settings.log_level).upper()

    # Clear any existing handlers
    logging.getLogger().handlers = []

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8", mode="w"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        handlers=handlers,
    )
    configure_loggers({name: level for name in DEFAULT_LOG_LEVELS})
