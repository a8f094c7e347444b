import logging
from typing import Dict, Optional, Union

LevelType = Union[int, str]

# Settlement loggers and the level each starts at
DEFAULT_LOG_LEVELS: Dict[str, int] = {
    "deck": logging.INFO,
    "evaluator": logging.INFO,
    "pot": logging.INFO,
    "showdown": logging.INFO,
}


def _resolve_level(level: LevelType) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_loggers(log_levels: Optional[Dict[str, LevelType]] = None) -> None:
    """Set the level of every settlement logger.

    Loggers not named in ``log_levels`` are reset to their default level.

    Args:
        log_levels: Logger short name ("deck", "pot", ...) to level, either a
            logging constant (logging.DEBUG) or a level name ("debug")

    Raises:
        ValueError: If a logger name or level name is unknown
    """
    levels = log_levels or {}

    unknown = set(levels) - set(DEFAULT_LOG_LEVELS)
    if unknown:
        raise ValueError(f"Unknown loggers: {sorted(unknown)}")

    for name, default_level in DEFAULT_LOG_LEVELS.items():
        level = _resolve_level(levels.get(name, default_level))
        logging.getLogger(f"loggers.{name}_logger").setLevel(level)
