"""
Tic-Tac-Boom - Logging Configuration

The engine only emits records through module loggers; applications that
embed it call configure_logging once at startup.
"""

import logging

from tictacboom.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings | None = None) -> int:
    """
    Configure root logging from settings.

    DEBUG wins over log_level when settings.debug is set. Unknown level
    names fall back to INFO.

    Returns:
        The numeric level applied
    """
    settings = settings or get_settings()
    if settings.debug:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(settings.log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("tictacboom").setLevel(level)
    return level
