"""
Tic-Tac-Boom Configuration.

Environment variables, settings, and logging configuration.
"""

from tictacboom.config.log_config import configure_logging
from tictacboom.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
