"""
Tic-Tac-Boom - Application Settings

Loads configuration from environment variables (prefix TICTACBOOM_) or a
.env file using Pydantic Settings.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings

from tictacboom.engine.base import DEFAULT_SEARCH_DEPTH, DEFAULT_SIZE, GameMode
from tictacboom.engine.validators import validate_game_mode


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Game
    board_size: int = DEFAULT_SIZE
    game_mode: GameMode = GameMode.STANDARD
    search_depth: int = DEFAULT_SEARCH_DEPTH

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "TICTACBOOM_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @field_validator("game_mode", mode="before")
    @classmethod
    def _parse_game_mode(cls, value):
        # Same case-insensitive names GameConfig accepts
        return validate_game_mode(value)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
