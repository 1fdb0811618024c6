"""Singleton pattern for shared service instances."""

from typing import Optional

from ..config import Config
from .game_service import GameService

# Global service instance (singleton pattern)
_game_service: Optional[GameService] = None


def get_game_service() -> GameService:
    """
    Get or create the singleton game service instance.

    The shared service writes its day log to the configured ``DAY_LOG_FILE``.

    Returns:
        GameService instance
    """
    global _game_service
    if _game_service is None:
        config = Config()
        _game_service = GameService(config=config, day_log_file=config.DAY_LOG_FILE)
    return _game_service


def set_game_service(service: Optional[GameService]) -> None:
    """Replace the shared instance; ``None`` makes the next call build a new one."""
    global _game_service
    _game_service = service
