"""Airline Tycoon daily operations simulation engine."""

from .config import GAME_NAME, GAME_VERSION

__version__ = GAME_VERSION

__all__ = ["GAME_NAME", "GAME_VERSION", "__version__"]
