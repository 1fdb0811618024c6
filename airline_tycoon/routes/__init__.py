"""Routes package for API endpoints."""

from .game_routes import router as game_router
from .status_routes import router as status_router
from .fleet_routes import router as fleet_router
from .saves_routes import router as saves_router
from .logs_routes import router as logs_router

__all__ = ["game_router", "status_router", "fleet_router", "saves_router", "logs_router"]
