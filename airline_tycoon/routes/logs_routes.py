"""Routes for logs endpoints."""

import logging
from typing import Optional
from fastapi import APIRouter

from ..schemas.logs_schemas import LogsResponse
from ..services.singleton import get_game_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["logs"])


@router.get("/logs", response_model=LogsResponse)
async def get_logs(limit: Optional[int] = 20):
    """
    Get the day log of the current game.

    Args:
        limit: Number of recent days to return (default: 20, use 0 for all)

    Returns:
        Day summaries, oldest first
    """
    game_service = get_game_service()
    days = game_service.get_day_log(limit=limit if limit and limit > 0 else None)
    return LogsResponse(days=days, total_days=len(game_service.day_log))
