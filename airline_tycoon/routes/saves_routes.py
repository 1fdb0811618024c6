"""Routes for saving and loading games."""

import logging
from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from ..errors import GameError
from ..schemas.saves_schemas import SaveRequest, SaveResponse, SavesResponse
from ..schemas.status_schemas import StatusResponse
from ..services.singleton import get_game_service
from .errors import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["saves"])


@router.post("/saves", response_model=SaveResponse)
async def save_game(request: SaveRequest):
    """
    Save the game in progress.

    Args:
        request: Save slot name

    Returns:
        Slot name and file written
    """
    game_service = get_game_service()
    try:
        path = game_service.save(request.save_name)
        return SaveResponse(save_name=request.save_name, file_path=path)
    except GameError as e:
        raise to_http_exception(e)


@router.get("/saves", response_model=SavesResponse)
async def list_saves():
    game_service = get_game_service()
    return SavesResponse(saves=game_service.list_saves())


@router.post("/saves/load", response_model=StatusResponse)
async def load_game(request: SaveRequest):
    """
    Resume a saved game, replacing any game in progress.

    Args:
        request: Save slot name

    Returns:
        Status of the resumed game
    """
    game_service = get_game_service()
    try:
        return StatusResponse(**game_service.load(request.save_name))
    except GameError as e:
        raise to_http_exception(e)
    except ValidationError as e:
        logger.error(f"Corrupted save '{request.save_name}': {e}")
        raise HTTPException(status_code=400, detail=f"Save '{request.save_name}' is corrupted")
