"""Routes for game control (new game, day advance, pause)."""

import logging
from fastapi import APIRouter

from ..errors import GameError
from ..models.summary import DailyOperationsSummary
from ..schemas.game_schemas import AdvanceRequest, AdvanceResponse, NewGameRequest, ScenarioRequest
from ..schemas.status_schemas import StatusResponse
from ..services.singleton import get_game_service
from .errors import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["game"])


@router.post("/game/new", response_model=StatusResponse)
async def new_game(request: NewGameRequest):
    """
    Start free play, replacing any game in progress.

    Args:
        request: Airline name and home hub

    Returns:
        Status of the new game
    """
    game_service = get_game_service()
    try:
        return StatusResponse(**game_service.new_game(request.name, request.home_hub))
    except GameError as e:
        raise to_http_exception(e)


@router.post("/game/scenario", response_model=StatusResponse)
async def start_scenario(request: ScenarioRequest):
    game_service = get_game_service()
    try:
        return StatusResponse(**game_service.start_scenario(request.scenario_id))
    except GameError as e:
        raise to_http_exception(e)


@router.post("/game/day", response_model=DailyOperationsSummary)
async def process_day():
    """
    Simulate one day.

    Returns:
        The day's operations summary
    """
    game_service = get_game_service()
    try:
        return game_service.process_day()
    except GameError as e:
        raise to_http_exception(e)


@router.post("/game/advance", response_model=AdvanceResponse)
async def advance(request: AdvanceRequest):
    """
    Simulate several days, stopping early on bankruptcy.

    Args:
        request: Number of days

    Returns:
        Report of the run
    """
    game_service = get_game_service()
    try:
        return AdvanceResponse(**game_service.advance(request.days))
    except GameError as e:
        raise to_http_exception(e)


@router.post("/game/pause", response_model=StatusResponse)
async def pause():
    game_service = get_game_service()
    try:
        return StatusResponse(**game_service.pause())
    except GameError as e:
        raise to_http_exception(e)


@router.post("/game/resume", response_model=StatusResponse)
async def resume():
    game_service = get_game_service()
    try:
        return StatusResponse(**game_service.resume())
    except GameError as e:
        raise to_http_exception(e)
