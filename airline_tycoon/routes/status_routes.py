"""Routes for status, active events, route network, and scenario listing."""

import logging
from fastapi import APIRouter

from ..errors import GameError
from ..schemas.game_schemas import ScenariosResponse
from ..schemas.status_schemas import EventsResponse, RoutesResponse, StatusResponse
from ..services.singleton import get_game_service
from .errors import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["status"])


@router.get("/status", response_model=StatusResponse)
async def get_status():
    """
    Get current game status.

    Returns:
        Session state, airline snapshot, and objective progress
    """
    game_service = get_game_service()
    return StatusResponse(**game_service.get_status())


@router.get("/events", response_model=EventsResponse)
async def get_events():
    """
    Get the events currently in effect.

    Returns:
        Active events with remaining days and the aggregate modifiers
    """
    game_service = get_game_service()
    try:
        return EventsResponse(**game_service.get_events())
    except GameError as e:
        raise to_http_exception(e)


@router.get("/routes", response_model=RoutesResponse)
async def get_routes():
    game_service = get_game_service()
    try:
        return RoutesResponse(**game_service.get_routes())
    except GameError as e:
        raise to_http_exception(e)


@router.get("/scenarios", response_model=ScenariosResponse)
async def get_scenarios():
    game_service = get_game_service()
    return ScenariosResponse(scenarios=game_service.list_scenarios())
