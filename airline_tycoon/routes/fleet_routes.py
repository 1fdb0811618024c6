"""Routes for changing the route network and fleet."""

import logging
from fastapi import APIRouter

from ..errors import GameError
from ..schemas.game_schemas import AcquireAircraftRequest, MessageResponse, OpenRouteRequest
from ..services.singleton import get_game_service
from .errors import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["fleet"])


@router.post("/routes", response_model=MessageResponse)
async def open_route(request: OpenRouteRequest):
    """
    Open a route, optionally assigning an aircraft to it.

    Args:
        request: Airport codes, fare, and aircraft

    Returns:
        The new route's id and name
    """
    game_service = get_game_service()
    try:
        route = game_service.open_route(
            request.origin, request.destination, request.ticket_price, request.aircraft_id
        )
        return MessageResponse(message=f"Opened route {route['name']}", data=route)
    except GameError as e:
        raise to_http_exception(e)


@router.delete("/routes/{route_id}", response_model=MessageResponse)
async def close_route(route_id: str):
    game_service = get_game_service()
    try:
        game_service.close_route(route_id)
        return MessageResponse(message="Route closed", data={"id": route_id})
    except GameError as e:
        raise to_http_exception(e)


@router.post("/fleet", response_model=MessageResponse)
async def acquire_aircraft(request: AcquireAircraftRequest):
    game_service = get_game_service()
    try:
        aircraft = game_service.acquire_aircraft(request.type_code, request.lease)
        verb = "Leased" if request.lease else "Purchased"
        return MessageResponse(message=f"{verb} {aircraft['registration']}", data=aircraft)
    except GameError as e:
        raise to_http_exception(e)
