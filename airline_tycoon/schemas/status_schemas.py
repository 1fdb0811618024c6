"""Schemas for status endpoints."""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class StatusResponse(BaseModel):
    """Response model for game status."""

    game: str
    version: str
    state: str
    is_running: bool
    has_won: bool
    has_lost: bool
    airline: Optional[Dict[str, Any]] = Field(None, description="Airline snapshot with formatted cash")
    scenario: Optional[str] = None
    objectives: List[Dict[str, Any]] = Field(default_factory=list)


class EventsResponse(BaseModel):
    """Response model for events currently in effect."""

    demand_modifier: float
    cost_modifier: float
    events: List[Dict[str, Any]]


class RoutesResponse(BaseModel):
    """Response model for the route network and fleet."""

    routes: List[Dict[str, Any]]
    fleet: List[Dict[str, Any]]
