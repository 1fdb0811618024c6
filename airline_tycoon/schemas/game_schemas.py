"""Schemas for game control endpoints."""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class NewGameRequest(BaseModel):
    """Request model for starting free play."""

    name: Optional[str] = Field(None, description="Airline name; configured default if omitted")
    home_hub: Optional[str] = Field(None, description="Home airport code")


class ScenarioRequest(BaseModel):
    """Request model for starting a built-in scenario."""

    scenario_id: str


class AdvanceRequest(BaseModel):
    """Request model for advancing several days."""

    days: int = Field(..., ge=1, le=3650)


class AdvanceResponse(BaseModel):
    """Response model for a multi-day advance."""

    days_completed: int
    current_day: int
    final_cash: str
    reputation: int
    total_passengers_carried: int
    net_profit: str
    has_won: bool
    has_lost: bool
    state: str
    event_breakdown: Dict[str, int]


class OpenRouteRequest(BaseModel):
    """Request model for opening a route."""

    origin: str
    destination: str
    ticket_price: Optional[Decimal] = Field(None, gt=0, description="Suggested from distance if omitted")
    aircraft_id: Optional[str] = Field(None, description="Fleet member id or registration to assign")


class AcquireAircraftRequest(BaseModel):
    """Request model for leasing or purchasing an aircraft."""

    type_code: str
    lease: bool = True


class MessageResponse(BaseModel):
    message: str
    data: Optional[Dict[str, Any]] = None


class ScenariosResponse(BaseModel):
    scenarios: List[Dict[str, Any]]
