"""Per-route and per-day result models produced by the turn processor."""

from decimal import Decimal
from typing import List
from pydantic import BaseModel, Field

from .event import GameEvent
from .route import Route


class RouteDailyResult(BaseModel):
    """Outcome of one route for one day."""

    route_id: str
    route_name: str
    flights: int = 0
    demand: int = 0
    passengers: int = 0
    revenue: Decimal = Decimal("0")
    costs: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")
    load_factor: float = 0.0

    @classmethod
    def empty(cls, route: Route) -> "RouteDailyResult":
        """Zero result for a route that does not fly today."""
        return cls(route_id=route.id, route_name=route.name)


class DailyOperationsSummary(BaseModel):
    """What happened to the airline on one simulated day."""

    day: int
    revenue: Decimal = Decimal("0")
    costs: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")
    event_impact: Decimal = Decimal("0")
    net_cash_change: Decimal = Decimal("0")
    passengers_carried: int = 0
    cash_balance: Decimal = Decimal("0")
    reputation: int = 0
    demand_modifier: float = 1.0
    cost_modifier: float = 1.0
    route_results: List[RouteDailyResult] = Field(default_factory=list)
    new_events: List[GameEvent] = Field(default_factory=list)
    expired_events: List[GameEvent] = Field(default_factory=list)

    def to_log_entry(self) -> dict:
        """JSON-friendly dict for the day log."""
        return self.model_dump(mode="json")
