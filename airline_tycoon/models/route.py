"""Route model."""

import uuid
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field

from .airport import Airport
from .aircraft import Aircraft
from ..config import CRUISE_SPEED_KNOTS
from ..errors import AssignmentError


class Route(BaseModel):
    """A scheduled service between two airports, flown by at most one aircraft."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    origin: Airport
    destination: Airport
    distance_nm: int
    ticket_price: Decimal
    daily_flights: int = 1
    is_active: bool = True
    assigned_aircraft: Optional[Aircraft] = None
    opened_on_day: int = 0

    # Performance, updated once per processed day
    load_factor: float = 0.75
    daily_profit: Decimal = Decimal("0")
    total_passengers: int = 0

    @property
    def name(self) -> str:
        return f"{self.origin.code} → {self.destination.code}"

    @property
    def flight_time_hours(self) -> float:
        """One-way block time at cruise speed."""
        return self.distance_nm / CRUISE_SPEED_KNOTS

    @property
    def is_operating(self) -> bool:
        """Whether the route will fly today."""
        return self.is_active and self.assigned_aircraft is not None

    def assign(self, aircraft: Aircraft) -> None:
        """
        Put an aircraft on this route, releasing any aircraft already on it.

        Args:
            aircraft: Fleet member to assign

        Raises:
            AssignmentError: If the aircraft already flies a different route
        """
        if aircraft.assigned_route_id is not None and aircraft.assigned_route_id != self.id:
            raise AssignmentError(
                f"{aircraft.display_name} is already assigned to another route",
                {"aircraft_id": aircraft.id, "route_id": aircraft.assigned_route_id},
            )
        if self.assigned_aircraft is not None and self.assigned_aircraft.id != aircraft.id:
            self.assigned_aircraft.assigned_route_id = None
        aircraft.assigned_route_id = self.id
        self.assigned_aircraft = aircraft

    def unassign(self) -> Optional[Aircraft]:
        """Release the assigned aircraft, if any, and return it."""
        aircraft = self.assigned_aircraft
        if aircraft is not None:
            aircraft.assigned_route_id = None
            self.assigned_aircraft = None
        return aircraft

    def record_performance(self, passengers: int, load_factor: float, profit: Decimal) -> None:
        self.total_passengers += passengers
        self.load_factor = load_factor
        self.daily_profit = profit
