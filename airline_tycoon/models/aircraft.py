"""Aircraft models."""

import math
import uuid
from decimal import Decimal
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from ..config import (
    LEASE_RATE_MONTHLY,
    MAINTENANCE_BASE_RATE,
    MIN_SERVICEABLE_CONDITION,
)
from ..utils import to_money


class AircraftCategory(str, Enum):
    """Size class of an aircraft type."""

    REGIONAL = "regional"
    NARROW_BODY = "narrow_body"
    WIDE_BODY = "wide_body"
    JUMBO = "jumbo"


class AircraftType(BaseModel):
    """Represents an aircraft model with capacity and cost characteristics."""

    code: str
    name: str
    category: AircraftCategory
    capacity: int  # seats
    range_nm: int
    purchase_price: Decimal
    operating_cost_per_hour: Decimal
    fuel_consumption_per_hour: int  # gallons

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "code": "B738",
                "name": "Boeing 737-800",
                "category": "narrow_body",
                "capacity": 162,
                "range_nm": 3000,
                "purchase_price": "90000000",
                "operating_cost_per_hour": "4500",
                "fuel_consumption_per_hour": 850,
            }
        },
    }


class Aircraft(BaseModel):
    """A specific aircraft owned or leased by an airline."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    registration: str
    aircraft_type: AircraftType
    is_leased: bool = False
    monthly_lease_payment: Decimal = Decimal("0")
    assigned_route_id: Optional[str] = None
    condition: float = 1.0  # 0.0 needs major maintenance, 1.0 perfect
    total_flight_hours: int = 0
    acquired_on_day: int = 0

    @property
    def is_available(self) -> bool:
        """Whether the aircraft can be assigned to a route."""
        return self.assigned_route_id is None and self.condition > MIN_SERVICEABLE_CONDITION

    @property
    def display_name(self) -> str:
        return f"{self.registration} ({self.aircraft_type.name})"

    def add_flight_hours(self, hours: float) -> None:
        """
        Record flown hours and degrade condition.

        Roughly 1% of condition is lost per 100 flight hours.

        Args:
            hours: Hours flown
        """
        self.total_flight_hours += math.ceil(hours)
        self.condition = max(0.0, self.condition - hours / 10000.0)

    def maintenance_cost(self, level: float = 1.0) -> Decimal:
        """Cost of a maintenance pass at the given level without performing it."""
        if level < 0.0 or level > 1.0:
            raise ValueError("Maintenance level must be between 0.0 and 1.0")
        return to_money(self.aircraft_type.purchase_price * MAINTENANCE_BASE_RATE * Decimal(str(level)))

    def perform_maintenance(self, level: float = 1.0) -> Decimal:
        """
        Restore condition proportionally to the maintenance level.

        Args:
            level: 0.0 (basic) to 1.0 (complete overhaul)

        Returns:
            Cost of the maintenance
        """
        cost = self.maintenance_cost(level)
        self.condition = min(1.0, self.condition + level * (1.0 - self.condition))
        return cost

    @classmethod
    def create_owned(cls, aircraft_type: AircraftType, registration: str, acquired_on_day: int) -> "Aircraft":
        return cls(
            registration=registration,
            aircraft_type=aircraft_type,
            is_leased=False,
            acquired_on_day=acquired_on_day,
        )

    @classmethod
    def create_leased(cls, aircraft_type: AircraftType, registration: str, acquired_on_day: int) -> "Aircraft":
        """Create a leased aircraft; the monthly payment is 1.2% of the purchase price."""
        return cls(
            registration=registration,
            aircraft_type=aircraft_type,
            is_leased=True,
            monthly_lease_payment=to_money(aircraft_type.purchase_price * LEASE_RATE_MONTHLY),
            acquired_on_day=acquired_on_day,
        )
