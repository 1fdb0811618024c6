"""Scenario and objective models."""

from decimal import Decimal
from enum import Enum
from typing import List
from pydantic import BaseModel, Field

from ..config import DEFAULT_REPUTATION
from ..utils import format_cost


class ObjectiveKind(str, Enum):
    PASSENGERS = "passengers"
    PROFIT = "profit"
    ROUTES = "routes"
    REPUTATION = "reputation"


class Objective(BaseModel):
    """A single win condition: the airline metric for ``kind`` must reach ``threshold``."""

    kind: ObjectiveKind
    threshold: Decimal

    model_config = {"frozen": True}

    @property
    def description(self) -> str:
        if self.kind == ObjectiveKind.PASSENGERS:
            return f"Carry {int(self.threshold):,} passengers"
        if self.kind == ObjectiveKind.PROFIT:
            return f"Earn {format_cost(self.threshold)} net profit"
        if self.kind == ObjectiveKind.ROUTES:
            return f"Operate {int(self.threshold)} active routes"
        return f"Reach {int(self.threshold)} reputation"


class Scenario(BaseModel):
    """A preset starting position with objectives that win the game."""

    id: str
    name: str
    description: str = ""
    airline_name: str
    home_hub: str
    starting_cash: Decimal = Decimal("5000000")
    starting_reputation: int = DEFAULT_REPUTATION
    objectives: List[Objective] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "regional-startup",
                "name": "Regional Startup",
                "airline_name": "Liberty Air",
                "home_hub": "BOS",
                "starting_cash": "3000000",
                "objectives": [{"kind": "passengers", "threshold": "50000"}],
            }
        },
    }
