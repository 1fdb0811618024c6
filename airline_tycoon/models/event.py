"""Random event models and the ledger of events currently in effect."""

import uuid
from decimal import Decimal
from enum import Enum
from typing import List
from pydantic import BaseModel, Field, field_validator

from ..utils import format_cost, format_percent_change


class EventCategory(str, Enum):
    WEATHER = "weather"
    ECONOMIC = "economic"
    OPERATIONAL = "operational"
    MARKET = "market"
    POSITIVE_PR = "positive_pr"
    NEGATIVE_PR = "negative_pr"


class EventSeverity(str, Enum):
    """Event severity, ordered from minor to critical."""

    MINOR = "minor"
    MODERATE = "moderate"
    MAJOR = "major"
    CRITICAL = "critical"

    @property
    def ordinal(self) -> int:
        """0 for minor up to 3 for critical."""
        return list(EventSeverity).index(self)


class GameEvent(BaseModel):
    """
    A random occurrence affecting the airline.

    The financial impact and reputation delta are applied once, on the day the
    event occurs. The demand and cost multipliers apply on every day the event
    remains in the active ledger.
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    category: EventCategory
    severity: EventSeverity
    title: str
    description: str
    day_occurred: int
    duration_days: int
    demand_multiplier: float = 1.0
    cost_multiplier: float = 1.0
    financial_impact: Decimal = Decimal("0")
    reputation_delta: int = 0

    model_config = {"frozen": True}

    @field_validator("duration_days")
    @classmethod
    def _duration_at_least_one_day(cls, value: int) -> int:
        if value < 1:
            raise ValueError("duration_days must be at least 1")
        return value

    @field_validator("demand_multiplier", "cost_multiplier")
    @classmethod
    def _multiplier_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("multipliers must be positive")
        return value

    def effects_summary(self) -> str:
        """
        Short human-readable list of the event's effects.

        Returns:
            String like "-$12,000 | -2 reputation | -20% demand | +15% costs | 3 days"
        """
        effects = []
        if self.financial_impact != 0:
            sign = "+" if self.financial_impact > 0 else ""
            effects.append(f"{sign}{format_cost(self.financial_impact)}")
        if self.reputation_delta != 0:
            sign = "+" if self.reputation_delta > 0 else ""
            effects.append(f"{sign}{self.reputation_delta} reputation")
        if self.demand_multiplier != 1.0:
            effects.append(f"{format_percent_change(self.demand_multiplier)} demand")
        if self.cost_multiplier != 1.0:
            effects.append(f"{format_percent_change(self.cost_multiplier)} costs")
        effects.append(f"{self.duration_days} day{'s' if self.duration_days != 1 else ''}")
        return " | ".join(effects)


class ActiveEvent(BaseModel):
    """An event in effect and the number of days it has left."""

    event: GameEvent
    remaining_days: int


class ActiveEventLedger(BaseModel):
    """
    Events whose multipliers currently apply.

    An event appended on day D with duration N influences days D through
    D + N - 1: expiry only counts down entries that occurred before the day
    being expired.
    """

    entries: List[ActiveEvent] = Field(default_factory=list)

    @property
    def events(self) -> List[GameEvent]:
        return [entry.event for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def append(self, event: GameEvent) -> None:
        """Start tracking an event for its full duration."""
        self.entries.append(ActiveEvent(event=event, remaining_days=event.duration_days))

    def expire(self, current_day: int) -> List[GameEvent]:
        """
        Count down events from earlier days and drop the ones that ran out.

        Args:
            current_day: Day being processed

        Returns:
            Events removed from the ledger
        """
        expired = []
        kept = []
        for entry in self.entries:
            if entry.event.day_occurred < current_day:
                entry.remaining_days -= 1
            if entry.remaining_days <= 0:
                expired.append(entry.event)
            else:
                kept.append(entry)
        self.entries = kept
        return expired

    def demand_modifier(self) -> float:
        """Product of the demand multipliers in effect; 1.0 when empty."""
        modifier = 1.0
        for entry in self.entries:
            modifier *= entry.event.demand_multiplier
        return modifier

    def cost_modifier(self) -> float:
        """Product of the cost multipliers in effect; 1.0 when empty."""
        modifier = 1.0
        for entry in self.entries:
            modifier *= entry.event.cost_multiplier
        return modifier
