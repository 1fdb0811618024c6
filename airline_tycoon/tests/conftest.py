"""Shared fixtures for the test suite."""

from decimal import Decimal
from typing import List, Optional

import pytest

from airline_tycoon.config import Config
from airline_tycoon.data_loader import ReferenceData
from airline_tycoon.event_generator import EventGenerator
from airline_tycoon.models.airline import Airline
from airline_tycoon.models.event import EventCategory, EventSeverity, GameEvent


class ScriptedEventGenerator(EventGenerator):
    """Event generator that returns pre-built events on chosen days."""

    def __init__(self, events_by_day=None, every_day: Optional[GameEvent] = None):
        super().__init__(probability=0.0)
        self.events_by_day = events_by_day or {}
        self.every_day = every_day
        self.calls: List[int] = []

    def try_generate_event(self, day, airline):
        self.calls.append(day)
        template = self.events_by_day.get(day, self.every_day)
        if template is None:
            return None
        return template.model_copy(update={"day_occurred": day, "id": f"scripted-{day}"})


def make_event(
    day: int = 1,
    duration: int = 3,
    demand: float = 0.8,
    cost: float = 1.2,
    impact: str = "-50000",
    reputation: int = -5,
    category: EventCategory = EventCategory.OPERATIONAL,
    severity: EventSeverity = EventSeverity.MODERATE,
) -> GameEvent:
    return GameEvent(
        category=category,
        severity=severity,
        title="Test Event",
        description="Something happened",
        day_occurred=day,
        duration_days=duration,
        demand_multiplier=demand,
        cost_multiplier=cost,
        financial_impact=Decimal(impact),
        reputation_delta=reputation,
    )


@pytest.fixture
def config(tmp_path):
    """Configuration that keeps saves and logs inside the test's temp dir."""
    return Config(
        SAVES_DIR=str(tmp_path / "saves"),
        LOG_FILE=str(tmp_path / "simulation.log"),
        DAY_LOG_FILE=str(tmp_path / "days.jsonl"),
        EVENT_PROBABILITY=0.0,
        RANDOM_SEED=None,
    )


@pytest.fixture
def reference_data(config):
    """Bundled airport, aircraft and distance tables."""
    return ReferenceData.from_config(config)


@pytest.fixture
def jfk(reference_data):
    return reference_data.require_airport("JFK")


@pytest.fixture
def bos(reference_data):
    return reference_data.require_airport("BOS")


@pytest.fixture
def b738(reference_data):
    return reference_data.require_aircraft_type("B738")


@pytest.fixture
def airline(jfk):
    """Airline with no fleet or routes."""
    return Airline(name="Test Air", home_hub=jfk, cash=Decimal("5000000"))


@pytest.fixture
def flying_airline(airline, jfk, bos, b738):
    """Airline flying one B738 on JFK-BOS at $100."""
    aircraft = airline.lease_aircraft(b738)
    route = airline.open_route(jfk, bos, 162, Decimal("100"))
    airline.assign_aircraft(route, aircraft)
    return airline
