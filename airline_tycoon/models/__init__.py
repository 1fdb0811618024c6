"""Domain models package."""

from .airport import Airport, MarketSize
from .aircraft import Aircraft, AircraftCategory, AircraftType
from .route import Route
from .event import ActiveEvent, ActiveEventLedger, EventCategory, EventSeverity, GameEvent
from .airline import Airline
from .scenario import Objective, ObjectiveKind, Scenario
from .summary import DailyOperationsSummary, RouteDailyResult

__all__ = [
    "Airport",
    "MarketSize",
    "Aircraft",
    "AircraftCategory",
    "AircraftType",
    "Route",
    "ActiveEvent",
    "ActiveEventLedger",
    "EventCategory",
    "EventSeverity",
    "GameEvent",
    "Airline",
    "Objective",
    "ObjectiveKind",
    "Scenario",
    "DailyOperationsSummary",
    "RouteDailyResult",
]
