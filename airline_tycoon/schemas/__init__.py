"""API schemas for request/response models."""

from .game_schemas import (
    AcquireAircraftRequest,
    AdvanceRequest,
    AdvanceResponse,
    MessageResponse,
    NewGameRequest,
    OpenRouteRequest,
    ScenarioRequest,
    ScenariosResponse,
)
from .status_schemas import StatusResponse, EventsResponse, RoutesResponse
from .saves_schemas import SaveRequest, SaveResponse, SavesResponse
from .logs_schemas import LogsResponse

__all__ = [
    "AcquireAircraftRequest",
    "AdvanceRequest",
    "AdvanceResponse",
    "MessageResponse",
    "NewGameRequest",
    "OpenRouteRequest",
    "ScenarioRequest",
    "ScenariosResponse",
    "StatusResponse",
    "EventsResponse",
    "RoutesResponse",
    "SaveRequest",
    "SaveResponse",
    "SavesResponse",
    "LogsResponse",
]
