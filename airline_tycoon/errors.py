"""Exceptions raised by the simulation engine."""

from typing import Dict, Optional


class GameError(Exception):
    """Base class for engine errors."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(message)
        self.details = details or {}


class InvalidStateError(GameError):
    """Raised when an operation is called in a session state that forbids it."""


class ReferenceNotFoundError(GameError):
    """Raised when an airport or aircraft type code is not in the catalog."""


class InsufficientFundsError(GameError):
    """Raised when the airline cannot pay for an operation."""


class AssignmentError(GameError):
    """Raised for invalid fleet or route assignment changes."""
