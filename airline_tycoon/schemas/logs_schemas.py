"""Schemas for logs endpoints."""

from pydantic import BaseModel
from typing import List, Dict, Any


class LogsResponse(BaseModel):
    """Response model for the day log."""

    days: List[Dict[str, Any]]
    total_days: int
