"""Schemas for save game endpoints."""

from pydantic import BaseModel, Field
from typing import Any, Dict, List


class SaveRequest(BaseModel):
    save_name: str = Field(..., min_length=1, max_length=100)


class SaveResponse(BaseModel):
    save_name: str
    file_path: str


class SavesResponse(BaseModel):
    """Response model for the save listing, newest first."""

    saves: List[Dict[str, Any]]
