"""HTTP payloads for the persons endpoints."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PersonRequest(BaseModel):
    """Creation payload; decoupled from the stored record (no id)."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=255)
    age: int = Field(ge=0, le=150)
    address: str = Field(min_length=1)


class PersonResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    age: int
    address: Optional[str] = None
