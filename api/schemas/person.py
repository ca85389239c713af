"""
Director and actor Pydantic schemas.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PersonCreate(BaseModel):
    """Request to create a director or an actor."""

    name: str = Field(..., description="Full name")
    biography: str = ""
    birth_date: Optional[date] = None
    nationality: str = ""


class PersonSummary(BaseModel):
    """Minimal person information."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    nationality: str = ""


class PersonDetail(PersonSummary):
    """Complete director or actor record."""

    biography: str = ""
    birth_date: Optional[date] = None
    created_at: datetime
    updated_at: datetime
