"""Session Data Transfer Objects."""

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# upper bound of the integer duration column
MAX_DURATION_IN_MINUTES = 2**31 - 1


class CreateSessionDTO(BaseModel):
    """Request body for recording a session."""

    name: str = Field(..., min_length=1, description="Session name")
    duration_in_minutes: int = Field(
        ..., ge=0, le=MAX_DURATION_IN_MINUTES, description="Length of the session in minutes"
    )

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value


class SessionDTO(BaseModel):
    """A single recorded session."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    date: dt.date
    duration_in_minutes: Optional[int] = 0


class SessionDataDTO(BaseModel):
    """Sessions for a query together with their summed duration."""

    model_config = ConfigDict(populate_by_name=True)

    sessions: List[SessionDTO] = Field(default_factory=list)
    total_duration: int = Field(0, alias="totalDuration")
