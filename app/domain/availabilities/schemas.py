"""Availability domain schemas - Pydantic models for validation"""

from pydantic import BaseModel, Field


class AvailabilityUpdate(BaseModel):
    """0 = absent (default), 1 = maybe, 2 = attending"""

    availability: int = Field(ge=0, le=2)


class AvailabilityResponse(BaseModel):
    status: str = "OK"
    availability: int
