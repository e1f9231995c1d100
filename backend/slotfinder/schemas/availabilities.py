# backend/slotfinder/schemas/availabilities.py
"""
Pydantic schemas for availabilities API.
"""

from datetime import date
from pydantic import BaseModel, Field


class AvailabilityRead(BaseModel):
    """Bookable slots of a single day."""
    date: date
    slots: list[str] = Field(default_factory=list, description='Slot start times, "H:MM", ascending')

    model_config = {"from_attributes": True}


class AvailabilitiesResponse(BaseModel):
    """Availabilities for consecutive days starting at start_date."""
    start_date: date
    number_of_days: int
    availabilities: list[AvailabilityRead]

    # Metadata
    slot_step_minutes: int = Field(description="Grid step in minutes (15/30/60)")

    model_config = {"from_attributes": True}
