"""Booking domain schemas - Pydantic models for validation"""

from datetime import date as date_type
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from ...shared.validators import parse_iso_date
from ...utils.sanitization import validate_and_sanitize_input

# "scheduled" is what early portal builds sent for a confirmed booking
BookingStatus = Literal["pending", "confirmed", "scheduled", "cancelled", "completed"]


class BookingCreate(BaseModel):
    """Schema for requesting a cleaning on a given day"""

    date: date_type
    notes: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v):
        if isinstance(v, date_type):
            return v
        if not isinstance(v, str):
            raise ValueError("Date must be an ISO formatted string")
        return parse_iso_date(v)

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, v):
        if v:
            return validate_and_sanitize_input(v, max_length=2000)
        return v


class BookingUpdate(BaseModel):
    """Schema for changing a booking's status or notes"""

    status: Optional[BookingStatus] = None
    notes: Optional[str] = None

    @field_validator("status")
    @classmethod
    def normalize_status(cls, v):
        if v == "scheduled":
            return "confirmed"
        return v

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, v):
        if v:
            return validate_and_sanitize_input(v, max_length=2000)
        return v


class BookingResponse(BaseModel):
    """Schema for booking response"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    client_id: int
    scheduled_at: datetime
    status: str
    is_recurring: bool = False
    notes: Optional[str] = None
    created_at: Optional[datetime] = None


class SlotSuggestionResponse(BaseModel):
    date: date_type
    suggested_time: datetime
