"""
Pydantic schemas for booking request/response models.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BookingFields(BaseModel):
    start_datetime: Optional[datetime] = Field(None, description="Start of the booking, must be in the future")
    end_datetime: Optional[datetime] = Field(None, description="End of the booking, must be later than the start")
    parking_spot: Optional[int] = Field(None, description="Id of the parking spot")

    @field_validator("start_datetime", "end_datetime")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # Timestamps without an offset are read as UTC
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class BookingCreate(BookingFields):
    """Schema for creating a booking. Presence is checked by the service."""


class BookingUpdate(BookingFields):
    """Schema for a partial booking update. Absent fields keep their stored value."""


class BookingRead(BaseModel):
    """Raw booking row as returned by the list endpoint."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_by: int
    start_datetime: datetime
    end_datetime: datetime
    parking_spot: int
    created_at: datetime
    updated_at: Optional[datetime] = None


class BookingDetail(BaseModel):
    """Booking joined with its spot name and owner's full name."""
    id: int
    start_datetime: datetime
    end_datetime: datetime
    spot_name: Optional[str] = None
    user_name: Optional[str] = None
