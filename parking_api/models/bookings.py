"""
SQLModel database model for bookings.

Ordering, future start and overlap rules are enforced by the database
(see ``parking_api.core.schema``), the model only mirrors the columns.
"""
from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, ForeignKey, Integer, func
from sqlmodel import Field, SQLModel


class Booking(SQLModel, table=True):
    __tablename__ = "bookings"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_by: int = Field(sa_column=Column(Integer, ForeignKey("users.id"), nullable=False))
    start_datetime: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    end_datetime: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    parking_spot: int = Field(sa_column=Column(Integer, ForeignKey("parking_spots.id"), nullable=False))
    created_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    )
    # Stamped by set_timestamp_on_update_trigger
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime(timezone=True), nullable=True))

    def __repr__(self):
        return f"<Booking(id={self.id}, spot={self.parking_spot}, start='{self.start_datetime}', end='{self.end_datetime}')>"
