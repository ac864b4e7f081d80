"""
Role-based scoping shared by every booking query.

Admins see and modify all bookings. Standard users are restricted to rows they
created, and a row outside the caller's scope is indistinguishable from a
missing one.
"""
from dataclasses import dataclass
from typing import Optional, TypeVar

from sqlalchemy.sql.elements import ColumnElement

from parking_api.models.bookings import Booking
from parking_api.schemas.principal import Principal

Statement = TypeVar("Statement")


@dataclass(frozen=True)
class BookingScope:
    owner_id: int
    predicate: Optional[ColumnElement] = None

    def apply(self, statement: Statement) -> Statement:
        """Add the ownership filter to a select, update or delete."""
        if self.predicate is None:
            return statement
        return statement.where(self.predicate)


def booking_scope(principal: Principal) -> BookingScope:
    if principal.is_admin:
        return BookingScope(owner_id=principal.id)
    return BookingScope(owner_id=principal.id, predicate=Booking.created_by == principal.id)
