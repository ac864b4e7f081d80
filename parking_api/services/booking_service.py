"""
Booking service for list, create, read, update and delete operations.
"""
import logging
from typing import Any, Dict, List

import asyncpg
from sqlalchemy import delete, func, insert, literal, update
from sqlalchemy.exc import DBAPIError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from parking_api.core.config import settings
from parking_api.core.errors import InvalidInput, NotFound, StorageConstraintViolation, storage_error_message
from parking_api.models.bookings import Booking
from parking_api.models.parking_spots import ParkingSpot
from parking_api.models.users import User
from parking_api.schemas.bookings import BookingCreate, BookingUpdate
from parking_api.schemas.principal import Principal
from parking_api.services.access_policy import booking_scope

logger = logging.getLogger(__name__)

booking_columns = Booking.__table__.c


def _keep_unless(value, column):
    """COALESCE(value, column): a null value leaves the stored one untouched."""
    return func.coalesce(literal(value, type_=column.type), column)


class BookingService:
    """
    Service for booking operations.

    Overlaps are never checked here. Every write is a single statement and the
    ``bookings_overlap`` exclusion constraint decides which of several
    concurrent writers wins; the others surface as StorageConstraintViolation.
    """

    def __init__(self, db: AsyncSession, list_limit: int = settings.BOOKINGS_LIST_LIMIT):
        self.db = db
        self.list_limit = list_limit

    async def _write(self, statement):
        try:
            result = await self.db.exec(statement)
            returned_id = result.scalar_one_or_none()
            await self.db.commit()
            return returned_id
        except DBAPIError as e:
            await self.db.rollback()
            # Only rejections reported by the server, not lost connections
            if not isinstance(getattr(e.orig, "__cause__", None), asyncpg.exceptions.PostgresError):
                raise
            raise StorageConstraintViolation(storage_error_message(e)) from e

    async def list_bookings(self, principal: Principal) -> List[Booking]:
        query = booking_scope(principal).apply(select(Booking))
        query = query.order_by(Booking.id.asc()).limit(self.list_limit)
        result = await self.db.exec(query)
        return list(result.all())

    async def create_booking(self, principal: Principal, booking_data: BookingCreate) -> int:
        """
        Insert a booking owned by the caller.

        Args:
            principal: Authenticated caller, always recorded as the owner
            booking_data: Requested start, end and spot

        Returns:
            Id assigned by the database

        Raises:
            InvalidInput: If any of the three fields is missing
            StorageConstraintViolation: If the database rejects the row
        """
        # Spot ids start at 1, a zero spot counts as missing
        if not (booking_data.start_datetime and booking_data.end_datetime and booking_data.parking_spot):
            raise InvalidInput()

        scope = booking_scope(principal)
        statement = insert(Booking).values(
            created_by=scope.owner_id,
            start_datetime=booking_data.start_datetime,
            end_datetime=booking_data.end_datetime,
            parking_spot=booking_data.parking_spot,
        ).returning(Booking.id)

        booking_id = await self._write(statement)
        logger.info(f"Booking {booking_id} created by user {principal.id} for spot {booking_data.parking_spot}")
        return booking_id

    async def get_booking(self, principal: Principal, booking_id: int) -> List[Dict[str, Any]]:
        query = (
            select(
                Booking.id,
                Booking.start_datetime,
                Booking.end_datetime,
                ParkingSpot.name.label("spot_name"),
                func.concat(User.first_name, " ", User.last_name).label("user_name"),
            )
            .select_from(Booking)
            .outerjoin(User, Booking.created_by == User.id)
            .outerjoin(ParkingSpot, Booking.parking_spot == ParkingSpot.id)
            .where(Booking.id == booking_id)
        )
        query = booking_scope(principal).apply(query)

        result = await self.db.exec(query)
        rows = result.mappings().all()
        if not rows:
            raise NotFound()
        return [dict(row) for row in rows]

    async def update_booking(self, principal: Principal, booking_id: int, booking_data: BookingUpdate):
        statement = booking_scope(principal).apply(
            update(Booking).where(Booking.id == booking_id)
        ).values(
            start_datetime=_keep_unless(booking_data.start_datetime, booking_columns.start_datetime),
            end_datetime=_keep_unless(booking_data.end_datetime, booking_columns.end_datetime),
            parking_spot=_keep_unless(booking_data.parking_spot, booking_columns.parking_spot),
        ).returning(Booking.id).execution_options(synchronize_session=False)

        if await self._write(statement) is None:
            raise NotFound()
        logger.info(f"Booking {booking_id} updated by user {principal.id}")

    async def delete_booking(self, principal: Principal, booking_id: int):
        statement = booking_scope(principal).apply(
            delete(Booking).where(Booking.id == booking_id)
        ).returning(Booking.id).execution_options(synchronize_session=False)

        if await self._write(statement) is None:
            raise NotFound()
        logger.info(f"Booking {booking_id} deleted by user {principal.id}")
