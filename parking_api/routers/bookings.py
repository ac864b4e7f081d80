"""
FastAPI router for booking operations.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from parking_api.core.database import AsyncDBSession
from parking_api.dependencies import CurrentPrincipal, get_current_principal
from parking_api.schemas.bookings import BookingCreate, BookingDetail, BookingRead, BookingUpdate
from parking_api.services.booking_service import BookingService

# Every route authenticates before any booking logic runs
router = APIRouter(dependencies=[Depends(get_current_principal)])


@router.get("", response_model=List[BookingRead])
async def list_bookings(session: AsyncDBSession, principal: CurrentPrincipal):
    """List bookings visible to the caller, oldest id first."""
    return await BookingService(session).list_bookings(principal)


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
async def create_booking(
    session: AsyncDBSession,
    principal: CurrentPrincipal,
    booking_data: Optional[BookingCreate] = None,
):
    booking_id = await BookingService(session).create_booking(principal, booking_data or BookingCreate())
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"/bookings/{booking_id}"}
    )


@router.get("/{booking_id}", response_model=List[BookingDetail])
async def get_booking(booking_id: int, session: AsyncDBSession, principal: CurrentPrincipal):
    return await BookingService(session).get_booking(principal, booking_id)


@router.patch("/{booking_id}", response_class=Response)
async def update_booking(
    booking_id: int,
    session: AsyncDBSession,
    principal: CurrentPrincipal,
    booking_data: Optional[BookingUpdate] = None,
):
    await BookingService(session).update_booking(principal, booking_id, booking_data or BookingUpdate())
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{booking_id}", response_class=Response)
async def delete_booking(booking_id: int, session: AsyncDBSession, principal: CurrentPrincipal):
    await BookingService(session).delete_booking(principal, booking_id)
    return Response(status_code=status.HTTP_200_OK)
