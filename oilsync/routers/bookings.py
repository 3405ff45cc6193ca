"""
Booking routes.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from oilsync.auth import get_current_user, get_optional_user, require_staff
from oilsync.database import get_db
from oilsync.models.booking import BookingStatus
from oilsync.models.user import User
from oilsync.schemas.booking import (
    BookingCreate, BookingCreated, BookingDetail, BookingStatusUpdate, BookingWithDetails,
)
from oilsync.schemas.common import ApiResponse
from oilsync.services import bookings as booking_service

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("", response_model=ApiResponse[BookingCreated], status_code=status.HTTP_201_CREATED)
async def create_booking(
    booking: BookingCreate,
    db: AsyncSession = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user),
):
    """
    Book an oil change. Signing in is optional; guests are matched to an
    account by their contact email when one exists.
    """
    db_booking, vehicle = await booking_service.create_booking(db, booking, current_user)
    return {
        "message": "Booking created successfully",
        "data": {"booking": db_booking, "vehicle": vehicle},
    }


@router.get("", response_model=ApiResponse[List[BookingWithDetails]])
async def get_bookings(
    status: Optional[BookingStatus] = None,
    customer_id: Optional[int] = Query(None, alias="customerId"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Get bookings, newest first. Customers only ever see their own.
    """
    bookings = await booking_service.list_bookings(
        db, current_user, status=status, customer_id=customer_id
    )
    return {"message": "Bookings retrieved successfully", "data": bookings}


@router.get("/{booking_id}", response_model=ApiResponse[BookingDetail])
async def get_booking(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Get a specific booking by ID.
    """
    booking = await booking_service.get_booking(db, booking_id, current_user)
    return {
        "message": "Booking retrieved successfully",
        "data": {"booking": booking, "vehicle": booking.vehicle, "customer": booking.customer},
    }


@router.patch("/{booking_id}/status", response_model=ApiResponse[BookingWithDetails])
async def update_booking_status(
    booking_id: int,
    update: BookingStatusUpdate,
    db: AsyncSession = Depends(get_db),
    staff_user: User = Depends(require_staff),
):
    """
    Move a booking through its lifecycle and optionally assign a technician.
    """
    booking = await booking_service.update_status(db, booking_id, update.status, update.technician_id)
    return {"message": "Booking updated successfully", "data": booking}


@router.delete("/{booking_id}", response_model=ApiResponse[BookingWithDetails])
async def delete_booking(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Cancel a booking. Booking history is never deleted.
    """
    booking = await booking_service.cancel_booking(db, booking_id, current_user)
    return {"message": "Booking cancelled successfully", "data": booking}


@router.post("/{booking_id}/cancel", response_model=ApiResponse[BookingWithDetails])
async def cancel_booking(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    booking = await booking_service.cancel_booking(db, booking_id, current_user)
    return {"message": "Booking cancelled successfully", "data": booking}
