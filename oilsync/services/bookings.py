"""
Booking lifecycle: creation from the public form, listing, status updates and
cancellation.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from oilsync.errors import InvalidStateError, NotFoundError, PermissionDeniedError, ValidationError
from oilsync.logging_config import mask_email
from oilsync.models.booking import Booking, BookingStatus
from oilsync.models.technician import Technician
from oilsync.models.user import User
from oilsync.models.vehicle import Vehicle
from oilsync.schemas.booking import BookingCreate
from oilsync.services import users as user_service
from oilsync.services.pricing import calculate_price
from oilsync.services.vehicles import decode_vin_or_raise, find_or_create_vehicle
from oilsync.utils.time import utcnow
from oilsync.validation import validate_email, validate_phone

logger = logging.getLogger(__name__)

DEFAULT_DURATION_MINUTES = 60

ALLOWED_TRANSITIONS = {
    BookingStatus.PENDING: {BookingStatus.CONFIRMED, BookingStatus.IN_PROGRESS, BookingStatus.CANCELLED},
    BookingStatus.CONFIRMED: {BookingStatus.IN_PROGRESS, BookingStatus.CANCELLED, BookingStatus.PENDING},
    BookingStatus.IN_PROGRESS: {BookingStatus.COMPLETED, BookingStatus.CANCELLED},
    BookingStatus.COMPLETED: set(),
    BookingStatus.CANCELLED: set(),
}


def can_transition(current: BookingStatus, new: BookingStatus) -> bool:
    """Same-status updates are always allowed, e.g. to re-assign a technician."""
    return current == new or new in ALLOWED_TRANSITIONS[current]


def parse_schedule(preferred_date: Optional[str], preferred_time: Optional[str],
                   now: Optional[datetime] = None) -> datetime:
    """
    Appointment start from the form's date and optional ``HH:MM`` time.

    Defaults to 24 hours from now when no date was picked.
    """
    if not preferred_date:
        return (now or utcnow()) + timedelta(hours=24)

    try:
        scheduled = datetime.fromisoformat(preferred_date.strip().replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError("Invalid preferred date")
    if scheduled.tzinfo is not None:
        scheduled = scheduled.astimezone(timezone.utc).replace(tzinfo=None)

    if preferred_time:
        try:
            slot = datetime.strptime(preferred_time.strip(), "%H:%M").time()
        except ValueError:
            raise ValidationError("Invalid preferred time, expected HH:MM")
        scheduled = datetime.combine(scheduled.date(), slot)

    return scheduled


async def load_booking(db: AsyncSession, booking_id: int, refresh: bool = False) -> Booking:
    query = select(Booking).where(Booking.id == booking_id)
    if refresh:
        query = query.execution_options(populate_existing=True)
    result = await db.execute(query)
    booking = result.scalar_one_or_none()
    if not booking:
        raise NotFoundError("Booking not found")
    return booking


def _check_access(booking: Booking, user: User) -> None:
    if user.is_staff or booking.customer_id == user.id:
        return
    raise PermissionDeniedError("You do not have access to this booking")


async def create_booking(db: AsyncSession, data: BookingCreate,
                         current_user: Optional[User] = None) -> Tuple[Booking, Vehicle]:
    if not data.service_address or not data.customer_info.email or not data.customer_info.phone:
        raise ValidationError("Service address, email, and phone are required")
    contact_email = validate_email(data.customer_info.email)
    contact_phone = validate_phone(data.customer_info.phone)

    info = data.vehicle_info
    vin = info.vin.strip().upper() if info.vin and info.vin.strip() else None
    make, model, year = info.make, info.model, info.year
    if vin:
        decoded = decode_vin_or_raise(vin)
        make, model, year = decoded.make, decoded.model, decoded.year
        logger.info(f"VIN decoded: {make} {model} {year}")

    if not make or not model or not year:
        raise ValidationError("Vehicle make, model, and year are required")
    try:
        year = int(year)
    except (TypeError, ValueError):
        raise ValidationError("Vehicle year must be a number")

    customer = current_user or await user_service.get_user_by_email(db, contact_email)
    customer_id = customer.id if customer else None

    vehicle = await find_or_create_vehicle(db, make, model, year, vin=vin, customer_id=customer_id)

    booking = Booking(
        customer_id=customer_id,
        vehicle_id=vehicle.id,
        service_address=data.service_address.strip(),
        contact_email=contact_email,
        contact_phone=contact_phone,
        status=BookingStatus.PENDING,
        scheduled_date=parse_schedule(data.preferred_date, data.preferred_time),
        notes=data.notes,
        estimated_duration=DEFAULT_DURATION_MINUTES,
        price=calculate_price(make, model, year),
    )
    db.add(booking)
    await db.commit()

    logger.info(f"Created booking {booking.id} for {make} {model} {year} "
                f"(customer {customer_id or 'guest'}, {mask_email(contact_email)}) at ${booking.price}")
    return booking, vehicle


async def list_bookings(db: AsyncSession, user: User, status: Optional[BookingStatus] = None,
                        customer_id: Optional[int] = None) -> List[Booking]:
    """Staff see every booking; customers only their own."""
    query = select(Booking).order_by(Booking.created_at.desc(), Booking.id.desc())
    if not user.is_staff:
        customer_id = user.id
    if customer_id is not None:
        query = query.where(Booking.customer_id == customer_id)
    if status:
        query = query.where(Booking.status == status)
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_booking(db: AsyncSession, booking_id: int, user: User) -> Booking:
    booking = await load_booking(db, booking_id)
    _check_access(booking, user)
    return booking


async def update_status(db: AsyncSession, booking_id: int, status: BookingStatus,
                        technician_id: Optional[int] = None) -> Booking:
    booking = await load_booking(db, booking_id)

    if not can_transition(booking.status, status):
        raise InvalidStateError(
            f"Cannot change booking status from {booking.status.value} to {status.value}"
        )

    if technician_id is not None:
        technician = await db.get(Technician, technician_id)
        if not technician:
            raise NotFoundError("Technician not found")
        booking.technician_id = technician_id

    if status == BookingStatus.COMPLETED and booking.status != BookingStatus.COMPLETED:
        booking.completed_date = utcnow()
        if booking.technician_id:
            technician = await db.get(Technician, booking.technician_id)
            if technician:
                technician.total_jobs += 1

    previous = booking.status
    booking.status = status
    await db.commit()

    logger.info(f"Booking {booking.id}: {previous.value} -> {status.value}"
                + (f", technician {booking.technician_id}" if technician_id is not None else ""))
    return await load_booking(db, booking_id, refresh=True)


async def cancel_booking(db: AsyncSession, booking_id: int, user: User) -> Booking:
    booking = await load_booking(db, booking_id)
    _check_access(booking, user)

    if booking.status in (BookingStatus.IN_PROGRESS, BookingStatus.COMPLETED):
        raise InvalidStateError("Cannot cancel booking that is in progress or completed")
    if booking.status == BookingStatus.CANCELLED:
        raise InvalidStateError("Booking is already cancelled")

    booking.status = BookingStatus.CANCELLED
    await db.commit()
    logger.info(f"Booking {booking.id} cancelled by user {user.id}")
    return await load_booking(db, booking_id, refresh=True)
