"""
Technician roster.
"""
import logging
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from oilsync.errors import ConflictError, NotFoundError, ValidationError
from oilsync.models.booking import Booking
from oilsync.models.technician import Technician, TechnicianStatus
from oilsync.validation import validate_phone

logger = logging.getLogger(__name__)

DEFAULT_SPECIALIZATIONS = ["Oil Change"]


def parse_status(value: Optional[str]) -> TechnicianStatus:
    try:
        return TechnicianStatus(value)
    except ValueError:
        raise ValidationError("Invalid status. Must be 'active', 'inactive', or 'busy'")


async def list_technicians(db: AsyncSession, status: Optional[str] = None) -> List[Technician]:
    """Technicians ranked by rating, then experience."""
    query = select(Technician).order_by(
        Technician.rating.desc(), Technician.total_jobs.desc(), Technician.id
    )
    if status:
        query = query.where(Technician.status == parse_status(status))
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_technician(db: AsyncSession, technician_id: int) -> Technician:
    technician = await db.get(Technician, technician_id)
    if not technician:
        raise NotFoundError("Technician not found")
    return technician


async def create_technician(db: AsyncSession, data: dict, user_id: Optional[int] = None) -> Technician:
    email = data["email"].strip().lower()
    result = await db.execute(select(Technician).where(Technician.email == email))
    if result.scalar_one_or_none():
        raise ConflictError("Email already registered")

    technician = Technician(
        user_id=user_id,
        first_name=data["first_name"].strip(),
        last_name=data["last_name"].strip(),
        email=email,
        phone=validate_phone(data["phone"]),
        status=TechnicianStatus.ACTIVE,
        specializations=list(data.get("specializations") or DEFAULT_SPECIALIZATIONS),
        rating=data.get("rating", 0.0),
        total_jobs=data.get("total_jobs", 0),
        hourly_rate=data.get("hourly_rate"),
        bio=data.get("bio"),
    )
    db.add(technician)
    await db.commit()
    await db.refresh(technician)

    logger.info(f"Created technician {technician.id}: {technician.first_name} {technician.last_name}")
    return technician


async def update_status(db: AsyncSession, technician_id: int, status: Optional[str]) -> Technician:
    technician = await get_technician(db, technician_id)
    technician.status = parse_status(status)
    await db.commit()
    await db.refresh(technician)
    logger.info(f"Technician {technician.id} status -> {technician.status.value}")
    return technician


async def delete_technician(db: AsyncSession, technician_id: int) -> None:
    """Remove a technician. Their bookings stay, unassigned."""
    technician = await get_technician(db, technician_id)
    await db.execute(
        update(Booking).where(Booking.technician_id == technician_id).values(technician_id=None)
    )
    await db.delete(technician)
    await db.commit()
    logger.info(f"Deleted technician {technician_id}")
