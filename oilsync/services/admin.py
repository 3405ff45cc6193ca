"""
Admin dashboard statistics and default account seeding.
"""
import logging
from datetime import datetime, time, timedelta
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from oilsync.config import Settings
from oilsync.errors import ConflictError
from oilsync.models.booking import Booking, BookingStatus
from oilsync.models.technician import Technician
from oilsync.models.user import User, UserRole
from oilsync.security import hash_password
from oilsync.services import technicians as technician_service
from oilsync.services import users as user_service
from oilsync.utils.time import utcnow

logger = logging.getLogger(__name__)

DEFAULT_TECHNICIANS = [
    {
        "first_name": "John",
        "last_name": "Smith",
        "email": "john@oilsync.com",
        "phone": "(555) 123-4567",
        "specializations": ["Oil Change", "Filter Replacement", "Basic Maintenance"],
        "rating": 4.8,
        "total_jobs": 156,
        "hourly_rate": 25.0,
        "bio": "Experienced automotive technician with 5+ years in mobile service.",
    },
    {
        "first_name": "Sarah",
        "last_name": "Johnson",
        "email": "sarah@oilsync.com",
        "phone": "(555) 987-6543",
        "specializations": ["Oil Change", "Synthetic Oil", "Diesel Service"],
        "rating": 4.9,
        "total_jobs": 203,
        "hourly_rate": 28.0,
        "bio": "Certified technician specializing in modern vehicle maintenance.",
    },
]


def _day_bounds(now: Optional[datetime] = None) -> tuple[datetime, datetime]:
    start = datetime.combine((now or utcnow()).date(), time.min)
    return start, start + timedelta(days=1)


async def get_dashboard(db: AsyncSession, now: Optional[datetime] = None) -> dict:
    """Everything the admin dashboard shows on one screen."""
    day_start, day_end = _day_bounds(now)

    today_result = await db.execute(
        select(Booking)
        .where(Booking.scheduled_date >= day_start, Booking.scheduled_date < day_end)
        .order_by(Booking.scheduled_date)
    )
    pending_result = await db.execute(
        select(Booking)
        .where(Booking.status == BookingStatus.PENDING)
        .order_by(Booking.scheduled_date)
    )
    customers_result = await db.execute(
        select(User)
        .where(User.role == UserRole.CUSTOMER)
        .order_by(User.created_at.desc(), User.id.desc())
        .limit(5)
    )

    total_bookings = (await db.execute(select(func.count(Booking.id)))).scalar_one()
    completed_today = (await db.execute(
        select(func.count(Booking.id)).where(
            Booking.status == BookingStatus.COMPLETED,
            Booking.completed_date >= day_start,
            Booking.completed_date < day_end,
        )
    )).scalar_one()
    revenue = (await db.execute(
        select(func.coalesce(func.sum(Booking.price), 0.0)).where(Booking.status == BookingStatus.COMPLETED)
    )).scalar_one()
    active_customers = (await db.execute(
        select(func.count(func.distinct(Booking.customer_id))).where(
            Booking.customer_id.is_not(None),
            Booking.status != BookingStatus.CANCELLED,
        )
    )).scalar_one()

    return {
        "today_bookings": list(today_result.scalars().all()),
        "pending_bookings": list(pending_result.scalars().all()),
        "technicians": await technician_service.list_technicians(db),
        "recent_customers": list(customers_result.scalars().all()),
        "stats": {
            "total_bookings": total_bookings,
            "completed_today": completed_today,
            "revenue": round(float(revenue), 2),
            "active_customers": active_customers,
        },
    }


async def admin_exists(db: AsyncSession) -> bool:
    result = await db.execute(select(func.count(User.id)).where(User.role == UserRole.ADMIN))
    return result.scalar_one() > 0


async def _ensure_user(db: AsyncSession, email: str, password: str, role: UserRole, settings: Settings,
                       first_name: str, last_name: str, phone: Optional[str] = None) -> tuple[User, bool]:
    user = await user_service.get_user_by_email(db, email)
    if user:
        if user.role != role:
            raise ConflictError(f"Seed account {email} is already registered as a {user.role.value}")
        return user, False

    user = User(
        first_name=first_name,
        last_name=last_name,
        email=email.lower(),
        phone=phone,
        hashed_password=hash_password(password, settings.bcrypt_rounds),
        role=role,
        email_verified=True,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user, True


async def seed_default_accounts(db: AsyncSession, settings: Settings) -> dict:
    """
    Create the admin account and the default technicians if they are missing.

    Safe to run repeatedly; existing accounts are left untouched.
    """
    accounts = []
    _, admin_created = await _ensure_user(
        db, settings.admin_email, settings.admin_password, UserRole.ADMIN, settings,
        first_name="Admin", last_name="User",
    )
    accounts.append(settings.admin_email)

    technicians_created = 0
    for data in DEFAULT_TECHNICIANS:
        user, _ = await _ensure_user(
            db, data["email"], settings.technician_password, UserRole.TECHNICIAN, settings,
            first_name=data["first_name"], last_name=data["last_name"], phone=data["phone"],
        )
        accounts.append(data["email"])

        result = await db.execute(select(Technician).where(Technician.email == data["email"]))
        if result.scalar_one_or_none():
            continue
        await technician_service.create_technician(db, data, user_id=user.id)
        technicians_created += 1

    logger.info(f"Seeded default accounts (admin created: {admin_created}, "
                f"technicians created: {technicians_created})")
    return {
        "admin_created": admin_created,
        "technicians_created": technicians_created,
        "accounts": accounts,
    }
