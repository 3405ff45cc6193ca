"""
Pydantic schemas for the admin dashboard and maintenance endpoints.
"""
from typing import List

from oilsync.schemas.booking import BookingWithDetails
from oilsync.schemas.common import CamelModel
from oilsync.schemas.technician import Technician
from oilsync.schemas.user import User


class DashboardStats(CamelModel):
    total_bookings: int
    completed_today: int
    revenue: float
    active_customers: int


class DashboardData(CamelModel):
    today_bookings: List[BookingWithDetails]
    pending_bookings: List[BookingWithDetails]
    technicians: List[Technician]
    recent_customers: List[User]
    stats: DashboardStats


class UserStats(CamelModel):
    total_users: int
    customers: int
    technicians: int
    admins: int
    verified: int
    unverified: int


class SeedResult(CamelModel):
    admin_created: bool
    technicians_created: int
    accounts: List[str]


class CleanupResult(CamelModel):
    expired_otps: int
    expired_sessions: int
