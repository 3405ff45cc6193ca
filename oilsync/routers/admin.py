"""
Admin routes: dashboard, users, seeding and maintenance.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from oilsync.auth import get_optional_user, require_admin
from oilsync.config import Settings
from oilsync.database import get_db
from oilsync.dependencies import get_app_settings
from oilsync.errors import AuthenticationError, PermissionDeniedError
from oilsync.models.user import User, UserRole
from oilsync.schemas.admin import CleanupResult, DashboardData, SeedResult, UserStats
from oilsync.schemas.common import ApiResponse
from oilsync.schemas.otp import OTPStats
from oilsync.schemas.user import User as UserSchema
from oilsync.services import admin as admin_service
from oilsync.services import otp as otp_service
from oilsync.services import users as user_service

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/dashboard", response_model=ApiResponse[DashboardData])
async def get_dashboard(
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """
    Get dashboard statistics.
    """
    dashboard = await admin_service.get_dashboard(db)
    return {"message": "Dashboard data retrieved successfully", "data": dashboard}


@router.get("/users", response_model=ApiResponse[List[UserSchema]])
async def get_users(
    role: Optional[UserRole] = None,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    users = await user_service.list_users(db, role)
    return {"message": "Users retrieved successfully", "data": users}


@router.get("/users/stats", response_model=ApiResponse[UserStats])
async def get_user_stats(
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    stats = await user_service.get_user_stats(db)
    return {"message": "User statistics retrieved successfully", "data": stats}


@router.post("/seed-accounts", response_model=ApiResponse[SeedResult])
async def seed_accounts(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    current_user: Optional[User] = Depends(get_optional_user),
):
    """
    Create the default admin and technician accounts.

    Admins may always run this. Before any admin exists it is also open to
    anonymous callers, except in production.
    """
    if not current_user or current_user.role != UserRole.ADMIN:
        if settings.is_production or await admin_service.admin_exists(db):
            if not current_user:
                raise AuthenticationError("Authentication required")
            raise PermissionDeniedError("Admin access required")

    result = await admin_service.seed_default_accounts(db, settings)
    return {"message": "Default accounts seeded successfully", "data": result}


@router.get("/otp-stats", response_model=ApiResponse[OTPStats])
async def get_otp_stats(
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    stats = await otp_service.get_otp_stats(db)
    return {"message": "OTP statistics retrieved successfully", "data": stats}


@router.post("/maintenance/cleanup", response_model=ApiResponse[CleanupResult])
async def cleanup(
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Delete expired OTP codes and dead sessions."""
    result = {
        "expired_otps": await otp_service.cleanup_expired_otps(db),
        "expired_sessions": await user_service.cleanup_expired_sessions(db),
    }
    return {"message": "Cleanup completed", "data": result}
