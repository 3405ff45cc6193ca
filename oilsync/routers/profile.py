"""
Profile routes for the signed-in user.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from oilsync.auth import get_current_user, require_admin
from oilsync.database import get_db
from oilsync.models.user import User
from oilsync.schemas.common import ApiResponse
from oilsync.schemas.user import ProfileUpdate, VerificationUpdate
from oilsync.schemas.user import User as UserSchema
from oilsync.services import users as user_service

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ApiResponse[UserSchema])
async def get_profile(current_user: User = Depends(get_current_user)):
    return {"message": "Profile fetched successfully", "data": current_user}


@router.patch("", response_model=ApiResponse[UserSchema])
async def update_profile(
    profile_update: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Update name or phone. Changing the phone number clears its verification.
    """
    user = await user_service.update_profile(db, current_user, profile_update.model_dump(exclude_unset=True))
    return {"message": "Profile updated successfully", "data": user}


@router.post("/verification", response_model=ApiResponse[UserSchema])
async def update_verification_status(
    update: VerificationUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """Manually mark a user's email or phone as (un)verified."""
    user = await user_service.set_verification(db, update.user_id, update.type, update.verified)
    return {"message": f"{update.type} verification status updated successfully", "data": user}
