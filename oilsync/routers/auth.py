"""
Authentication routes: accounts, sessions and OTP verification.
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from oilsync.auth import get_current_user
from oilsync.config import Settings
from oilsync.database import get_db
from oilsync.dependencies import get_app_settings, get_notifier
from oilsync.errors import ValidationError
from oilsync.models.user import User
from oilsync.schemas.common import ApiResponse, MessageResponse
from oilsync.schemas.otp import (
    OTPSent, ResetPasswordRequest, SendOTPRequest, VerifyIdentifierRequest, VerifyOTPRequest,
)
from oilsync.schemas.user import AuthResult, ChangePasswordRequest, LoginRequest, RegisterRequest
from oilsync.schemas.user import User as UserSchema
from oilsync.services import otp as otp_service
from oilsync.services import users as user_service
from oilsync.services.notifications import Notifier

router = APIRouter(prefix="/auth", tags=["authentication"])


async def _issue(request: Request, db: AsyncSession, user: User, settings: Settings) -> dict:
    issued = await user_service.create_session(
        db, user, settings,
        user_agent=request.headers.get("user-agent"),
        ip_address=request.client.host if request.client else None,
    )
    return {"token": issued.token, "expires_at": issued.session.expires_at, "user": user}


@router.post("/register", response_model=ApiResponse[AuthResult], status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    request: Request,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """
    Register a new customer account and sign it in.
    """
    user = await user_service.register_user(db, payload.model_dump(), settings)
    data = await _issue(request, db, user, settings)
    return {"success": True, "message": "Registration successful", "data": data}


@router.post("/login", response_model=ApiResponse[AuthResult])
async def login(
    payload: LoginRequest,
    request: Request,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """
    Login with email and password to get an access token.
    """
    user = await user_service.authenticate(db, payload.email, payload.password, settings)
    data = await _issue(request, db, user, settings)
    return {"success": True, "message": "Login successful", "data": data}


@router.post("/logout", response_model=MessageResponse)
async def logout(
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Revoke the session behind the presented token."""
    await user_service.revoke_session(db, request.state.session_token)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=ApiResponse[UserSchema])
async def read_users_me(current_user: User = Depends(get_current_user)):
    """
    Get current user information.
    """
    return {"data": current_user}


@router.post("/change-password", response_model=MessageResponse)
async def change_password(
    payload: ChangePasswordRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    current_user: User = Depends(get_current_user),
):
    await user_service.change_password(
        db, current_user, payload.current_password, payload.new_password, settings
    )
    return {"message": "Password changed successfully"}


@router.post("/send-otp", response_model=ApiResponse[OTPSent])
async def send_otp(
    payload: SendOTPRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
    notifier: Notifier = Depends(get_notifier),
):
    """
    Send a one-time code by email or SMS.
    """
    await otp_service.send_otp(db, notifier, payload.identifier, payload.type, payload.purpose, settings)
    return {
        "message": "OTP sent successfully",
        "data": {
            "identifier": payload.identifier,
            "type": payload.type,
            "purpose": payload.purpose,
            "expires_in_minutes": settings.otp_expire_minutes,
        },
    }


@router.post("/verify-otp", response_model=MessageResponse)
async def verify_otp(
    payload: VerifyOTPRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    verification = await otp_service.verify_otp(
        db, payload.identifier, payload.code, payload.purpose, settings
    )
    if not verification.valid:
        raise ValidationError(verification.message)
    return {"message": verification.message}


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(
    payload: ResetPasswordRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """
    Reset a forgotten password with a ``reset_password`` OTP.
    """
    await user_service.reset_password(db, payload.identifier, payload.new_password, payload.otp_code, settings)
    return {"message": "Password reset successful"}


@router.post("/verify-email", response_model=ApiResponse[UserSchema])
async def verify_email(
    payload: VerifyIdentifierRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    user = await user_service.verify_email(db, payload.identifier, payload.otp_code, settings)
    return {"message": "Email verified successfully", "data": user}


@router.post("/verify-phone", response_model=ApiResponse[UserSchema])
async def verify_phone(
    payload: VerifyIdentifierRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    user = await user_service.verify_phone(db, payload.identifier, payload.otp_code, settings)
    return {"message": "Phone verified successfully", "data": user}
