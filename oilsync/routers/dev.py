"""
Development helpers. Every route here answers 404 in production.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from oilsync.config import Settings
from oilsync.database import get_db
from oilsync.dependencies import get_app_settings
from oilsync.errors import NotFoundError
from oilsync.models.otp import OTPPurpose
from oilsync.schemas.common import ApiResponse
from oilsync.schemas.otp import DevOTP
from oilsync.services import otp as otp_service


async def require_non_production(settings: Settings = Depends(get_app_settings)) -> Settings:
    if settings.is_production:
        raise NotFoundError("Not available in production")
    return settings


router = APIRouter(prefix="/dev", tags=["dev"], dependencies=[Depends(require_non_production)])


@router.get("/config")
async def show_config(settings: Settings = Depends(get_app_settings)):
    """Which integrations are configured. Never returns the secrets themselves."""
    return {
        "success": True,
        "data": {
            "environment": settings.environment,
            "database": {"backend": settings.database_backend},
            "email": {
                "configured": settings.email_configured,
                "server": bool(settings.mail_server),
                "username": bool(settings.mail_username),
                "password": bool(settings.mail_password),
                "port": settings.mail_port,
            },
            "sms": {
                "configured": settings.sms_configured,
                "accountSid": bool(settings.twilio_account_sid),
                "authToken": bool(settings.twilio_auth_token),
                "phoneNumber": bool(settings.twilio_phone_number),
            },
            "auth": {"secretKeyIsDefault": settings.secret_key == Settings.model_fields["secret_key"].default},
        },
    }


@router.get("/otp", response_model=ApiResponse[DevOTP])
async def get_latest_otp(
    identifier: str,
    purpose: OTPPurpose,
    db: AsyncSession = Depends(get_db),
):
    """
    Latest active OTP for an identifier, so codes can be used without email
    or SMS set up.
    """
    code = await otp_service.latest_active_code(db, identifier, purpose)
    message = "Active OTP found" if code else "No active OTP"
    return {"message": message, "data": {"identifier": identifier, "purpose": purpose, "code": code}}
