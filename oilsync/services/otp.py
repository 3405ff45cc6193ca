"""
One-time password issuing and verification.
"""
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from oilsync.config import Settings
from oilsync.errors import DeliveryError, ValidationError
from oilsync.logging_config import mask_identifier
from oilsync.models.otp import OTPCode, OTPPurpose
from oilsync.services.notifications import Notifier
from oilsync.utils.time import utcnow
from oilsync.validation import normalize_identifier, validate_email, validate_phone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OTPVerification:
    valid: bool
    message: str


def generate_code() -> str:
    """Six digit numeric code, 100000-999999."""
    return str(100000 + secrets.randbelow(900000))


async def create_otp(db: AsyncSession, identifier: str, purpose: OTPPurpose,
                     settings: Settings) -> tuple[str, datetime]:
    """
    Issue a new code for (identifier, purpose).

    Any earlier codes for the same pair are discarded, so only the newest code
    can ever verify.
    """
    identifier = normalize_identifier(identifier)
    code = generate_code()
    expires_at = utcnow() + timedelta(minutes=settings.otp_expire_minutes)

    await db.execute(
        delete(OTPCode).where(OTPCode.identifier == identifier, OTPCode.purpose == purpose)
    )
    db.add(OTPCode(identifier=identifier, code=code, purpose=purpose, expires_at=expires_at))
    await db.commit()

    logger.info(f"Created {purpose.value} OTP for {mask_identifier(identifier)}, "
                f"expires in {settings.otp_expire_minutes} minutes")
    return code, expires_at


async def verify_otp(db: AsyncSession, identifier: str, code: str, purpose: OTPPurpose,
                     settings: Settings) -> OTPVerification:
    identifier = normalize_identifier(identifier)
    masked = mask_identifier(identifier)

    result = await db.execute(
        select(OTPCode)
        .where(OTPCode.identifier == identifier, OTPCode.purpose == purpose, OTPCode.is_used.is_(False))
        .order_by(OTPCode.created_at.desc(), OTPCode.id.desc())
        .limit(1)
    )
    otp = result.scalar_one_or_none()

    if not otp:
        logger.warning(f"OTP verification failed for {masked}: no OTP found")
        return OTPVerification(False, "No OTP found or OTP expired")

    if utcnow() > otp.expires_at:
        logger.warning(f"OTP verification failed for {masked}: expired")
        await db.delete(otp)
        await db.commit()
        return OTPVerification(False, "OTP expired")

    if otp.attempts >= settings.otp_max_attempts:
        logger.warning(f"OTP verification failed for {masked}: too many attempts")
        await db.delete(otp)
        await db.commit()
        return OTPVerification(False, "Too many failed attempts")

    if otp.code != (code or "").strip():
        logger.warning(f"OTP verification failed for {masked}: invalid code")
        otp.attempts += 1
        await db.commit()
        return OTPVerification(False, "Invalid OTP code")

    otp.is_used = True
    await db.commit()
    logger.info(f"OTP verified for {masked} ({purpose.value})")
    return OTPVerification(True, "OTP verified successfully")


async def cleanup_expired_otps(db: AsyncSession) -> int:
    result = await db.execute(delete(OTPCode).where(OTPCode.expires_at < utcnow()))
    await db.commit()
    logger.info(f"Cleaned up {result.rowcount} expired OTPs")
    return result.rowcount


async def get_otp_stats(db: AsyncSession) -> dict:
    now = utcnow()

    async def count(*conditions) -> int:
        query = select(func.count(OTPCode.id))
        if conditions:
            query = query.where(*conditions)
        result = await db.execute(query)
        return result.scalar_one()

    return {
        "total": await count(),
        "expired": await count(OTPCode.expires_at < now),
        "used": await count(OTPCode.is_used.is_(True)),
        "active": await count(OTPCode.expires_at > now, OTPCode.is_used.is_(False)),
    }


async def latest_active_code(db: AsyncSession, identifier: str, purpose: OTPPurpose) -> Optional[str]:
    """Most recent unexpired, unused code. Development helper only."""
    result = await db.execute(
        select(OTPCode.code)
        .where(
            OTPCode.identifier == normalize_identifier(identifier),
            OTPCode.purpose == purpose,
            OTPCode.is_used.is_(False),
            OTPCode.expires_at > utcnow(),
        )
        .order_by(OTPCode.created_at.desc(), OTPCode.id.desc())
        .limit(1)
    )
    return result.scalar_one_or_none()


async def send_otp(db: AsyncSession, notifier: Notifier, identifier: str, channel: str,
                   purpose: OTPPurpose, settings: Settings) -> datetime:
    """Create a code and deliver it by ``email`` or ``sms``. Returns its expiry."""
    if channel == "email":
        identifier = validate_email(identifier)
    elif channel == "sms":
        identifier = validate_phone(identifier)
    else:
        raise ValidationError("type must be 'email' or 'sms'")

    code, expires_at = await create_otp(db, identifier, purpose, settings)
    if channel == "email":
        sent = await notifier.send_email_otp(identifier, code, purpose)
    else:
        sent = await notifier.send_sms_otp(identifier, code, purpose)

    if not sent:
        raise DeliveryError("Failed to send OTP")
    return expires_at
