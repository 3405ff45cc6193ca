"""
User accounts: registration, login with lockout, sessions, passwords and
verification flags.
"""
import logging
import secrets
from dataclasses import dataclass
from datetime import timedelta
from typing import List, Optional

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from oilsync.config import Settings
from oilsync.errors import (
    AuthenticationError, ConflictError, NotFoundError, PermissionDeniedError, ValidationError,
)
from oilsync.logging_config import mask_email, mask_phone
from oilsync.models.otp import OTPPurpose
from oilsync.models.session import UserSession
from oilsync.models.user import User, UserRole
from oilsync.security import create_access_token, decode_access_token, hash_password, hash_token, verify_password
from oilsync.services import otp as otp_service
from oilsync.utils.time import utcnow
from oilsync.validation import (
    validate_email, validate_password, validate_phone, validate_required_fields,
)

logger = logging.getLogger(__name__)


@dataclass
class IssuedSession:
    token: str
    session: UserSession
    user: User


async def get_user_by_id(db: AsyncSession, user_id: int) -> Optional[User]:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_email(db: AsyncSession, email: Optional[str]) -> Optional[User]:
    if not email:
        return None
    result = await db.execute(select(User).where(User.email == email.strip().lower()))
    return result.scalar_one_or_none()


async def get_user_by_phone(db: AsyncSession, phone: str) -> Optional[User]:
    result = await db.execute(
        select(User).where(User.phone == validate_phone(phone)).order_by(User.id).limit(1)
    )
    return result.scalar_one_or_none()


async def _require_user(db: AsyncSession, user_id: int) -> User:
    user = await get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


# ==================== SESSIONS ====================

async def create_session(db: AsyncSession, user: User, settings: Settings,
                         user_agent: Optional[str] = None, ip_address: Optional[str] = None) -> IssuedSession:
    """Issue an access token backed by a new session row."""
    session_id = secrets.token_hex(16)
    expires_at = utcnow() + timedelta(minutes=settings.access_token_expire_minutes)
    token = create_access_token(user.id, session_id, expires_at, settings)

    session = UserSession(
        id=session_id,
        user_id=user.id,
        token_hash=hash_token(token),
        expires_at=expires_at,
        user_agent=(user_agent or "")[:512] or None,
        ip_address=ip_address,
    )
    db.add(session)
    await db.commit()
    return IssuedSession(token=token, session=session, user=user)


async def validate_token(db: AsyncSession, token: str, settings: Settings) -> Optional[User]:
    """
    The user a token belongs to, or None.

    The JWT must verify, its session must exist, be unrevoked, unexpired and
    carry the same token hash, and the user must still be active.
    """
    claims = decode_access_token(token, settings)
    if not claims or "sid" not in claims:
        return None

    result = await db.execute(
        select(UserSession).where(
            UserSession.id == claims["sid"],
            UserSession.token_hash == hash_token(token),
            UserSession.revoked.is_(False),
            UserSession.expires_at > utcnow(),
        )
    )
    session = result.scalar_one_or_none()
    if not session or str(session.user_id) != claims.get("sub"):
        return None

    user = await get_user_by_id(db, session.user_id)
    if not user or not user.is_active:
        return None
    return user


async def revoke_session(db: AsyncSession, token: str) -> bool:
    result = await db.execute(
        update(UserSession)
        .where(UserSession.token_hash == hash_token(token), UserSession.revoked.is_(False))
        .values(revoked=True)
    )
    await db.commit()
    return result.rowcount > 0


async def cleanup_expired_sessions(db: AsyncSession) -> int:
    result = await db.execute(
        delete(UserSession).where(or_(UserSession.expires_at < utcnow(), UserSession.revoked.is_(True)))
    )
    await db.commit()
    logger.info(f"Cleaned up {result.rowcount} expired sessions")
    return result.rowcount


# ==================== ACCOUNTS ====================

async def register_user(db: AsyncSession, data: dict, settings: Settings) -> User:
    validate_required_fields(data, {
        "first_name": "firstName",
        "last_name": "lastName",
        "email": "email",
        "phone": "phone",
        "password": "password",
    })
    email = validate_email(data["email"])
    phone = validate_phone(data["phone"])
    password = validate_password(data["password"])

    if await get_user_by_email(db, email):
        logger.warning(f"Registration rejected, email already registered: {mask_email(email)}")
        raise ConflictError("Email already registered")

    user = User(
        first_name=data["first_name"].strip(),
        last_name=data["last_name"].strip(),
        email=email,
        phone=phone,
        hashed_password=hash_password(password, settings.bcrypt_rounds),
        role=UserRole.CUSTOMER,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)

    logger.info(f"Registered user {user.id} ({mask_email(email)})")
    return user


async def authenticate(db: AsyncSession, email: Optional[str], password: Optional[str], settings: Settings) -> User:
    """
    Check credentials, applying the failed-attempt lockout.

    Raises AuthenticationError for bad credentials and PermissionDeniedError
    for locked or deactivated accounts.
    """
    if not email or not password:
        raise ValidationError("Email and password are required")
    email = validate_email(email)

    user = await get_user_by_email(db, email)
    if not user:
        logger.warning(f"Login failed for unknown email {mask_email(email)}")
        raise AuthenticationError("Invalid email or password")

    now = utcnow()
    if user.is_locked(now):
        minutes_remaining = max(1, int((user.locked_until - now).total_seconds() // 60))
        raise PermissionDeniedError(
            f"Account is locked due to too many failed login attempts. "
            f"Please try again in {minutes_remaining} minutes."
        )

    if not user.is_active:
        raise PermissionDeniedError("Account is deactivated. Please contact administrator.")

    if not verify_password(password, user.hashed_password):
        user.failed_login_attempts += 1
        if user.failed_login_attempts >= settings.max_login_attempts:
            user.locked_until = now + timedelta(minutes=settings.lockout_minutes)
            await db.commit()
            logger.warning(f"Locked account {user.id} after {user.failed_login_attempts} failed logins")
            raise PermissionDeniedError(
                f"Account locked due to too many failed login attempts. "
                f"Please try again in {settings.lockout_minutes} minutes."
            )
        await db.commit()
        remaining_attempts = settings.max_login_attempts - user.failed_login_attempts
        raise AuthenticationError(f"Invalid email or password. {remaining_attempts} attempts remaining.")

    user.failed_login_attempts = 0
    user.locked_until = None
    user.last_login = now
    await db.commit()
    logger.info(f"User {user.id} logged in")
    return user


async def change_password(db: AsyncSession, user: User, current_password: Optional[str],
                          new_password: Optional[str], settings: Settings) -> None:
    if not current_password or not new_password:
        raise ValidationError("Current password and new password are required")
    if not verify_password(current_password, user.hashed_password):
        raise AuthenticationError("Current password is incorrect")
    validate_password(new_password)
    if current_password == new_password:
        raise ValidationError("New password must be different from current password")

    user.hashed_password = hash_password(new_password, settings.bcrypt_rounds)
    await db.commit()
    logger.info(f"User {user.id} changed password")


async def reset_password(db: AsyncSession, identifier: str, new_password: str, otp_code: str,
                         settings: Settings) -> User:
    """Set a new password after a successful ``reset_password`` OTP check."""
    validate_password(new_password)
    verification = await otp_service.verify_otp(db, identifier, otp_code, OTPPurpose.RESET_PASSWORD, settings)
    if not verification.valid:
        raise ValidationError(verification.message)

    if "@" in identifier:
        user = await get_user_by_email(db, identifier)
    else:
        user = await get_user_by_phone(db, identifier)
    if not user:
        raise NotFoundError("User not found")

    user.hashed_password = hash_password(new_password, settings.bcrypt_rounds)
    user.failed_login_attempts = 0
    user.locked_until = None
    await db.commit()
    logger.info(f"Password reset for user {user.id}")
    return user


async def verify_email(db: AsyncSession, identifier: str, otp_code: str, settings: Settings) -> User:
    verification = await otp_service.verify_otp(db, identifier, otp_code, OTPPurpose.VERIFY_EMAIL, settings)
    if not verification.valid:
        raise ValidationError(verification.message)

    user = await get_user_by_email(db, identifier)
    if not user:
        raise NotFoundError("User not found")
    user.email_verified = True
    await db.commit()
    logger.info(f"Email verified for user {user.id} ({mask_email(user.email)})")
    return user


async def verify_phone(db: AsyncSession, identifier: str, otp_code: str, settings: Settings) -> User:
    verification = await otp_service.verify_otp(db, identifier, otp_code, OTPPurpose.VERIFY_PHONE, settings)
    if not verification.valid:
        raise ValidationError(verification.message)

    user = await get_user_by_phone(db, identifier)
    if not user:
        raise NotFoundError("User not found")
    user.phone_verified = True
    await db.commit()
    logger.info(f"Phone verified for user {user.id} ({mask_phone(user.phone)})")
    return user


# ==================== PROFILE ====================

async def update_profile(db: AsyncSession, user: User, changes: dict) -> User:
    """Apply profile edits. A new phone number has to be verified again."""
    if changes.get("first_name") is not None:
        if not changes["first_name"].strip():
            raise ValidationError("First name cannot be empty")
        user.first_name = changes["first_name"].strip()
    if changes.get("last_name") is not None:
        if not changes["last_name"].strip():
            raise ValidationError("Last name cannot be empty")
        user.last_name = changes["last_name"].strip()
    if changes.get("phone") is not None:
        phone = validate_phone(changes["phone"])
        if phone != user.phone:
            user.phone = phone
            user.phone_verified = False

    await db.commit()
    await db.refresh(user)
    return user


async def set_verification(db: AsyncSession, user_id: int, kind: str, verified: bool) -> User:
    if kind not in ("email", "phone"):
        raise ValidationError("type must be 'email' or 'phone'")
    user = await _require_user(db, user_id)
    if kind == "email":
        user.email_verified = verified
    else:
        user.phone_verified = verified
    await db.commit()
    await db.refresh(user)
    logger.info(f"{kind} verification for user {user.id} set to {verified}")
    return user


async def list_users(db: AsyncSession, role: Optional[UserRole] = None) -> List[User]:
    query = select(User).order_by(User.created_at.desc(), User.id.desc())
    if role:
        query = query.where(User.role == role)
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_user_stats(db: AsyncSession) -> dict:
    result = await db.execute(select(User.role, func.count(User.id)).group_by(User.role))
    by_role = {role: count for role, count in result.all()}

    verified = await db.execute(
        select(func.count(User.id)).where(User.email_verified.is_(True))
    )
    verified_count = verified.scalar_one()
    total = sum(by_role.values())

    return {
        "total_users": total,
        "customers": by_role.get(UserRole.CUSTOMER, 0),
        "technicians": by_role.get(UserRole.TECHNICIAN, 0),
        "admins": by_role.get(UserRole.ADMIN, 0),
        "verified": verified_count,
        "unverified": total - verified_count,
    }
