"""
One-time password model.
"""
from sqlalchemy import Boolean, Column, DateTime, Enum as SQLEnum, Integer, String
from oilsync.database import Base
from oilsync.utils.time import utcnow
import enum


class OTPPurpose(str, enum.Enum):
    """What an OTP code authorises."""
    LOGIN = "login"
    REGISTER = "register"
    RESET_PASSWORD = "reset_password"
    VERIFY_EMAIL = "verify_email"
    VERIFY_PHONE = "verify_phone"


class OTPCode(Base):
    """OTP code database model."""

    __tablename__ = "otp_codes"

    id = Column(Integer, primary_key=True, index=True)
    identifier = Column(String(255), nullable=False, index=True)
    code = Column(String(10), nullable=False)
    purpose = Column(
        SQLEnum(OTPPurpose, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    expires_at = Column(DateTime, nullable=False)
    attempts = Column(Integer, default=0, nullable=False)
    is_used = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
