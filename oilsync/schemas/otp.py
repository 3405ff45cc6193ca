"""
Pydantic schemas for OTP requests.
"""
from typing import Literal, Optional

from oilsync.models.otp import OTPPurpose
from oilsync.schemas.common import CamelModel


class SendOTPRequest(CamelModel):
    identifier: str
    type: Literal["email", "sms"]
    purpose: OTPPurpose


class VerifyOTPRequest(CamelModel):
    identifier: str
    code: str
    purpose: OTPPurpose


class ResetPasswordRequest(CamelModel):
    identifier: str
    new_password: str
    otp_code: str


class VerifyIdentifierRequest(CamelModel):
    """Email or phone verification with an OTP code."""
    identifier: str
    otp_code: str


class OTPSent(CamelModel):
    identifier: str
    type: str
    purpose: OTPPurpose
    expires_in_minutes: int


class OTPStats(CamelModel):
    total: int
    expired: int
    used: int
    active: int


class DevOTP(CamelModel):
    identifier: str
    purpose: OTPPurpose
    code: Optional[str] = None
