"""
Pydantic schemas for User, Authentication and Profile.
"""
from datetime import datetime
from typing import Literal, Optional

from oilsync.models.user import UserRole
from oilsync.schemas.common import CamelModel


class User(CamelModel):
    """Schema for user responses."""
    id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    role: UserRole
    email_verified: bool
    phone_verified: bool
    is_active: bool = True
    last_login: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class UserSummary(CamelModel):
    """Customer details nested in booking responses."""
    id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None


class RegisterRequest(CamelModel):
    """Schema for registration. Field checks happen in the user service."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(CamelModel):
    """Schema for login request."""
    email: Optional[str] = None
    password: Optional[str] = None


class AuthResult(CamelModel):
    """Token plus the user it was issued for."""
    token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: User


class ChangePasswordRequest(CamelModel):
    current_password: Optional[str] = None
    new_password: Optional[str] = None


class ProfileUpdate(CamelModel):
    """Schema for updating the current user's profile."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None


class VerificationUpdate(CamelModel):
    """Admin override of a user's verification flags."""
    user_id: int
    type: Literal["email", "phone"]
    verified: bool = True
