"""
Input validation for identities: email, phone and password.
"""
import re
from typing import Optional

from oilsync.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}$")
MIN_PASSWORD_LENGTH = 8


def is_valid_email(email: Optional[str]) -> bool:
    return bool(email and EMAIL_PATTERN.match(email.strip()))


def is_valid_phone(phone: Optional[str]) -> bool:
    return bool(phone and PHONE_PATTERN.match(phone.strip()))


def normalize_phone(phone: str) -> str:
    """Canonical ``(555) 123-4567`` form of a North American number."""
    digits = re.sub(r"\D", "", phone)
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"


def validate_email(email: Optional[str]) -> str:
    """Validate email format"""
    if not email or not email.strip():
        raise ValidationError("Email is required")
    if not is_valid_email(email):
        raise ValidationError("Invalid email format")
    return email.strip().lower()


def validate_phone(phone: Optional[str]) -> str:
    """Validate phone number format"""
    if not phone or not phone.strip():
        raise ValidationError("Phone number is required")
    if not is_valid_phone(phone):
        raise ValidationError("Invalid phone number format")
    return normalize_phone(phone.strip())


def validate_password(password: Optional[str]) -> str:
    if not password:
        raise ValidationError("Password is required")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
    return password


def validate_required_fields(data: dict, required_fields: dict) -> None:
    """Check that every field is present; ``required_fields`` maps keys to display names."""
    missing = [label for key, label in required_fields.items() if not data.get(key)]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def normalize_identifier(identifier: Optional[str]) -> str:
    """Lower-cased email or canonical phone, whichever ``identifier`` is."""
    identifier = (identifier or "").strip()
    if "@" in identifier:
        return identifier.lower()
    if is_valid_phone(identifier):
        return normalize_phone(identifier)
    return identifier
