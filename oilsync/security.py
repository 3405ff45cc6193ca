"""
Password hashing and JWT access tokens.
"""
import hashlib
from datetime import datetime
from typing import Optional

import bcrypt
import jwt

from oilsync.config import Settings
from oilsync.utils.time import utcnow


def hash_password(password: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def hash_token(token: str) -> str:
    """SHA-256 of a token, the form in which sessions store it."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def create_access_token(user_id: int, session_id: str, expires_at: datetime, settings: Settings) -> str:
    payload = {
        "sub": str(user_id),
        "sid": session_id,
        "exp": expires_at,
        "iat": utcnow(),
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: Settings) -> Optional[dict]:
    """Decoded claims, or None when the token is malformed, forged or expired."""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except jwt.InvalidTokenError:
        return None
