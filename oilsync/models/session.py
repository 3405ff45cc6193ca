"""
Login session model. One row per issued access token.
"""
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from oilsync.database import Base
from oilsync.utils.time import utcnow


class UserSession(Base):
    """User session database model."""

    __tablename__ = "user_sessions"

    id = Column(String(64), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    token_hash = Column(String(64), nullable=False, index=True)
    expires_at = Column(DateTime, nullable=False)
    user_agent = Column(String(512), nullable=True)
    ip_address = Column(String(45), nullable=True)
    revoked = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
