"""
Technician model for database.
"""
from sqlalchemy import JSON, Column, DateTime, Enum as SQLEnum, Float, ForeignKey, Integer, String, Text
from oilsync.database import Base
from oilsync.utils.time import utcnow
import enum


class TechnicianStatus(str, enum.Enum):
    """Technician availability."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    BUSY = "busy"


class Technician(Base):
    """Technician database model."""

    __tablename__ = "technicians"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, unique=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    phone = Column(String(50), nullable=False)
    status = Column(
        SQLEnum(TechnicianStatus, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        default=TechnicianStatus.ACTIVE,
        nullable=False,
    )
    specializations = Column(JSON, default=list, nullable=False)
    rating = Column(Float, default=0.0, nullable=False)
    total_jobs = Column(Integer, default=0, nullable=False)
    hourly_rate = Column(Float, nullable=True)
    bio = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
