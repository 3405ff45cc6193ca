"""
Vehicle catalogue and customer vehicle models.
"""
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from oilsync.database import Base
from oilsync.utils.time import utcnow


class VehicleMake(Base):
    """Manufacturer offered in the vehicle selector."""

    __tablename__ = "vehicle_makes"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False)
    country = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)


class VehicleModel(Base):
    """Model line of a make."""

    __tablename__ = "vehicle_models"

    id = Column(String(64), primary_key=True)
    make_id = Column(String(64), ForeignKey("vehicle_makes.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    year_start = Column(Integer, nullable=False)
    year_end = Column(Integer, nullable=True)
    body_type = Column(String(255), nullable=False)
    engine_type = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)


class VehicleVariant(Base):
    """Trim/engine variant of a model for a given year."""

    __tablename__ = "vehicle_variants"

    id = Column(String(64), primary_key=True)
    model_id = Column(String(64), ForeignKey("vehicle_models.id", ondelete="CASCADE"), nullable=False, index=True)
    trim_level = Column(String(255), nullable=False)
    engine_size = Column(String(64), nullable=False)
    transmission = Column(String(64), nullable=False)
    drivetrain = Column(String(64), nullable=False)
    year = Column(Integer, nullable=False)


class Vehicle(Base):
    """Vehicle database model."""

    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    vin = Column(String(17), unique=True, nullable=True, index=True)
    make = Column(String(255), nullable=False)
    model = Column(String(255), nullable=False)
    year = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
