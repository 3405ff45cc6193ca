"""
Pydantic schemas for the vehicle catalogue, customer vehicles and VIN decoding.
"""
from datetime import datetime
from typing import Optional

from oilsync.schemas.common import CamelModel


class VehicleMake(CamelModel):
    id: str
    name: str
    country: str
    is_active: bool = True


class VehicleModel(CamelModel):
    id: str
    make_id: str
    name: str
    year_start: int
    year_end: Optional[int] = None
    body_type: str
    engine_type: str
    is_active: bool = True


class VehicleVariant(CamelModel):
    id: str
    model_id: str
    trim_level: str
    engine_size: str
    transmission: str
    drivetrain: str
    year: int


class Vehicle(CamelModel):
    """Schema for vehicle responses."""
    id: int
    customer_id: Optional[int] = None
    vin: Optional[str] = None
    make: str
    model: str
    year: int
    created_at: datetime
    updated_at: Optional[datetime] = None


class DecodedVin(CamelModel):
    vin: str
    make: str
    model: str
    year: int
    manufacturer_group: Optional[str] = None


class DecodeVinRequest(CamelModel):
    vin: str


class DecodeVinResult(CamelModel):
    decoded: DecodedVin


class ConnectionStatus(CamelModel):
    success: bool
    backend: str
    response_time_ms: float
    error: Optional[str] = None
