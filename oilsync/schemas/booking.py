"""
Pydantic schemas for Booking.
"""
from datetime import datetime
from typing import Optional, Union

from oilsync.models.booking import BookingStatus
from oilsync.schemas.common import CamelModel
from oilsync.schemas.technician import Technician
from oilsync.schemas.user import UserSummary
from oilsync.schemas.vehicle import Vehicle


class VehicleInfo(CamelModel):
    vin: Optional[str] = None
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[Union[int, str]] = None


class CustomerInfo(CamelModel):
    phone: Optional[str] = None
    email: Optional[str] = None


class BookingCreate(CamelModel):
    """Schema for creating a booking. Anonymous guests may book too."""
    vehicle_info: VehicleInfo = VehicleInfo()
    service_address: Optional[str] = None
    customer_info: CustomerInfo = CustomerInfo()
    notes: Optional[str] = None
    preferred_date: Optional[str] = None
    preferred_time: Optional[str] = None


class BookingStatusUpdate(CamelModel):
    status: BookingStatus
    technician_id: Optional[int] = None


class Booking(CamelModel):
    """Schema for booking responses."""
    id: int
    customer_id: Optional[int] = None
    vehicle_id: int
    technician_id: Optional[int] = None
    service_address: str
    contact_email: str
    contact_phone: str
    status: BookingStatus
    scheduled_date: datetime
    completed_date: Optional[datetime] = None
    notes: Optional[str] = None
    estimated_duration: int
    price: float
    created_at: datetime
    updated_at: Optional[datetime] = None


class BookingWithDetails(Booking):
    """Booking with its vehicle, customer and technician embedded."""
    vehicle: Optional[Vehicle] = None
    customer: Optional[UserSummary] = None
    technician: Optional[Technician] = None


class BookingCreated(CamelModel):
    booking: Booking
    vehicle: Vehicle


class BookingDetail(CamelModel):
    booking: Booking
    vehicle: Optional[Vehicle] = None
    customer: Optional[UserSummary] = None
