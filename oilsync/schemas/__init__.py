"""
Pydantic schemas for request/response validation.
"""
from oilsync.schemas.common import ApiResponse, CamelModel, MessageResponse
from oilsync.schemas.user import User, UserSummary, AuthResult
from oilsync.schemas.vehicle import Vehicle, VehicleMake, VehicleModel, VehicleVariant, DecodedVin
from oilsync.schemas.technician import Technician, TechnicianCreate
from oilsync.schemas.booking import Booking, BookingCreate, BookingWithDetails

__all__ = [
    "ApiResponse", "CamelModel", "MessageResponse",
    "User", "UserSummary", "AuthResult",
    "Vehicle", "VehicleMake", "VehicleModel", "VehicleVariant", "DecodedVin",
    "Technician", "TechnicianCreate",
    "Booking", "BookingCreate", "BookingWithDetails",
]
