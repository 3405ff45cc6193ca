"""
SQLAlchemy database models.
"""
from oilsync.models.user import User, UserRole
from oilsync.models.session import UserSession
from oilsync.models.otp import OTPCode, OTPPurpose
from oilsync.models.technician import Technician, TechnicianStatus
from oilsync.models.vehicle import Vehicle, VehicleMake, VehicleModel, VehicleVariant
from oilsync.models.booking import Booking, BookingStatus

__all__ = [
    "User", "UserRole", "UserSession", "OTPCode", "OTPPurpose",
    "Technician", "TechnicianStatus",
    "Vehicle", "VehicleMake", "VehicleModel", "VehicleVariant",
    "Booking", "BookingStatus",
]
