"""
Pydantic schemas for Technician.
"""
from datetime import datetime
from pydantic import EmailStr
from typing import List, Optional

from oilsync.models.technician import TechnicianStatus
from oilsync.schemas.common import CamelModel


class TechnicianCreate(CamelModel):
    """Schema for creating a technician."""
    first_name: str
    last_name: str
    email: EmailStr
    phone: str
    specializations: Optional[List[str]] = None
    hourly_rate: Optional[float] = None
    bio: Optional[str] = None


class TechnicianStatusUpdate(CamelModel):
    status: str


class Technician(CamelModel):
    """Schema for technician responses."""
    id: int
    user_id: Optional[int] = None
    first_name: str
    last_name: str
    email: str
    phone: str
    status: TechnicianStatus
    specializations: List[str] = []
    rating: float
    total_jobs: int
    hourly_rate: Optional[float] = None
    bio: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
