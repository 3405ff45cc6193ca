"""
Technician routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from oilsync.auth import require_admin
from oilsync.database import get_db
from oilsync.models.user import User
from oilsync.schemas.common import ApiResponse, MessageResponse
from oilsync.schemas.technician import Technician, TechnicianCreate, TechnicianStatusUpdate
from oilsync.services import technicians as technician_service

router = APIRouter(prefix="/technicians", tags=["technicians"])


@router.get("", response_model=ApiResponse[List[Technician]])
async def get_technicians(
    status: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    """
    Get technicians, best rated first.
    """
    technicians = await technician_service.list_technicians(db, status)
    return {"message": "Technicians retrieved successfully", "data": technicians}


@router.get("/{technician_id}", response_model=ApiResponse[Technician])
async def get_technician(technician_id: int, db: AsyncSession = Depends(get_db)):
    technician = await technician_service.get_technician(db, technician_id)
    return {"message": "Technician retrieved successfully", "data": technician}


@router.post("", response_model=ApiResponse[Technician], status_code=status.HTTP_201_CREATED)
async def create_technician(
    technician: TechnicianCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """
    Add a technician to the roster.
    """
    db_technician = await technician_service.create_technician(db, technician.model_dump())
    return {"message": "Technician created successfully", "data": db_technician}


@router.patch("/{technician_id}/status", response_model=ApiResponse[Technician])
async def update_technician_status(
    technician_id: int,
    update: TechnicianStatusUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    technician = await technician_service.update_status(db, technician_id, update.status)
    return {"message": "Technician status updated successfully", "data": technician}


@router.delete("/{technician_id}", response_model=MessageResponse)
async def delete_technician(
    technician_id: int,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin),
):
    """
    Delete a technician. Their past bookings are kept, unassigned.
    """
    await technician_service.delete_technician(db, technician_id)
    return {"message": "Technician deleted successfully"}
