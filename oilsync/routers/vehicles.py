"""
Vehicle catalogue and VIN decoding routes.
"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from oilsync.database import check_connection, get_db
from oilsync.schemas.common import ApiResponse
from oilsync.schemas.vehicle import (
    ConnectionStatus, DecodeVinRequest, DecodeVinResult, VehicleMake, VehicleModel, VehicleVariant,
)
from oilsync.services import vehicles as vehicle_service

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


@router.get("/makes", response_model=ApiResponse[List[VehicleMake]])
async def get_makes(db: AsyncSession = Depends(get_db)):
    """
    Get all active vehicle makes.
    """
    makes = await vehicle_service.list_makes(db)
    return {"message": "Vehicle makes retrieved successfully", "data": makes}


@router.get("/models/{make_id}", response_model=ApiResponse[List[VehicleModel]])
async def get_models(make_id: str, db: AsyncSession = Depends(get_db)):
    models = await vehicle_service.list_models(db, make_id)
    return {"message": "Vehicle models retrieved successfully", "data": models}


@router.get("/variants/{model_id}", response_model=ApiResponse[List[VehicleVariant]])
async def get_variants(model_id: str, db: AsyncSession = Depends(get_db)):
    variants = await vehicle_service.list_variants(db, model_id)
    return {"message": "Vehicle variants retrieved successfully", "data": variants}


@router.get("/years/{model_id}", response_model=ApiResponse[List[int]])
async def get_years(model_id: str, db: AsyncSession = Depends(get_db)):
    years = await vehicle_service.list_years(db, model_id)
    return {"message": "Vehicle years retrieved successfully", "data": years}


@router.get("/decode/{vin}", response_model=ApiResponse[DecodeVinResult])
async def decode_vin(vin: str):
    """
    Decode make, model and year from a VIN.
    """
    decoded = vehicle_service.decode_vin_or_raise(vin)
    return {"message": "VIN decoded successfully", "data": {"decoded": decoded.to_dict()}}


@router.post("/decode-vin", response_model=ApiResponse[DecodeVinResult])
async def decode_vin_body(payload: DecodeVinRequest):
    decoded = vehicle_service.decode_vin_or_raise(payload.vin)
    return {"message": "VIN decoded successfully", "data": {"decoded": decoded.to_dict()}}


@router.get("/test", response_model=ApiResponse[ConnectionStatus])
async def test_connection(request: Request):
    """Check that the vehicle catalogue's database is reachable."""
    result = await check_connection(request.app.state.engine)
    message = "Database connection successful" if result["success"] else "Database connection failed"
    return {"success": result["success"], "message": message, "data": result}
