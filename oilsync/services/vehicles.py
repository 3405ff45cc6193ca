"""
Vehicle catalogue (makes, models, variants) and customer vehicles.
"""
import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from oilsync.errors import NotFoundError, ValidationError
from oilsync.models.vehicle import Vehicle, VehicleMake, VehicleModel, VehicleVariant
from oilsync.services.vin import DecodedVin, decode_vin

logger = logging.getLogger(__name__)

# (id, name, country)
MAKES = [
    ("audi", "Audi", "Germany"),
    ("volkswagen", "Volkswagen", "Germany"),
    ("porsche", "Porsche", "Germany"),
    ("bmw", "BMW", "Germany"),
    ("mercedes", "Mercedes-Benz", "Germany"),
    ("toyota", "Toyota", "Japan"),
    ("honda", "Honda", "Japan"),
    ("nissan", "Nissan", "Japan"),
    ("ford", "Ford", "United States"),
    ("chevrolet", "Chevrolet", "United States"),
]

# (id, make_id, name, year_start, body_type, engine_type)
MODELS = [
    ("audi-a3", "audi", "A3", 2015, "Sedan", "Gasoline"),
    ("audi-a4", "audi", "A4", 2017, "Sedan", "Gasoline"),
    ("audi-a5", "audi", "A5", 2018, "Coupe", "Gasoline"),
    ("audi-q3", "audi", "Q3", 2019, "SUV", "Gasoline"),
    ("audi-q5", "audi", "Q5", 2018, "SUV", "Gasoline"),
    ("vw-golf", "volkswagen", "Golf", 2015, "Hatchback", "Gasoline"),
    ("vw-jetta", "volkswagen", "Jetta", 2019, "Sedan", "Gasoline"),
    ("vw-tiguan", "volkswagen", "Tiguan", 2018, "SUV", "Gasoline"),
    ("porsche-911", "porsche", "911", 2016, "Coupe", "Gasoline"),
    ("porsche-cayenne", "porsche", "Cayenne", 2018, "SUV", "Gasoline"),
    ("porsche-macan", "porsche", "Macan", 2015, "SUV", "Gasoline"),
    ("bmw-3-series", "bmw", "3 Series", 2015, "Sedan", "Gasoline"),
    ("bmw-x3", "bmw", "X3", 2018, "SUV", "Gasoline"),
    ("mercedes-c-class", "mercedes", "C-Class", 2015, "Sedan", "Gasoline"),
    ("mercedes-glc", "mercedes", "GLC", 2016, "SUV", "Gasoline"),
    ("toyota-camry", "toyota", "Camry", 2015, "Sedan", "Gasoline"),
    ("toyota-corolla", "toyota", "Corolla", 2014, "Sedan", "Gasoline"),
    ("toyota-rav4", "toyota", "RAV4", 2019, "SUV", "Hybrid"),
    ("honda-civic", "honda", "Civic", 2016, "Sedan", "Gasoline"),
    ("honda-accord", "honda", "Accord", 2018, "Sedan", "Gasoline"),
    ("honda-cr-v", "honda", "CR-V", 2017, "SUV", "Gasoline"),
    ("nissan-altima", "nissan", "Altima", 2019, "Sedan", "Gasoline"),
    ("nissan-rogue", "nissan", "Rogue", 2014, "SUV", "Gasoline"),
    ("ford-f-150", "ford", "F-150", 2015, "Truck", "Gasoline"),
    ("ford-escape", "ford", "Escape", 2020, "SUV", "Gasoline"),
    ("chevrolet-silverado", "chevrolet", "Silverado", 2019, "Truck", "Gasoline"),
    ("chevrolet-equinox", "chevrolet", "Equinox", 2018, "SUV", "Gasoline"),
]

# (id, model_id, trim_level, engine_size, transmission, drivetrain, year)
VARIANTS = [
    ("audi-a4-2023-premium", "audi-a4", "Premium", "2.0L", "Automatic", "quattro AWD", 2023),
    ("audi-a4-2023-prestige", "audi-a4", "Prestige", "2.0L", "Automatic", "quattro AWD", 2023),
    ("audi-a4-2021-premium", "audi-a4", "Premium", "2.0L", "Automatic", "FWD", 2021),
    ("vw-golf-2021-gti", "vw-golf", "GTI", "2.0L", "Manual", "FWD", 2021),
    ("vw-golf-2019-comfortline", "vw-golf", "Comfortline", "1.4L", "Automatic", "FWD", 2019),
    ("porsche-macan-2022-base", "porsche-macan", "Base", "2.0L", "PDK", "AWD", 2022),
    ("porsche-macan-2022-gts", "porsche-macan", "GTS", "2.9L", "PDK", "AWD", 2022),
    ("honda-civic-2022-ex", "honda-civic", "EX", "1.5L", "CVT", "FWD", 2022),
]


async def seed_vehicle_catalogue(db: AsyncSession) -> int:
    """Insert missing catalogue rows. Returns the number of rows added."""
    added = 0
    for model_cls, rows, build in (
        (VehicleMake, MAKES, lambda r: VehicleMake(id=r[0], name=r[1], country=r[2])),
        (VehicleModel, MODELS, lambda r: VehicleModel(
            id=r[0], make_id=r[1], name=r[2], year_start=r[3], body_type=r[4], engine_type=r[5])),
        (VehicleVariant, VARIANTS, lambda r: VehicleVariant(
            id=r[0], model_id=r[1], trim_level=r[2], engine_size=r[3], transmission=r[4],
            drivetrain=r[5], year=r[6])),
    ):
        result = await db.execute(select(model_cls.id))
        existing = set(result.scalars().all())
        for row in rows:
            if row[0] not in existing:
                db.add(build(row))
                added += 1
        # parents must exist before children reference them
        await db.flush()

    await db.commit()
    if added:
        logger.info(f"Seeded {added} vehicle catalogue rows")
    return added


async def list_makes(db: AsyncSession) -> List[VehicleMake]:
    result = await db.execute(
        select(VehicleMake).where(VehicleMake.is_active.is_(True)).order_by(VehicleMake.name)
    )
    return list(result.scalars().all())


async def list_models(db: AsyncSession, make_id: str) -> List[VehicleModel]:
    make = await db.get(VehicleMake, make_id)
    if not make:
        raise NotFoundError("Vehicle make not found")
    result = await db.execute(
        select(VehicleModel)
        .where(VehicleModel.make_id == make_id, VehicleModel.is_active.is_(True))
        .order_by(VehicleModel.name)
    )
    return list(result.scalars().all())


async def list_variants(db: AsyncSession, model_id: str) -> List[VehicleVariant]:
    result = await db.execute(
        select(VehicleVariant)
        .where(VehicleVariant.model_id == model_id)
        .order_by(VehicleVariant.year.desc(), VehicleVariant.trim_level)
    )
    return list(result.scalars().all())


async def list_years(db: AsyncSession, model_id: str, today: Optional[date] = None) -> List[int]:
    """
    Model years to offer for a model, newest first.

    Years with known variants win; otherwise every year from the model's
    launch to next year (or its final year).
    """
    result = await db.execute(
        select(VehicleVariant.year)
        .where(VehicleVariant.model_id == model_id)
        .distinct()
        .order_by(VehicleVariant.year.desc())
    )
    years = list(result.scalars().all())
    if years:
        return years

    model = await db.get(VehicleModel, model_id)
    if not model:
        raise NotFoundError("Vehicle model not found")
    last_year = (today or date.today()).year + 1
    if model.year_end:
        last_year = min(last_year, model.year_end)
    return list(range(last_year, model.year_start - 1, -1))


def decode_vin_or_raise(vin: str) -> DecodedVin:
    if not vin or not vin.strip():
        raise ValidationError("VIN is required")
    decoded = decode_vin(vin)
    if not decoded:
        raise ValidationError("Invalid VIN format")
    return decoded


async def find_or_create_vehicle(db: AsyncSession, make: str, model: str, year: int,
                                 vin: Optional[str] = None, customer_id: Optional[int] = None) -> Vehicle:
    """Reuse the vehicle already registered under ``vin``, else add a new one."""
    if vin:
        result = await db.execute(select(Vehicle).where(Vehicle.vin == vin))
        vehicle = result.scalar_one_or_none()
        if vehicle:
            if customer_id and not vehicle.customer_id:
                vehicle.customer_id = customer_id
            return vehicle

    vehicle = Vehicle(customer_id=customer_id, vin=vin or None, make=make, model=model, year=year)
    db.add(vehicle)
    await db.flush()
    logger.info(f"Registered vehicle {vehicle.id}: {make} {model} {year}")
    return vehicle
