"""
Oil change pricing.
"""
from datetime import date
from typing import Optional, Union

BASE_PRICE = 59.99
LUXURY_SURCHARGE = 20.0
NEW_VEHICLE_SURCHARGE = 10.0
NEW_VEHICLE_AGE = 3

LUXURY_MAKES = {"bmw", "mercedes", "mercedes-benz", "audi", "lexus", "acura", "porsche"}


def _parse_year(year: Union[int, str, None]) -> Optional[int]:
    try:
        return int(year)
    except (TypeError, ValueError):
        return None


def calculate_price(make: str, model: str, year: Union[int, str, None], today: Optional[date] = None) -> float:
    """
    Price of an oil change for the given vehicle.

    Luxury makes pay a surcharge, as do vehicles less than three model years
    old. ``model`` does not affect the price today but is part of the quote.
    """
    today = today or date.today()
    price = BASE_PRICE

    if (make or "").strip().lower() in LUXURY_MAKES:
        price += LUXURY_SURCHARGE

    vehicle_year = _parse_year(year)
    if vehicle_year is not None and today.year - vehicle_year < NEW_VEHICLE_AGE:
        price += NEW_VEHICLE_SURCHARGE

    return round(price, 2)
