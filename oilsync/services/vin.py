"""
VIN decoder: make, model and model year from a 17-character VIN.

VAG group vehicles (Volkswagen, Audi, Porsche) are decoded from the WMI plus
the model code in the vehicle descriptor section. A handful of other common
manufacturers are recognised by WMI only and get a representative default
model.

Usage:
    from oilsync.services.vin import decode_vin
    decode_vin("WAU8V1ZZZKA123456")  # -> DecodedVin(make="Audi", model="A3", year=2019, ...)
"""
import logging
import re
from dataclasses import asdict, dataclass
from datetime import date
from typing import Optional

logger = logging.getLogger(__name__)

VIN_PATTERN = re.compile(r"^[A-HJ-NPR-Z0-9]{17}$")

# ---------------------------------------------------------------------------
# Model year (position 10). Letters skip I, O, Q, U and Z.
# ---------------------------------------------------------------------------

_YEAR_LETTERS = "ABCDEFGHJKLMNPRSTVWXY"

YEAR_CODES: dict[str, int] = {letter: 2010 + i for i, letter in enumerate(_YEAR_LETTERS)}
YEAR_CODES.update({str(digit): 2000 + digit for digit in range(1, 10)})

FALLBACK_YEAR = 2020

# ---------------------------------------------------------------------------
# VAG group
# ---------------------------------------------------------------------------

VAG_MANUFACTURERS: dict[str, str] = {
    # ── Volkswagen ────────────────────────────────────
    "WVW": "Volkswagen", "1VW": "Volkswagen", "3VW": "Volkswagen",
    "WV1": "Volkswagen Commercial", "WV2": "Volkswagen Commercial",

    # ── Audi ──────────────────────────────────────────
    "WAU": "Audi", "TRU": "Audi", "WA1": "Audi",

    # ── Porsche ───────────────────────────────────────
    "WP0": "Porsche", "WP1": "Porsche", "1PM": "Porsche",
}

VW_MODELS: dict[str, str] = {
    "5K1": "Golf", "1K1": "Golf", "AV2": "Golf",
    "1T1": "Touran", "1T3": "Touran",
    "321": "Jetta", "163": "Jetta",
    "1B3": "Passat", "3C2": "Passat",
    "5N1": "Tiguan", "5N2": "Tiguan",
}

AUDI_MODELS: dict[str, str] = {
    "8V1": "A3", "8V3": "A3 Sportback",
    "8W2": "A4", "8W5": "A4 Avant",
    "F53": "A5", "F5A": "A5 Sportback",
    "8U3": "Q3", "8UB": "Q3",
    "FY3": "Q5", "FYB": "Q5",
}

PORSCHE_MODELS: dict[str, str] = {
    "911": "911", "997": "911", "991": "911", "992": "911",
    "E2A": "Cayenne", "E2B": "Cayenne", "E3A": "Cayenne", "E3B": "Cayenne",
    "95B": "Macan",
}

# ---------------------------------------------------------------------------
# Other manufacturers: WMI -> (make, default model)
# ---------------------------------------------------------------------------

OTHER_MANUFACTURERS: dict[str, tuple[str, str]] = {
    "WBA": ("BMW", "3 Series"), "WBS": ("BMW", "M Series"), "WBY": ("BMW", "X Series"),
    "WDD": ("Mercedes-Benz", "C-Class"), "WDC": ("Mercedes-Benz", "E-Class"),
    "WDB": ("Mercedes-Benz", "S-Class"),
    "JTD": ("Toyota", "Camry"), "JTN": ("Toyota", "Corolla"), "4T1": ("Toyota", "Camry"),
    "1HG": ("Honda", "Civic"), "JHM": ("Honda", "Accord"), "2HG": ("Honda", "Civic"),
    "1FA": ("Ford", "Focus"), "1FT": ("Ford", "F-150"), "1FM": ("Ford", "Explorer"),
    "1G1": ("Chevrolet", "Cruze"), "1GC": ("Chevrolet", "Silverado"), "1GN": ("Chevrolet", "Tahoe"),
    "1N4": ("Nissan", "Altima"), "JN1": ("Nissan", "Sentra"), "JN8": ("Nissan", "Rogue"),
}


@dataclass(frozen=True)
class DecodedVin:
    vin: str
    make: str
    model: str
    year: int
    manufacturer_group: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


def normalize_vin(vin: str) -> str:
    return (vin or "").strip().upper()


def is_valid_vin(vin: str) -> bool:
    """True when ``vin`` is 17 characters without I, O or Q."""
    return bool(VIN_PATTERN.match(normalize_vin(vin)))


def decode_year(char: str) -> Optional[int]:
    """Model year for a position-10 code, or None when the code is not used."""
    return YEAR_CODES.get((char or "").upper())


def decode_vag_vin(vin: str) -> Optional[DecodedVin]:
    """Decode a Volkswagen, Audi or Porsche VIN. Returns None for any other WMI."""
    if len(vin) != 17:
        return None

    make = VAG_MANUFACTURERS.get(vin[:3])
    if not make:
        return None

    model_code = vin[3:6]
    if make.startswith("Volkswagen"):
        model = VW_MODELS.get(model_code, "Unknown VW Model")
    elif make == "Audi":
        model = AUDI_MODELS.get(model_code, "Unknown Audi Model")
    else:
        model = PORSCHE_MODELS.get(model_code, "Unknown Porsche Model")

    year = decode_year(vin[9]) or date.today().year
    return DecodedVin(vin=vin, make=make, model=model, year=year, manufacturer_group="VAG")


def decode_vin(vin: str) -> Optional[DecodedVin]:
    """
    Decode a VIN to make, model and year.

    Tries the VAG decoder first, then the WMI table of other manufacturers.
    Returns None when the VIN is malformed or the manufacturer is unknown.
    """
    vin = normalize_vin(vin)
    if not VIN_PATTERN.match(vin):
        logger.debug(f"Rejected malformed VIN {vin[:3]}...")
        return None

    decoded = decode_vag_vin(vin)
    if decoded:
        return decoded

    manufacturer = OTHER_MANUFACTURERS.get(vin[:3])
    if not manufacturer:
        logger.info(f"No decoder for WMI {vin[:3]}")
        return None

    make, default_model = manufacturer
    year = decode_year(vin[9]) or FALLBACK_YEAR
    return DecodedVin(vin=vin, make=make, model=default_model, year=year)
