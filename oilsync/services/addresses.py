"""
Address autocomplete for the Waterloo Region service area.

A synthetic address book is generated once from the street table in
``address_data`` and searched with a weighted scoring of house number,
street and city matches.
"""
import logging
import random
import re
from dataclasses import asdict, dataclass
from functools import lru_cache
from typing import List, Optional

from oilsync.services.address_data import WATERLOO_REGION_STREETS

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
DEFAULT_LIMIT = 12
MAX_NUMBERS_PER_STREET = 40
LOW_ODD_NUMBERS = (1, 3, 5, 7, 9, 11, 13, 15, 17, 19)
DATASET_SEED = 2024

MAJOR_STREET_WORDS = ("King", "Queen", "University", "Main", "Hespeler", "Stone")
THOROUGHFARE_WORDS = ("Street", "Avenue", "Road", "Boulevard")
RESIDENTIAL_WORDS = ("Court", "Crescent", "Place", "Lane")
POPULAR_STREET_WORDS = ("king", "main", "queen", "university", "water", "stone")

ABBREVIATIONS = {
    "st": "street",
    "ave": "avenue",
    "rd": "road",
    "blvd": "boulevard",
    "dr": "drive",
    "crt": "court",
    "cres": "crescent",
}


@dataclass(frozen=True)
class AddressSuggestion:
    id: str
    address: str
    city: str
    postal_code: str
    province: str = "ON"

    def to_dict(self) -> dict:
        return asdict(self)


def generate_house_numbers(street: str) -> List[int]:
    """House numbers for a street, ranged by how big the street is likely to be."""
    end, step = 100, 2
    if any(word in street for word in MAJOR_STREET_WORDS):
        end, step = 2000, 10
    elif any(word in street for word in THOROUGHFARE_WORDS):
        end, step = 500, 4
    elif any(word in street for word in RESIDENTIAL_WORDS):
        end, step = 80, 2

    numbers = list(range(1, end + 1, step))[:50]

    for num in LOW_ODD_NUMBERS:
        if num not in numbers and num <= end:
            numbers.insert(0, num)

    return numbers[:MAX_NUMBERS_PER_STREET]


def generate_addresses(seed: int = DATASET_SEED) -> List[AddressSuggestion]:
    rng = random.Random(seed)
    addresses = []

    for city_key, city_data in WATERLOO_REGION_STREETS.items():
        city_name = city_key.capitalize()
        prefixes = city_data["postal_prefixes"]
        # repeated street names would produce duplicate address ids
        streets = list(dict.fromkeys(city_data["streets"]))

        for street_index, street in enumerate(streets):
            prefix = prefixes[street_index % len(prefixes)]
            for num_index, num in enumerate(generate_house_numbers(street)):
                letter = chr(65 + num_index % 26)
                addresses.append(AddressSuggestion(
                    id=f"{city_key}_{street.replace(' ', '')}_{num}",
                    address=f"{num} {street}",
                    city=city_name,
                    postal_code=f"{prefix} {rng.randint(0, 9)}{letter}{rng.randint(0, 9)}",
                ))

    return addresses


@lru_cache()
def get_address_book() -> List[AddressSuggestion]:
    addresses = generate_addresses()
    logger.info(f"Generated {len(addresses)} addresses for autocomplete")
    return addresses


def _street_match_score(street: str, street_query: str, terms: List[str]) -> int:
    if street == street_query:
        return 800
    if street.startswith(street_query):
        return 600
    if all(term in street for term in terms):
        return 400

    score = 0
    partial_matches = 0
    for term in terms:
        for word in street.split(" "):
            if term in word:
                partial_matches += 1
                score += 50
            if ABBREVIATIONS.get(term) == word:
                score += 200
    if partial_matches >= 2:
        score += 100
    return score


def score_address(suggestion: AddressSuggestion, query: str, terms: List[str],
                  house_number: Optional[int], street_query: str) -> int:
    address = suggestion.address.lower()
    number_text, _, street = address.partition(" ")
    city = suggestion.city.lower()
    score = 0

    if address == query or f"{address}, {city}".startswith(query):
        score += 1000

    if house_number:
        address_number = int(number_text)
        if address_number == house_number:
            score += 900
            if street_query and street_query in street:
                score += 500
        elif abs(address_number - house_number) <= 10:
            score += 100

    if street_query:
        score += _street_match_score(street, street_query, terms)

    if any(term in city for term in terms):
        score += 200

    if address.startswith(query):
        score += 300

    if any(word in street for word in POPULAR_STREET_WORDS):
        score += 50

    return score


def search_addresses(query: str, limit: int = DEFAULT_LIMIT) -> List[AddressSuggestion]:
    """
    Best matching addresses for a partially typed query.

    A leading house number is matched separately from the street part, so
    "100 king" ranks "100 King Street West" above other King Street numbers.
    Queries shorter than two characters return nothing.
    """
    if not query or len(query.strip()) < MIN_QUERY_LENGTH:
        return []

    normalized = query.lower().strip()
    terms = normalized.split()
    number_match = re.match(r"^\d+", query)
    house_number = int(number_match.group()) if number_match else None
    street_query = re.sub(r"^\d+\s*", "", query).lower().strip() if house_number else normalized

    scored = []
    for suggestion in get_address_book():
        score = score_address(suggestion, normalized, terms, house_number, street_query)
        if score > 0:
            scored.append((score, suggestion))

    scored.sort(key=lambda item: item[0], reverse=True)
    return [suggestion for _, suggestion in scored[:limit]]
