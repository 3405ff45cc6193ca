"""
Pydantic schemas for address autocomplete.
"""
from oilsync.schemas.common import CamelModel


class AddressSuggestion(CamelModel):
    id: str
    address: str
    city: str
    postal_code: str
    province: str
