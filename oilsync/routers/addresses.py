"""
Address autocomplete route.
"""
from fastapi import APIRouter, Query
from typing import List

from oilsync.schemas.address import AddressSuggestion
from oilsync.schemas.common import ApiResponse
from oilsync.services.addresses import DEFAULT_LIMIT, search_addresses

router = APIRouter(prefix="/addresses", tags=["addresses"])


@router.get("/search", response_model=ApiResponse[List[AddressSuggestion]])
async def search(
    q: str = Query("", description="Partially typed address"),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=50),
):
    """
    Suggest Waterloo Region addresses for a partially typed query.
    """
    suggestions = search_addresses(q, limit)
    return {"data": [suggestion.to_dict() for suggestion in suggestions]}
