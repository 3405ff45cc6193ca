"""
Shared Pydantic base classes for the camelCase JSON API.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(CamelModel, Generic[T]):
    """Envelope returned by every endpoint."""
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None


class MessageResponse(CamelModel):
    """Envelope for endpoints with nothing but a message."""
    success: bool = True
    message: str
