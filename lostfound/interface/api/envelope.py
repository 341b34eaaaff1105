"""Response envelope shared by all comment routes.

Every response carries `success`; list responses also carry the paging
totals next to the data.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class MessageResponse(BaseModel):
    """Envelope without data (deletes and errors)."""

    success: bool = True
    message: str


class DataResponse(BaseModel, Generic[T]):
    """Envelope around a single object."""

    success: bool = True
    data: T


class ListResponse(BaseModel, Generic[T]):
    """Envelope around one page of objects."""

    success: bool = True
    count: int
    total: int
    page: int
    pages: int
    data: list[T]


class CountResponse(BaseModel):
    """Envelope around a bare count."""

    success: bool = True
    count: int
