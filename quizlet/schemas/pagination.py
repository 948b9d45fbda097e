from pydantic import BaseModel, Field
from typing import Generic, TypeVar
import math

ItemT = TypeVar("ItemT")


class PaginationParams(BaseModel):
    """Query string ``?page=&size=`` for list endpoints."""

    page: int = Field(default=1, ge=1)
    size: int = Field(default=20, ge=1, le=100)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


class PaginatedResponse(BaseModel, Generic[ItemT]):
    items: list[ItemT]
    total: int
    page: int
    size: int
    pages: int

    @classmethod
    def from_page(cls, items: list[ItemT], total: int, params: PaginationParams) -> "PaginatedResponse[ItemT]":
        return cls(
            items=items,
            total=total,
            page=params.page,
            size=params.size,
            pages=math.ceil(total / params.size),
        )
