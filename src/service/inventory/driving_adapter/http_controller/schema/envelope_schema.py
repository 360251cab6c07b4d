"""
Success envelopes: ``{success, data}``, ``{success, data, pagination}``, ``{success, message}``
"""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.service.inventory.domain.value_object.product_query import Pagination


T = TypeVar('T')


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DataResponse(CamelModel, Generic[T]):
    success: bool = True
    data: T


class PaginationResponse(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def from_pagination(cls, pagination: Pagination) -> 'PaginationResponse':
        return cls(
            page=pagination.page,
            limit=pagination.limit,
            total=pagination.total,
            total_pages=pagination.total_pages,
        )


class PageResponse(CamelModel, Generic[T]):
    success: bool = True
    data: List[T]
    pagination: PaginationResponse


class MessageResponse(CamelModel):
    success: bool = True
    message: str
