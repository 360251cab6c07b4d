"""
Product list query

Normalized listing parameters (after the validation gate) and the page they produce.
The store translates a ProductListQuery into its own filter/sort/offset language.
"""

import math
from typing import List, Optional

import attrs

from src.service.inventory.domain.entity.product_entity import ProductEntity
from src.service.inventory.domain.enum.product_sort import ProductSort


DEFAULT_PAGE = 1
# Largest integer a JSON number can carry exactly; keeps the OFFSET within 64 bits
MAX_PAGE = 2**53 - 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
DEFAULT_SORT = ProductSort.CREATED_AT_DESC


@attrs.frozen
class PriceRange:
    minimum: Optional[float] = None
    maximum: Optional[float] = None

    @property
    def is_valid(self) -> bool:
        if self.minimum is None or self.maximum is None:
            return True
        return self.maximum >= self.minimum


@attrs.frozen
class ProductListQuery:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort: ProductSort = DEFAULT_SORT
    category: Optional[str] = None
    price_range: PriceRange = attrs.field(factory=PriceRange)
    search: Optional[str] = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@attrs.frozen
class Pagination:
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0


@attrs.frozen
class ProductPage:
    items: List[ProductEntity]
    pagination: Pagination
