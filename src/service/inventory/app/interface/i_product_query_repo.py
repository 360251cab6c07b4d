from abc import ABC, abstractmethod

from src.service.inventory.domain.entity.product_entity import ProductEntity
from src.service.inventory.domain.entity.product_stats_entity import ProductStatsEntity
from src.service.inventory.domain.value_object.product_query import (
    ProductListQuery,
    ProductPage,
)


class IProductQueryRepo(ABC):
    """Product Query Repository Interface - CQRS Read Side"""

    @abstractmethod
    async def get_by_id(self, *, product_id: str) -> ProductEntity:
        """Get a product by id; malformed or unknown ids raise ProductNotFoundError."""
        pass

    @abstractmethod
    async def list_products(self, *, query: ProductListQuery) -> ProductPage:
        pass

    @abstractmethod
    async def aggregate_stats(self) -> ProductStatsEntity:
        """Statistics over the whole collection, grouped by category name ascending."""
        pass
