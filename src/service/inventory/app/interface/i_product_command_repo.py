from abc import ABC, abstractmethod

from src.service.inventory.domain.entity.product_entity import ProductEntity


class IProductCommandRepo(ABC):
    """Product Command Repository Interface - CQRS Write Side"""

    @abstractmethod
    async def create(self, *, product: ProductEntity) -> ProductEntity:
        pass

    @abstractmethod
    async def update(self, *, product: ProductEntity) -> ProductEntity:
        """Persist the mutable fields of an existing product; ProductNotFoundError if gone."""
        pass

    @abstractmethod
    async def delete(self, *, product_id: str) -> None:
        """Delete by id; ProductNotFoundError if it does not exist."""
        pass
