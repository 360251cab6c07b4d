"""
Product Command Repository Implementation - CQRS Write Side
"""

from typing import AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession
from uuid_utils.compat import uuid7

from src.platform.exception.exceptions import ProductNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.inventory.domain.entity.product_entity import ProductEntity
from src.service.inventory.driven_adapter.model.product_model import ProductModel, utc_now
from src.service.inventory.driven_adapter.repo.product_mapper import (
    model_to_entity,
    parse_product_id,
)


class ProductCommandRepoImpl(IProductCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, product: ProductEntity) -> ProductEntity:
        async with self.session_factory() as session:
            now = utc_now()
            product_model = ProductModel(
                id=uuid7(),
                name=product.name,
                description=product.description,
                price=product.price,
                category=product.category,
                stock=product.stock,
                created_at=now,
                updated_at=now,
            )

            session.add(product_model)
            await session.commit()
            await session.refresh(product_model)

            return model_to_entity(product_model)

    @Logger.io
    async def update(self, *, product: ProductEntity) -> ProductEntity:
        if product.id is None:
            raise ProductNotFoundError()

        async with self.session_factory() as session:
            product_model = await session.get(ProductModel, parse_product_id(product.id))
            if product_model is None:
                raise ProductNotFoundError()

            product_model.name = product.name
            product_model.description = product.description
            product_model.price = product.price
            product_model.category = product.category
            product_model.stock = product.stock
            product_model.updated_at = utc_now()

            await session.commit()
            await session.refresh(product_model)

            return model_to_entity(product_model)

    @Logger.io
    async def delete(self, *, product_id: str) -> None:
        async with self.session_factory() as session:
            product_model = await session.get(ProductModel, parse_product_id(product_id))
            if product_model is None:
                raise ProductNotFoundError()

            await session.delete(product_model)
            await session.commit()
