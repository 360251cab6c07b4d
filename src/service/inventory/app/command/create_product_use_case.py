from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.inventory.domain.entity.product_entity import ProductEntity


class CreateProductUseCase:
    def __init__(self, product_command_repo: IProductCommandRepo) -> None:
        self.product_command_repo = product_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        product_command_repo: IProductCommandRepo = Depends(
            Provide[Container.product_command_repo]
        ),
    ) -> Self:
        return cls(product_command_repo=product_command_repo)

    @Logger.io
    async def create(
        self,
        *,
        name: str,
        price: float,
        category: str,
        stock: int,
        description: Optional[str] = None,
    ) -> ProductEntity:
        product = ProductEntity(
            name=name,
            price=price,
            category=category,
            stock=stock,
            description=description,
        )
        created = await self.product_command_repo.create(product=product)
        Logger.base.info(f'📦 [CREATE_PRODUCT] Created product {created.id} ({created.name})')
        return created
