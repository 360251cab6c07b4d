from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.inventory.domain.entity.product_entity import ProductEntity


class GetProductUseCase:
    def __init__(self, product_query_repo: IProductQueryRepo) -> None:
        self.product_query_repo = product_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        product_query_repo: IProductQueryRepo = Depends(Provide[Container.product_query_repo]),
    ) -> Self:
        return cls(product_query_repo=product_query_repo)

    @Logger.io
    async def get_by_id(self, *, product_id: str) -> ProductEntity:
        return await self.product_query_repo.get_by_id(product_id=product_id)
