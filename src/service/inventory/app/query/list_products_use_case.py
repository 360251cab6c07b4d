from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.inventory.domain.value_object.product_query import ProductListQuery, ProductPage


class ListProductsUseCase:
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
    async def list_products(self, *, query: ProductListQuery) -> ProductPage:
        page = await self.product_query_repo.list_products(query=query)
        Logger.base.info(
            f'📋 [LIST_PRODUCTS] page={query.page} returned={len(page.items)} '
            f'total={page.pagination.total}'
        )
        return page
