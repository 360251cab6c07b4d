from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_product_command_repo import IProductCommandRepo


class DeleteProductUseCase:
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
    async def delete(self, *, product_id: str) -> None:
        await self.product_command_repo.delete(product_id=product_id)
        Logger.base.info(f'🗑️ [DELETE_PRODUCT] Deleted product {product_id}')
