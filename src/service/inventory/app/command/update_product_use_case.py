from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.inventory.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.inventory.domain.entity.product_entity import ProductEntity


class UpdateProductUseCase:
    def __init__(
        self,
        product_command_repo: IProductCommandRepo,
        product_query_repo: IProductQueryRepo,
    ) -> None:
        self.product_command_repo = product_command_repo
        self.product_query_repo = product_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        product_command_repo: IProductCommandRepo = Depends(
            Provide[Container.product_command_repo]
        ),
        product_query_repo: IProductQueryRepo = Depends(Provide[Container.product_query_repo]),
    ) -> Self:
        return cls(product_command_repo=product_command_repo, product_query_repo=product_query_repo)

    @Logger.io
    async def update(self, *, product_id: str, changes: dict[str, Any]) -> ProductEntity:
        """Partial update; a product deleted in the meantime surfaces as not found."""
        product = await self.product_query_repo.get_by_id(product_id=product_id)
        product.apply_changes(changes)

        updated = await self.product_command_repo.update(product=product)
        Logger.base.info(
            f'✏️ [UPDATE_PRODUCT] Updated product {updated.id} fields={sorted(changes)}'
        )
        return updated
