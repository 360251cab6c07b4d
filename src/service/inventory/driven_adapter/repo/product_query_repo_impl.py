"""
Product Query Repository Implementation - CQRS Read Side

Translates a ProductListQuery into SQL filters, ordering and offset/limit.
"""

from typing import AsyncContextManager, Callable, List

from sqlalchemy import ColumnElement, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ProductNotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.inventory.domain.entity.product_entity import ProductEntity
from src.service.inventory.domain.entity.product_stats_entity import (
    CategoryStatsEntity,
    ProductStatsEntity,
)
from src.service.inventory.domain.enum.product_sort import ProductSortField
from src.service.inventory.domain.value_object.product_query import (
    Pagination,
    ProductListQuery,
    ProductPage,
)
from src.service.inventory.driven_adapter.model.product_model import ProductModel
from src.service.inventory.driven_adapter.repo.product_mapper import (
    model_to_entity,
    parse_product_id,
)


LIKE_ESCAPE = '\\'

SORT_COLUMNS = {
    ProductSortField.NAME: ProductModel.name,
    ProductSortField.PRICE: ProductModel.price,
    ProductSortField.CATEGORY: ProductModel.category,
    ProductSortField.STOCK: ProductModel.stock,
    ProductSortField.CREATED_AT: ProductModel.created_at,
    ProductSortField.UPDATED_AT: ProductModel.updated_at,
}


def escape_like(term: str) -> str:
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace('%', f'{LIKE_ESCAPE}%')
        .replace('_', f'{LIKE_ESCAPE}_')
    )


class ProductQueryRepoImpl(IProductQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _build_conditions(query: ProductListQuery) -> List[ColumnElement[bool]]:
        conditions: List[ColumnElement[bool]] = []
        if query.category:
            conditions.append(ProductModel.category == query.category)
        if query.price_range.minimum is not None:
            conditions.append(ProductModel.price >= query.price_range.minimum)
        if query.price_range.maximum is not None:
            conditions.append(ProductModel.price <= query.price_range.maximum)
        if query.search:
            pattern = f'%{escape_like(query.search)}%'
            conditions.append(
                or_(
                    ProductModel.name.ilike(pattern, escape=LIKE_ESCAPE),
                    ProductModel.description.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
        return conditions

    @staticmethod
    def _build_order_by(query: ProductListQuery) -> list:
        column = SORT_COLUMNS[query.sort.field]
        if query.sort.descending:
            # id (UUID7) breaks ties so pages never overlap
            return [column.desc(), ProductModel.id.desc()]
        return [column.asc(), ProductModel.id.asc()]

    @Logger.io
    async def get_by_id(self, *, product_id: str) -> ProductEntity:
        product_uuid = parse_product_id(product_id)
        async with self.session_factory() as session:
            product_model = await session.get(ProductModel, product_uuid)
            if product_model is None:
                raise ProductNotFoundError()

            return model_to_entity(product_model)

    @Logger.io
    async def list_products(self, *, query: ProductListQuery) -> ProductPage:
        conditions = self._build_conditions(query)

        async with self.session_factory() as session:
            total = await session.scalar(
                select(func.count()).select_from(ProductModel).where(*conditions)
            )
            result = await session.execute(
                select(ProductModel)
                .where(*conditions)
                .order_by(*self._build_order_by(query))
                .offset(query.offset)
                .limit(query.limit)
            )
            items = [model_to_entity(model) for model in result.scalars().all()]

        return ProductPage(
            items=items,
            pagination=Pagination(page=query.page, limit=query.limit, total=int(total or 0)),
        )

    @Logger.io
    async def aggregate_stats(self) -> ProductStatsEntity:
        async with self.session_factory() as session:
            overall = (
                await session.execute(
                    select(
                        func.count(ProductModel.id),
                        func.avg(ProductModel.price),
                        func.coalesce(func.sum(ProductModel.stock), 0),
                    )
                )
            ).one()
            grouped = await session.execute(
                select(
                    ProductModel.category,
                    func.count(ProductModel.id),
                    func.avg(ProductModel.price),
                    func.coalesce(func.sum(ProductModel.stock), 0),
                )
                .group_by(ProductModel.category)
                .order_by(ProductModel.category.asc())
            )

            by_category = [
                CategoryStatsEntity(
                    category=category,
                    count=int(count),
                    average_price=average_price,
                    total_stock=int(total_stock),
                )
                for category, count, average_price, total_stock in grouped.all()
            ]

        total_products, average_price, total_stock = overall
        return ProductStatsEntity(
            total_products=int(total_products),
            average_price=average_price,
            total_stock=int(total_stock),
            by_category=by_category,
        )
