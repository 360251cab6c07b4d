"""
Unit tests for the product use cases

Repositories are replaced by AsyncMock; no database or HTTP client involved.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock
from uuid import UUID

import pytest

from src.platform.exception.exceptions import ProductNotFoundError
from src.service.inventory.app.command.create_product_use_case import CreateProductUseCase
from src.service.inventory.app.command.delete_product_use_case import DeleteProductUseCase
from src.service.inventory.app.command.update_product_use_case import UpdateProductUseCase
from src.service.inventory.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.inventory.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.inventory.app.query.get_product_stats_use_case import GetProductStatsUseCase
from src.service.inventory.app.query.list_products_use_case import ListProductsUseCase
from src.service.inventory.domain.entity.product_entity import ProductEntity
from src.service.inventory.domain.entity.product_stats_entity import ProductStatsEntity
from src.service.inventory.domain.value_object.product_query import (
    Pagination,
    ProductListQuery,
    ProductPage,
)


PRODUCT_ID = UUID('01890a5d-ac96-774b-bcce-b302099a8057')


def _stored_product(**overrides) -> ProductEntity:
    now = datetime.now(timezone.utc)
    fields = {
        'id': PRODUCT_ID,
        'name': 'Desk Lamp',
        'price': 25.5,
        'category': 'Home',
        'stock': 3,
        'created_at': now,
        'updated_at': now,
    }
    fields.update(overrides)
    return ProductEntity(**fields)


@pytest.fixture
def mock_command_repo() -> AsyncMock:
    repo = AsyncMock(spec=IProductCommandRepo)
    repo.create.side_effect = lambda *, product: _stored_product(
        name=product.name, price=product.price, category=product.category, stock=product.stock
    )
    repo.update.side_effect = lambda *, product: product
    return repo


@pytest.fixture
def mock_query_repo() -> AsyncMock:
    return AsyncMock(spec=IProductQueryRepo)


@pytest.mark.unit
class TestCreateProductUseCase:
    @pytest.mark.asyncio
    async def test_builds_entity_and_persists(self, mock_command_repo: AsyncMock):
        # Arrange
        use_case = CreateProductUseCase(product_command_repo=mock_command_repo)

        # Act
        created = await use_case.create(
            name=' Desk Lamp ', price=25.5, category='Home', stock=3, description=None
        )

        # Assert
        sent = mock_command_repo.create.await_args.kwargs['product']
        assert sent.name == 'Desk Lamp'
        assert sent.id is None
        assert created.id == PRODUCT_ID


@pytest.mark.unit
class TestUpdateProductUseCase:
    @pytest.mark.asyncio
    async def test_applies_only_given_changes(
        self, mock_command_repo: AsyncMock, mock_query_repo: AsyncMock
    ):
        # Arrange
        mock_query_repo.get_by_id.return_value = _stored_product()
        use_case = UpdateProductUseCase(
            product_command_repo=mock_command_repo, product_query_repo=mock_query_repo
        )

        # Act
        updated = await use_case.update(product_id=str(PRODUCT_ID), changes={'stock': 0})

        # Assert
        mock_query_repo.get_by_id.assert_awaited_once_with(product_id=str(PRODUCT_ID))
        assert updated.stock == 0
        assert updated.is_available is False
        assert updated.name == 'Desk Lamp'

    @pytest.mark.asyncio
    async def test_missing_product(
        self, mock_command_repo: AsyncMock, mock_query_repo: AsyncMock
    ):
        mock_query_repo.get_by_id.side_effect = ProductNotFoundError()
        use_case = UpdateProductUseCase(
            product_command_repo=mock_command_repo, product_query_repo=mock_query_repo
        )

        with pytest.raises(ProductNotFoundError):
            await use_case.update(product_id='nope', changes={'stock': 1})

        mock_command_repo.update.assert_not_awaited()


@pytest.mark.unit
class TestDeleteProductUseCase:
    @pytest.mark.asyncio
    async def test_delegates_to_repo(self, mock_command_repo: AsyncMock):
        use_case = DeleteProductUseCase(product_command_repo=mock_command_repo)

        await use_case.delete(product_id=str(PRODUCT_ID))

        mock_command_repo.delete.assert_awaited_once_with(product_id=str(PRODUCT_ID))

    @pytest.mark.asyncio
    async def test_not_found_propagates(self, mock_command_repo: AsyncMock):
        mock_command_repo.delete.side_effect = ProductNotFoundError()
        use_case = DeleteProductUseCase(product_command_repo=mock_command_repo)

        with pytest.raises(ProductNotFoundError):
            await use_case.delete(product_id=str(PRODUCT_ID))


@pytest.mark.unit
class TestProductQueryUseCases:
    @pytest.mark.asyncio
    async def test_list_products_passes_query_through(self, mock_query_repo: AsyncMock):
        query = ProductListQuery(page=2, limit=5)
        page = ProductPage(
            items=[_stored_product()], pagination=Pagination(page=2, limit=5, total=6)
        )
        mock_query_repo.list_products.return_value = page
        use_case = ListProductsUseCase(product_query_repo=mock_query_repo)

        result = await use_case.list_products(query=query)

        mock_query_repo.list_products.assert_awaited_once_with(query=query)
        assert result.pagination.total_pages == 2

    @pytest.mark.asyncio
    async def test_stats(self, mock_query_repo: AsyncMock):
        stats = ProductStatsEntity(total_products=0, average_price=None, total_stock=0)
        mock_query_repo.aggregate_stats.return_value = stats
        use_case = GetProductStatsUseCase(product_query_repo=mock_query_repo)

        assert await use_case.get_stats() is stats
