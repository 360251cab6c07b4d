from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.command.create_product_use_case import CreateProductUseCase
from src.service.inventory.app.command.delete_product_use_case import DeleteProductUseCase
from src.service.inventory.app.command.update_product_use_case import UpdateProductUseCase
from src.service.inventory.app.query.get_product_stats_use_case import GetProductStatsUseCase
from src.service.inventory.app.query.get_product_use_case import GetProductUseCase
from src.service.inventory.app.query.list_products_use_case import ListProductsUseCase
from src.service.inventory.domain.entity.user_entity import UserEntity
from src.service.inventory.domain.value_object.product_query import ProductListQuery
from src.service.inventory.driving_adapter.http_controller.auth.auth_guard import (
    get_current_user,
)
from src.service.inventory.driving_adapter.http_controller.schema.envelope_schema import (
    DataResponse,
    MessageResponse,
    PageResponse,
    PaginationResponse,
)
from src.service.inventory.driving_adapter.http_controller.schema.product_schema import (
    ProductCreateRequest,
    ProductResponse,
    ProductStatsResponse,
    ProductUpdateRequest,
    product_list_query,
)


router = APIRouter()


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_products(
    query: ProductListQuery = Depends(product_list_query),
    use_case: ListProductsUseCase = Depends(ListProductsUseCase.depends),
) -> PageResponse[ProductResponse]:
    page = await use_case.list_products(query=query)
    return PageResponse[ProductResponse](
        data=[ProductResponse.from_entity(product) for product in page.items],
        pagination=PaginationResponse.from_pagination(page.pagination),
    )


# Registered before /{product_id} so "stats" is not taken for an id
@router.get('/stats', status_code=status.HTTP_200_OK)
@Logger.io
async def get_product_stats(
    use_case: GetProductStatsUseCase = Depends(GetProductStatsUseCase.depends),
) -> DataResponse[ProductStatsResponse]:
    stats = await use_case.get_stats()
    return DataResponse[ProductStatsResponse](data=ProductStatsResponse.from_entity(stats))


@router.get('/{product_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_product(
    product_id: str,
    use_case: GetProductUseCase = Depends(GetProductUseCase.depends),
) -> DataResponse[ProductResponse]:
    product = await use_case.get_by_id(product_id=product_id)
    return DataResponse[ProductResponse](data=ProductResponse.from_entity(product))


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_product(
    request: ProductCreateRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CreateProductUseCase = Depends(CreateProductUseCase.depends),
) -> DataResponse[ProductResponse]:
    product = await use_case.create(
        name=request.name,
        price=request.price,
        category=request.category,
        stock=request.stock,
        description=request.description,
    )
    return DataResponse[ProductResponse](data=ProductResponse.from_entity(product))


@router.put('/{product_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_product(
    product_id: str,
    request: ProductUpdateRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: UpdateProductUseCase = Depends(UpdateProductUseCase.depends),
) -> DataResponse[ProductResponse]:
    product = await use_case.update(product_id=product_id, changes=request.to_changes())
    return DataResponse[ProductResponse](data=ProductResponse.from_entity(product))


@router.delete('/{product_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def delete_product(
    product_id: str,
    current_user: UserEntity = Depends(get_current_user),
    use_case: DeleteProductUseCase = Depends(DeleteProductUseCase.depends),
) -> MessageResponse:
    await use_case.delete(product_id=product_id)
    return MessageResponse(message='Product deleted successfully')
