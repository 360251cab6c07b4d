"""
Product API Schemas - request validation and camelCase responses
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, List, Optional
from uuid import UUID

from fastapi import Query
from pydantic import (
    AfterValidator,
    BaseModel,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic_core import PydanticCustomError

from src.service.inventory.domain.entity.product_entity import (
    DESCRIPTION_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PRICE_DECIMALS,
    ProductEntity,
)
from src.service.inventory.domain.entity.product_stats_entity import (
    CategoryStatsEntity,
    ProductStatsEntity,
)
from src.service.inventory.domain.enum.product_sort import ProductSort
from src.service.inventory.domain.value_object.product_query import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    DEFAULT_SORT,
    MAX_LIMIT,
    MAX_PAGE,
    PriceRange,
    ProductListQuery,
)
from src.service.inventory.driving_adapter.http_controller.schema.envelope_schema import (
    CamelModel,
)


SEARCH_MAX_LENGTH = 100


def _check_price_precision(value: float) -> float:
    if Decimal(repr(value)).as_tuple().exponent < -PRICE_DECIMALS:
        raise PydanticCustomError(
            'number_precision',
            'Price cannot have more than {decimals} decimal places',
            {'decimals': PRICE_DECIMALS},
        )
    return value


Name = Annotated[str, Field(min_length=1, max_length=NAME_MAX_LENGTH)]
Description = Annotated[str, Field(max_length=DESCRIPTION_MAX_LENGTH)]
Price = Annotated[
    float, Field(gt=0, allow_inf_nan=False), AfterValidator(_check_price_precision)
]
Category = Annotated[str, Field(min_length=1)]
Stock = Annotated[int, Field(ge=0)]

# field -> error type reported when a boolean is sent for it
NUMBER_TYPE_ERRORS = {'price': 'float_type', 'stock': 'int_type'}


class _ProductBody(BaseModel):
    model_config = {'str_strip_whitespace': True}

    @field_validator('*', mode='before')
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        # only runs for values present in the body; omitted fields keep their default
        if value is None:
            raise PydanticCustomError('not_null', 'Value cannot be null')
        return value

    @field_validator('price', 'stock', mode='before', check_fields=False)
    @classmethod
    def reject_boolean(cls, value: Any, info: ValidationInfo) -> Any:
        # JSON true/false would otherwise coerce to 1/0
        if isinstance(value, bool):
            error_type = NUMBER_TYPE_ERRORS[info.field_name]
            raise PydanticCustomError(error_type, 'Input should be a number')
        return value


class ProductCreateRequest(_ProductBody):
    name: Name
    description: Optional[Description] = None
    price: Price
    category: Category
    stock: Stock

    model_config = {
        'json_schema_extra': {
            'example': {
                'name': 'iPhone 13',
                'description': 'Apple smartphone, 128GB',
                'price': 799.99,
                'category': 'Electronics',
                'stock': 25,
            }
        },
    }


class ProductUpdateRequest(_ProductBody):
    name: Optional[Name] = None
    description: Optional[Description] = None
    price: Optional[Price] = None
    category: Optional[Category] = None
    stock: Optional[Stock] = None

    model_config = {'json_schema_extra': {'example': {'price': 749.99, 'stock': 20}}}

    @model_validator(mode='after')
    def require_at_least_one_field(self) -> 'ProductUpdateRequest':
        if not self.model_fields_set:
            raise PydanticCustomError(
                'object_min', 'At least one field must be provided for update'
            )
        return self

    def to_changes(self) -> dict[str, Any]:
        return self.model_dump(include=self.model_fields_set)


class ProductResponse(CamelModel):
    id: UUID
    name: str
    description: Optional[str]
    price: float
    category: str
    stock: int
    is_available: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: ProductEntity) -> 'ProductResponse':
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            category=product.category,
            stock=product.stock,
            is_available=product.is_available,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class OverallStatsResponse(CamelModel):
    total_products: int
    average_price: float
    total_stock: int


class CategoryStatsResponse(CamelModel):
    category: str
    count: int
    average_price: float
    total_stock: int

    @classmethod
    def from_entity(cls, stats: CategoryStatsEntity) -> 'CategoryStatsResponse':
        return cls(
            category=stats.category,
            count=stats.count,
            average_price=stats.average_price,
            total_stock=stats.total_stock,
        )


class ProductStatsResponse(CamelModel):
    overall: OverallStatsResponse
    by_category: List[CategoryStatsResponse]

    @classmethod
    def from_entity(cls, stats: ProductStatsEntity) -> 'ProductStatsResponse':
        return cls(
            overall=OverallStatsResponse(
                total_products=stats.total_products,
                average_price=stats.average_price,
                total_stock=stats.total_stock,
            ),
            by_category=[CategoryStatsResponse.from_entity(item) for item in stats.by_category],
        )


def _reject_blank(value: str) -> str:
    if not value:
        raise PydanticCustomError('string_empty', 'Value cannot be empty')
    return value


CategoryFilter = Annotated[str, AfterValidator(_reject_blank)]
SearchTerm = Annotated[str, Field(max_length=SEARCH_MAX_LENGTH), AfterValidator(_reject_blank)]
PriceBound = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class ProductListParams(BaseModel):
    """Query string of ``GET /products``; every violated rule is reported together."""

    model_config = {'str_strip_whitespace': True}

    page: int = Field(DEFAULT_PAGE, ge=1, le=MAX_PAGE)
    limit: int = Field(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    sort: ProductSort = DEFAULT_SORT
    category: Optional[CategoryFilter] = None
    # min_price is declared first so check_price_range can see it
    min_price: Optional[PriceBound] = Field(None, alias='minPrice')
    max_price: Optional[PriceBound] = Field(None, alias='maxPrice')
    search: Optional[SearchTerm] = None

    @field_validator('max_price')
    @classmethod
    def check_price_range(cls, value: Optional[float], info: ValidationInfo) -> Optional[float]:
        price_range = PriceRange(minimum=info.data.get('min_price'), maximum=value)
        if not price_range.is_valid:
            raise PydanticCustomError(
                'price_range', 'maxPrice must be greater than or equal to minPrice'
            )
        return value

    def to_query(self) -> ProductListQuery:
        return ProductListQuery(
            page=self.page,
            limit=self.limit,
            sort=self.sort,
            category=self.category,
            price_range=PriceRange(minimum=self.min_price, maximum=self.max_price),
            search=self.search,
        )


def product_list_query(params: Annotated[ProductListParams, Query()]) -> ProductListQuery:
    return params.to_query()
