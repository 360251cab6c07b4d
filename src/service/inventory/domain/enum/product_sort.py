from enum import StrEnum


class ProductSortField(StrEnum):
    NAME = 'name'
    PRICE = 'price'
    CATEGORY = 'category'
    STOCK = 'stock'
    CREATED_AT = 'createdAt'
    UPDATED_AT = 'updatedAt'


DESCENDING_PREFIX = '-'


class ProductSort(StrEnum):
    """Accepted values of the ``sort`` query parameter."""

    NAME = 'name'
    PRICE = 'price'
    CATEGORY = 'category'
    STOCK = 'stock'
    CREATED_AT = 'createdAt'
    UPDATED_AT = 'updatedAt'
    NAME_DESC = '-name'
    PRICE_DESC = '-price'
    CATEGORY_DESC = '-category'
    STOCK_DESC = '-stock'
    CREATED_AT_DESC = '-createdAt'
    UPDATED_AT_DESC = '-updatedAt'

    @property
    def field(self) -> ProductSortField:
        return ProductSortField(self.value.removeprefix(DESCENDING_PREFIX))

    @property
    def descending(self) -> bool:
        return self.value.startswith(DESCENDING_PREFIX)
