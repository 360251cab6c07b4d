from typing import List

import attrs


AVERAGE_PRICE_DECIMALS = 2


def round_average(value: float | None) -> float:
    return round(float(value or 0), AVERAGE_PRICE_DECIMALS)


@attrs.define
class CategoryStatsEntity:
    category: str
    count: int
    average_price: float = attrs.field(converter=round_average)
    total_stock: int = 0


@attrs.define
class ProductStatsEntity:
    total_products: int
    average_price: float = attrs.field(converter=round_average)
    total_stock: int = 0
    by_category: List[CategoryStatsEntity] = attrs.field(factory=list)
