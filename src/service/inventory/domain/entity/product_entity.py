from datetime import datetime
from typing import Any, Optional
from uuid import UUID

import attrs


NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
PRICE_DECIMALS = 2

MUTABLE_FIELDS = frozenset({'name', 'description', 'price', 'category', 'stock'})


def round_price(value: float) -> float:
    return round(float(value), PRICE_DECIMALS)


def _strip(value: Optional[str]) -> Optional[str]:
    return value.strip() if isinstance(value, str) else value


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'Product {attribute.name} cannot be empty')


def _validate_name_length(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if len(value) > NAME_MAX_LENGTH:
        raise ValueError(f'Product name cannot exceed {NAME_MAX_LENGTH} characters')


def _validate_description(
    instance: object, attribute: attrs.Attribute, value: Optional[str]
) -> None:
    if value is not None and len(value) > DESCRIPTION_MAX_LENGTH:
        raise ValueError(f'Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters')


def _validate_price(instance: object, attribute: attrs.Attribute, value: float) -> None:
    if value <= 0:
        raise ValueError('Price must be positive')


def _validate_stock(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError('Stock must be an integer')
    if value < 0:
        raise ValueError('Stock cannot be negative')


@attrs.define
class ProductEntity:
    """
    Inventory item.

    The validators are a last-line invariant check for the store; request input is
    validated (with user-facing messages) before an entity is ever built.
    """

    name: str = attrs.field(
        converter=_strip, validator=[_validate_non_empty_string, _validate_name_length]
    )
    price: float = attrs.field(converter=round_price, validator=_validate_price)
    category: str = attrs.field(converter=_strip, validator=_validate_non_empty_string)
    stock: int = attrs.field(validator=_validate_stock)
    description: Optional[str] = attrs.field(
        default=None, converter=_strip, validator=_validate_description
    )
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_available(self) -> bool:
        return self.stock > 0

    def apply_changes(self, changes: dict[str, Any]) -> None:
        """Partial update; converters and validators run on every assignment."""
        unknown = set(changes) - MUTABLE_FIELDS
        if unknown:
            raise ValueError(f'Cannot update product fields: {", ".join(sorted(unknown))}')
        for field_name, value in changes.items():
            setattr(self, field_name, value)
