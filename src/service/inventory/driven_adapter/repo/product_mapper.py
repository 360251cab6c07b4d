from uuid import UUID

from src.platform.exception.exceptions import ProductNotFoundError
from src.service.inventory.domain.entity.product_entity import ProductEntity
from src.service.inventory.driven_adapter.model.product_model import ProductModel


def parse_product_id(product_id: str | UUID) -> UUID:
    """Malformed ids are indistinguishable from unknown ones."""
    if isinstance(product_id, UUID):
        return product_id
    try:
        return UUID(str(product_id))
    except ValueError:
        raise ProductNotFoundError()


def model_to_entity(product_model: ProductModel) -> ProductEntity:
    return ProductEntity(
        id=product_model.id,
        name=product_model.name,
        description=product_model.description,
        price=product_model.price,
        category=product_model.category,
        stock=product_model.stock,
        created_at=product_model.created_at,
        updated_at=product_model.updated_at,
    )
