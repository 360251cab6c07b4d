"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.inventory.app.command import (
    create_product_use_case,
    delete_product_use_case,
    register_user_use_case,
    update_product_use_case,
)
from src.service.inventory.app.query import (
    authenticate_user_use_case,
    get_product_stats_use_case,
    get_product_use_case,
    list_products_use_case,
)
from src.service.inventory.driving_adapter.http_controller import auth_controller
from src.service.inventory.driving_adapter.http_controller.auth import auth_guard


WIRE_MODULES: list[ModuleType] = [
    create_product_use_case,
    update_product_use_case,
    delete_product_use_case,
    register_user_use_case,
    authenticate_user_use_case,
    get_product_use_case,
    list_products_use_case,
    get_product_stats_use_case,
    auth_controller,
    auth_guard,
]
