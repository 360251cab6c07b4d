"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.inventory.driven_adapter.repo.product_command_repo_impl import (
    ProductCommandRepoImpl,
)
from src.service.inventory.driven_adapter.repo.product_query_repo_impl import (
    ProductQueryRepoImpl,
)
from src.service.inventory.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl
from src.service.inventory.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.inventory.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.inventory.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (engine bound to the running event loop, sessions bounded by a timeout)
    database = providers.Singleton(Database, config=config_service)

    # Repositories (stateless - use session_factory per-request)
    product_command_repo = providers.Singleton(
        ProductCommandRepoImpl, session_factory=database.provided.session
    )
    product_query_repo = providers.Singleton(
        ProductQueryRepoImpl, session_factory=database.provided.session
    )
    user_command_repo = providers.Singleton(
        UserCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl, session_factory=database.provided.session
    )

    # Security
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    jwt_auth = providers.Singleton(JwtAuth, config=config_service)


container = Container()