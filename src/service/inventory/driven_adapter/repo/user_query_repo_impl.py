from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.inventory.domain.entity.user_entity import UserEntity, UserRole
from src.service.inventory.driven_adapter.model.user_model import UserModel


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_email(self, email: str) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel).where(UserModel.email == email.strip().lower())
            )
            user_model = result.scalar_one_or_none()

            if not user_model:
                return None

            return self._model_to_entity(user_model)

    @Logger.io
    async def get_by_id(self, user_id: int) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            user_model = await session.get(UserModel, user_id)

            if not user_model:
                return None

            return self._model_to_entity(user_model)

    @Logger.io
    async def exists_by_email(self, email: str) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel.id).where(UserModel.email == email.strip().lower())
            )
            return result.scalar_one_or_none() is not None

    def _model_to_entity(self, user_model: UserModel) -> UserEntity:
        return UserEntity(
            id=user_model.id,
            email=user_model.email,
            hashed_password=user_model.hashed_password,
            role=UserRole(user_model.role),
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )
