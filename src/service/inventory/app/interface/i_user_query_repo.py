from abc import ABC, abstractmethod
from typing import Optional

from src.service.inventory.domain.entity.user_entity import UserEntity


class IUserQueryRepo(ABC):
    """User Query Repository Abstract Interface - Handles read operations"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[UserEntity]:
        """Includes the hashed password, for credential checks."""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        pass
