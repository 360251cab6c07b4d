from abc import ABC, abstractmethod

from src.service.inventory.domain.entity.user_entity import UserEntity


class IUserCommandRepo(ABC):
    """User Command Repository Abstract Interface - Handles write operations"""

    @abstractmethod
    async def create(self, user_entity: UserEntity) -> UserEntity:
        """Persist a new user; DuplicateFieldError if the email is taken."""
        pass
