"""
Unit tests for registration and credential checks
"""

from unittest.mock import AsyncMock

from pydantic import SecretStr
import pytest

from src.platform.exception.exceptions import DuplicateFieldError, InvalidCredentialsError
from src.service.inventory.app.command.register_user_use_case import RegisterUserUseCase
from src.service.inventory.app.interface.i_password_hasher import IPasswordHasher
from src.service.inventory.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.inventory.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.inventory.app.query.authenticate_user_use_case import AuthenticateUserUseCase
from src.service.inventory.domain.entity.user_entity import UserEntity, UserRole


class StubPasswordHasher(IPasswordHasher):
    """Reversible stand-in for bcrypt so tests stay fast"""

    def hash_password(self, *, plain_password: SecretStr) -> str:
        return f'hashed::{plain_password.get_secret_value()}'

    def verify_password(self, *, plain_password: SecretStr, hashed_password: str) -> bool:
        return hashed_password == f'hashed::{plain_password.get_secret_value()}'


@pytest.fixture
def password_hasher() -> StubPasswordHasher:
    return StubPasswordHasher()


@pytest.fixture
def mock_user_command_repo() -> AsyncMock:
    repo = AsyncMock(spec=IUserCommandRepo)

    async def _create(user_entity: UserEntity) -> UserEntity:
        user_entity.id = 1
        return user_entity

    repo.create.side_effect = _create
    return repo


@pytest.fixture
def mock_user_query_repo() -> AsyncMock:
    repo = AsyncMock(spec=IUserQueryRepo)
    repo.exists_by_email.return_value = False
    return repo


@pytest.mark.unit
class TestRegisterUserUseCase:
    @pytest.mark.asyncio
    async def test_hashes_password_and_defaults_role(
        self,
        mock_user_command_repo: AsyncMock,
        mock_user_query_repo: AsyncMock,
        password_hasher: StubPasswordHasher,
    ):
        # Arrange
        use_case = RegisterUserUseCase(
            user_command_repo=mock_user_command_repo,
            user_query_repo=mock_user_query_repo,
            password_hasher=password_hasher,
        )

        # Act
        user = await use_case.register(email='New@Example.com', password='secret1')

        # Assert
        assert user.id == 1
        assert user.email == 'new@example.com'
        assert user.role is UserRole.USER
        assert user.hashed_password == 'hashed::secret1'
        mock_user_query_repo.exists_by_email.assert_awaited_once_with('new@example.com')

    @pytest.mark.asyncio
    async def test_duplicate_email(
        self,
        mock_user_command_repo: AsyncMock,
        mock_user_query_repo: AsyncMock,
        password_hasher: StubPasswordHasher,
    ):
        mock_user_query_repo.exists_by_email.return_value = True
        use_case = RegisterUserUseCase(
            user_command_repo=mock_user_command_repo,
            user_query_repo=mock_user_query_repo,
            password_hasher=password_hasher,
        )

        with pytest.raises(DuplicateFieldError) as exc_info:
            await use_case.register(email='taken@example.com', password='secret1')

        assert exc_info.value.details == {'field': 'email', 'value': 'taken@example.com'}
        mock_user_command_repo.create.assert_not_awaited()


@pytest.mark.unit
class TestAuthenticateUserUseCase:
    @pytest.fixture
    def stored_user(self) -> UserEntity:
        return UserEntity(id=7, email='user@example.com', hashed_password='hashed::secret1')

    @pytest.mark.asyncio
    async def test_valid_credentials(
        self,
        mock_user_query_repo: AsyncMock,
        password_hasher: StubPasswordHasher,
        stored_user: UserEntity,
    ):
        mock_user_query_repo.get_by_email.return_value = stored_user
        use_case = AuthenticateUserUseCase(
            user_query_repo=mock_user_query_repo, password_hasher=password_hasher
        )

        user = await use_case.authenticate(email='user@example.com', password='secret1')

        assert user is stored_user

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_fail_the_same_way(
        self,
        mock_user_query_repo: AsyncMock,
        password_hasher: StubPasswordHasher,
        stored_user: UserEntity,
    ):
        use_case = AuthenticateUserUseCase(
            user_query_repo=mock_user_query_repo, password_hasher=password_hasher
        )

        mock_user_query_repo.get_by_email.return_value = stored_user
        with pytest.raises(InvalidCredentialsError) as wrong_password:
            await use_case.authenticate(email='user@example.com', password='not-it')

        mock_user_query_repo.get_by_email.return_value = None
        with pytest.raises(InvalidCredentialsError) as unknown_email:
            await use_case.authenticate(email='ghost@example.com', password='secret1')

        assert wrong_password.value.message == unknown_email.value.message
        assert wrong_password.value.status_code == unknown_email.value.status_code == 401
