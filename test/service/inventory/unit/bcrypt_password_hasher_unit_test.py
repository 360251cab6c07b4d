from pydantic import SecretStr
import pytest

from src.service.inventory.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


@pytest.fixture(scope='module')
def hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher()


@pytest.fixture(scope='module')
def stored_hash(hasher: BcryptPasswordHasher) -> str:
    return hasher.hash_password(plain_password=SecretStr('P@ssw0rd'))


@pytest.mark.unit
class TestBcryptPasswordHasher:
    def test_verifies_matching_password(self, hasher: BcryptPasswordHasher, stored_hash: str):
        assert hasher.verify_password(
            plain_password=SecretStr('P@ssw0rd'), hashed_password=stored_hash
        )
        assert not hasher.verify_password(
            plain_password=SecretStr('p@ssw0rd'), hashed_password=stored_hash
        )

    def test_multibyte_password_within_limit(self, hasher: BcryptPasswordHasher):
        password = SecretStr('é' * 36)  # 72 bytes

        hashed = hasher.hash_password(plain_password=password)

        assert hasher.verify_password(plain_password=password, hashed_password=hashed)

    def test_over_long_password_never_matches(
        self, hasher: BcryptPasswordHasher, stored_hash: str
    ):
        assert not hasher.verify_password(
            plain_password=SecretStr('é' * 40), hashed_password=stored_hash
        )

    def test_malformed_stored_hash(self, hasher: BcryptPasswordHasher):
        assert not hasher.verify_password(
            plain_password=SecretStr('P@ssw0rd'), hashed_password='not-a-bcrypt-hash'
        )
