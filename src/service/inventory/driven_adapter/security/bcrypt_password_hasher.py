import bcrypt
from pydantic import SecretStr

from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_password_hasher import IPasswordHasher


BCRYPT_MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(IPasswordHasher):
    """Concrete bcrypt implementation of IPasswordHasher"""

    @Logger.io
    def hash_password(self, *, plain_password: SecretStr) -> str:
        password_bytes = plain_password.get_secret_value().encode('utf-8')
        salt = bcrypt.gensalt()
        hashed = bcrypt.hashpw(password_bytes, salt)
        return hashed.decode('utf-8')

    @Logger.io
    def verify_password(self, *, plain_password: SecretStr, hashed_password: str) -> bool:
        password_bytes = plain_password.get_secret_value().encode('utf-8')
        if len(password_bytes) > BCRYPT_MAX_PASSWORD_BYTES:
            # registration never stores such a password
            return False
        hashed_bytes = hashed_password.encode('utf-8')
        try:
            return bcrypt.checkpw(password_bytes, hashed_bytes)
        except ValueError:
            # malformed stored hash
            return False
