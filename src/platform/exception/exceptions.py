from typing import Any, Optional


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    code: str = 'INTERNAL_ERROR'

    def __init__(
        self,
        message: str,
        status_code: int,
        *,
        code: Optional[str] = None,
        details: Any = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        if code is not None:
            self.code = code
        self.details = details
        super().__init__(message)


class ValidationError(CustomBaseError):
    code = 'VALIDATION_ERROR'

    def __init__(self, details: list[dict[str, Any]], message: str = 'Validation failed') -> None:
        super().__init__(message, 400, details=details)


class NoTokenError(CustomBaseError):
    code = 'NO_TOKEN'

    def __init__(self, message: str = 'Access denied. No token provided') -> None:
        super().__init__(message, 401)


class InvalidTokenError(CustomBaseError):
    code = 'INVALID_TOKEN'

    def __init__(self, message: str = 'Invalid token') -> None:
        super().__init__(message, 401)


class TokenExpiredError(CustomBaseError):
    code = 'TOKEN_EXPIRED'

    def __init__(self, message: str = 'Token expired') -> None:
        super().__init__(message, 401)


class InvalidCredentialsError(CustomBaseError):
    code = 'INVALID_CREDENTIALS'

    def __init__(self, message: str = 'Invalid email or password') -> None:
        super().__init__(message, 401)


class ProductNotFoundError(CustomBaseError):
    code = 'PRODUCT_NOT_FOUND'

    def __init__(self, message: str = 'Product not found') -> None:
        super().__init__(message, 404)


class DuplicateFieldError(CustomBaseError):
    code = 'DUPLICATE_FIELD'

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(
            f'{field} already exists', 400, details={'field': field, 'value': value}
        )


class StoreTimeoutError(CustomBaseError):
    code = 'INTERNAL_ERROR'

    def __init__(self, message: str = 'Database operation timed out') -> None:
        super().__init__(message, 500)
