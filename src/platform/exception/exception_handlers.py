import traceback
from typing import Any, Callable, Coroutine, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.platform.validation.validation_gate import to_violations

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response] | Response]

HTTP_STATUS_CODES = {
    status.HTTP_401_UNAUTHORIZED: 'UNAUTHORIZED',
    status.HTTP_403_FORBIDDEN: 'FORBIDDEN',
    status.HTTP_404_NOT_FOUND: 'NOT_FOUND',
    status.HTTP_405_METHOD_NOT_ALLOWED: 'METHOD_NOT_ALLOWED',
}


def error_envelope(
    *,
    status_code: int,
    message: str,
    code: str,
    details: Any = None,
    exc: Optional[BaseException] = None,
) -> JSONResponse:
    error: dict[str, Any] = {'message': message, 'code': code}
    if details is not None:
        error['details'] = details
    if exc is not None and settings.is_development:
        error['stack'] = ''.join(traceback.format_exception(exc))
    return JSONResponse(status_code=status_code, content={'success': False, 'error': error})


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = (
        exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc), status_code=500)
    )
    return error_envelope(
        status_code=error.status_code,
        message=error.message,
        code=error.code,
        details=error.details,
        exc=error,
    )


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    violations = ValidationError(details=to_violations(error.errors()))
    return error_envelope(
        status_code=violations.status_code,
        message=violations.message,
        code=violations.code,
        details=violations.details,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    error = (
        exc
        if isinstance(exc, StarletteHTTPException)
        else StarletteHTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR)
    )
    return error_envelope(
        status_code=error.status_code,
        message=str(error.detail),
        code=HTTP_STATUS_CODES.get(error.status_code, 'HTTP_ERROR'),
    )


def rate_limit_exceeded_handler(request: Request, exc: Exception) -> JSONResponse:
    # sync: SlowAPIMiddleware may call it directly, outside the exception middleware
    return error_envelope(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        message='Too many requests, please try again later.',
        code='RATE_LIMITED',
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if not getattr(exc, '_has_logged', False):
        Logger.base.opt(exception=exc).error(
            f'Unhandled {type(exc).__name__} on {request.method} {request.url.path}'
        )
    return error_envelope(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message='Internal Server Error',
        code='INTERNAL_ERROR',
        exc=exc,
    )


# Exception handler mapping
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    RequestValidationError: validation_error_handler,
    RateLimitExceeded: rate_limit_exceeded_handler,
    StarletteHTTPException: http_exception_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
