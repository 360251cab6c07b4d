import json
from typing import Any

import pytest
from starlette.requests import Request
from starlette.responses import Response

from src.platform.config.core_setting import settings
from src.platform.exception.exception_handlers import (
    custom_error_handler,
    general_500_exception_handler,
)
from src.platform.exception.exceptions import ProductNotFoundError, StoreTimeoutError


def _request(path: str = '/api/v1/products') -> Request:
    return Request({'type': 'http', 'method': 'GET', 'path': path, 'headers': []})


def _body(response: Response) -> dict[str, Any]:
    return json.loads(bytes(response.body))


def _raise_and_catch(error: Exception) -> Exception:
    try:
        raise error
    except Exception as caught:
        return caught


@pytest.mark.unit
class TestUnexpectedErrors:
    async def test_envelope_without_stack_outside_development(
        self, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setattr(settings, 'ENVIRONMENT', 'production')

        response = await general_500_exception_handler(
            _request(), _raise_and_catch(RuntimeError('boom'))
        )

        assert response.status_code == 500
        assert _body(response) == {
            'success': False,
            'error': {'message': 'Internal Server Error', 'code': 'INTERNAL_ERROR'},
        }

    async def test_stack_only_in_development(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(settings, 'ENVIRONMENT', 'development')

        response = await general_500_exception_handler(
            _request(), _raise_and_catch(RuntimeError('boom'))
        )

        error = _body(response)['error']
        assert error['code'] == 'INTERNAL_ERROR'
        assert error['message'] == 'Internal Server Error'
        assert 'RuntimeError: boom' in error['stack']


@pytest.mark.unit
class TestDomainErrors:
    async def test_store_timeout_is_internal_error(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(settings, 'ENVIRONMENT', 'test')

        response = await custom_error_handler(_request(), StoreTimeoutError())

        assert response.status_code == 500
        assert _body(response)['error'] == {
            'message': 'Database operation timed out',
            'code': 'INTERNAL_ERROR',
        }

    async def test_domain_error_gets_stack_in_development(
        self, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setattr(settings, 'ENVIRONMENT', 'development')

        response = await custom_error_handler(
            _request(), _raise_and_catch(ProductNotFoundError())
        )

        error = _body(response)['error']
        assert response.status_code == 404
        assert error['code'] == 'PRODUCT_NOT_FOUND'
        assert 'ProductNotFoundError' in error['stack']
