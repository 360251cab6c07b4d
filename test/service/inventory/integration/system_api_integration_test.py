from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import HEALTH, PRODUCT_BASE


@asynccontextmanager
async def no_op_lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield


@pytest.mark.integration
class TestSystemRoutes:
    def test_health(self, client: TestClient, clean_database: None):
        response = client.get(HEALTH)

        assert response.status_code == 200
        assert response.json() == {'status': 'healthy', 'service': settings.PROJECT_NAME}

    def test_unknown_route(self, client: TestClient, clean_database: None):
        response = client.get('/api/nowhere')

        assert response.status_code == 404
        body = response.json()
        assert body['success'] is False
        assert body['error']['code'] == 'NOT_FOUND'

    def test_method_not_allowed(self, client: TestClient, clean_database: None):
        response = client.patch(PRODUCT_BASE, json={})

        assert response.status_code == 405
        assert response.json()['error']['code'] == 'METHOD_NOT_ALLOWED'


@pytest.mark.integration
class TestSecurityHeaders:
    @pytest.mark.parametrize('path', [HEALTH, PRODUCT_BASE, '/api/nowhere'])
    def test_responses_carry_security_headers(
        self, client: TestClient, clean_database: None, path: str
    ):
        response = client.get(path)

        assert response.headers['x-content-type-options'] == 'nosniff'
        assert 'x-frame-options' in response.headers
        assert 'strict-transport-security' in response.headers

    def test_docs_page_keeps_its_own_policy(self, client: TestClient, clean_database: None):
        response = client.get('/docs')

        assert response.status_code == 200
        assert 'content-security-policy' not in response.headers


@pytest.mark.integration
class TestRateLimit:
    @pytest.fixture
    def limited_client(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(settings, 'RATE_LIMIT_ENABLED', True)
        monkeypatch.setattr(settings, 'RATE_LIMIT_DEFAULT', '3/minute')
        with TestClient(create_app(lifespan=no_op_lifespan)) as limited:
            yield limited

    def test_requests_over_the_limit_are_rejected(self, limited_client: TestClient):
        statuses = [limited_client.get(HEALTH).status_code for _ in range(3)]
        rejected = limited_client.get(HEALTH)

        assert statuses == [200, 200, 200]
        assert rejected.status_code == 429
        assert rejected.json() == {
            'success': False,
            'error': {
                'message': 'Too many requests, please try again later.',
                'code': 'RATE_LIMITED',
            },
        }

    def test_disabled_limiter_lets_everything_through(
        self, client: TestClient, clean_database: None
    ):
        statuses = {client.get(HEALTH).status_code for _ in range(10)}

        assert statuses == {200}
