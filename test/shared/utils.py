from typing import Any

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import AUTH_LOGIN, AUTH_REGISTER, PRODUCT_BASE
from test.util_constant import DEFAULT_PASSWORD, TEST_EMAIL


def register_user(
    client: TestClient, email: str = TEST_EMAIL, password: str = DEFAULT_PASSWORD
) -> dict[str, Any]:
    response = client.post(AUTH_REGISTER, json={'email': email, 'password': password})
    assert response.status_code == 201, response.text
    return response.json()['data']


def login_user(
    client: TestClient, email: str = TEST_EMAIL, password: str = DEFAULT_PASSWORD
) -> str:
    response = client.post(AUTH_LOGIN, json={'email': email, 'password': password})
    assert response.status_code == 200, response.text
    return response.json()['data']['token']


def bearer(token: str) -> dict[str, str]:
    return {'Authorization': f'Bearer {token}'}


def create_product(client: TestClient, headers: dict[str, str], **fields: Any) -> dict[str, Any]:
    response = client.post(PRODUCT_BASE, json=fields, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()['data']
