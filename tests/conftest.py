"""Pytest configuration and fixtures for placeholder-client tests."""

import pytest
import httpx
import respx
from typing import Any, Optional

from placeholder_client.config import PlaceholderSettings
from placeholder_client.specification import RequestSpecification

pytest_plugins = ["pytester", "placeholder_client.pytest_plugin"]

BASE_URL = "http://placeholder.test"


# ============================================================================
# Helpers
# ============================================================================


def create_response(
    status_code: int = 200,
    json_data: Optional[Any] = None,
    text: str = "",
    method: str = "GET",
    path: str = "/comments",
) -> httpx.Response:
    """Create a real httpx.Response bound to a request."""
    request = httpx.Request(method, f"{BASE_URL}{path}")
    if json_data is not None:
        return httpx.Response(status_code, json=json_data, request=request)
    return httpx.Response(status_code, text=text, request=request)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture(scope="session")
def placeholder_settings():
    """Point the plugin fixtures at the mocked service."""
    return PlaceholderSettings(base_url=BASE_URL)


@pytest.fixture
def specification():
    """Default specification for testing."""
    return RequestSpecification(base_url=BASE_URL)


@pytest.fixture
def mock_api():
    """respx router mocking the placeholder service."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def comment_data():
    """A comment as the service returns it."""
    return {
        "postId": 1,
        "id": 1,
        "name": "id labore ex et quam laborum",
        "email": "Eliseo@gardner.biz",
        "body": "nice",
    }


@pytest.fixture
def comments_list():
    """A comment collection in server order."""
    return [
        {"postId": 1, "id": 3, "name": "third", "email": "c@example.com", "body": "c"},
        {"postId": 1, "id": 1, "name": "first", "email": "a@example.com", "body": "a"},
        {"postId": 2, "id": 2, "name": "second", "email": "b@example.com", "body": "b"},
    ]


@pytest.fixture
def user_data():
    """A user as the service returns it."""
    return {
        "id": 1,
        "name": "Leanne Graham",
        "username": "Bret",
        "email": "Sincere@april.biz",
        "address": {
            "street": "Kulas Light",
            "suite": "Apt. 556",
            "city": "Gwenborough",
            "zipcode": "92998-3874",
            "geo": {"lat": "-37.3159", "lng": "81.1496"},
        },
        "phone": "1-770-736-8031 x56442",
        "website": "hildegard.org",
        "company": {
            "name": "Romaguera-Crona",
            "catchPhrase": "Multi-layered client-server neural-net",
            "bs": "harness real-time e-markets",
        },
    }


@pytest.fixture
def users_list(user_data):
    """A user collection in server order."""
    return [
        user_data,
        {"id": 2, "name": "Ervin Howell", "username": "Antonette", "email": "Shanna@melissa.tv"},
    ]
