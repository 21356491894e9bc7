"""
Pytest plugin providing placeholder endpoint fixtures.

Enable it from a conftest:

    pytest_plugins = ["placeholder_client.pytest_plugin"]

The base URL comes from ``--placeholder-base-url`` when given, otherwise from
``PLACEHOLDER_*`` environment settings.
"""

import pytest

from placeholder_client.config import PlaceholderSettings, get_settings
from placeholder_client.endpoints import CommentEndpoint, UserEndpoint
from placeholder_client.http import WebEndpoint
from placeholder_client.specification import RequestSpecification


def pytest_addoption(parser):
    """Add custom command line options for pytest."""
    parser.addoption(
        "--placeholder-base-url",
        action="store",
        default=None,
        help="Base URL of the placeholder service (overrides PLACEHOLDER_BASE_URL)"
    )


@pytest.fixture(scope="session")
def placeholder_settings(pytestconfig) -> PlaceholderSettings:
    """Settings for this session, with the command line base URL applied."""
    settings = get_settings()
    base_url = pytestconfig.getoption("--placeholder-base-url")
    if base_url:
        settings = settings.model_copy(update={"base_url": base_url})
    return settings


@pytest.fixture(scope="session")
def request_specification(placeholder_settings) -> RequestSpecification:
    return RequestSpecification.from_settings(placeholder_settings)


@pytest.fixture(scope="session")
def web_endpoint() -> WebEndpoint:
    return WebEndpoint()


@pytest.fixture
def comment_endpoint(request_specification, web_endpoint) -> CommentEndpoint:
    return CommentEndpoint(request_specification, web_endpoint)


@pytest.fixture
def user_endpoint(request_specification, web_endpoint) -> UserEndpoint:
    return UserEndpoint(request_specification, web_endpoint)
