"""Tests for the pytest plugin fixtures."""

import httpx

from placeholder_client.endpoints import CommentEndpoint, UserEndpoint
from placeholder_client.specification import RequestSpecification


class TestPluginFixtures:
    """Tests for fixtures provided to test suites."""

    def test_request_specification(self, request_specification):
        """Test the specification follows the session settings."""
        assert isinstance(request_specification, RequestSpecification)
        assert request_specification.base_url == "http://placeholder.test"

    def test_endpoints(self, comment_endpoint, user_endpoint, request_specification):
        """Test endpoints are bound to the session specification."""
        assert isinstance(comment_endpoint, CommentEndpoint)
        assert isinstance(user_endpoint, UserEndpoint)
        assert comment_endpoint.specification is request_specification

    def test_endpoint_fixture_against_mock(self, comment_endpoint, mock_api, comment_data):
        """Test a fixture-built endpoint talks to the mocked service."""
        mock_api.get("/comments/1").mock(return_value=httpx.Response(200, json=comment_data))
        assert comment_endpoint.get_by_id(1).body == "nice"


def test_base_url_option(pytester):
    """Test --placeholder-base-url overrides the environment."""
    pytester.makeconftest('pytest_plugins = ["placeholder_client.pytest_plugin"]')
    pytester.makepyfile(
        """
        def test_url(request_specification):
            assert request_specification.base_url == "http://option.local"
        """
    )

    result = pytester.runpytest("--placeholder-base-url", "http://option.local")

    result.assert_outcomes(passed=1)


def test_base_url_from_environment(pytester, monkeypatch):
    """Test the environment is used without the option."""
    from placeholder_client.config import reset_settings

    monkeypatch.setenv("PLACEHOLDER_BASE_URL", "http://env.local")
    reset_settings()
    pytester.makeconftest('pytest_plugins = ["placeholder_client.pytest_plugin"]')
    pytester.makepyfile(
        """
        def test_url(comment_endpoint):
            assert comment_endpoint.specification.base_url == "http://env.local"
        """
    )

    try:
        result = pytester.runpytest()
    finally:
        reset_settings()

    result.assert_outcomes(passed=1)
