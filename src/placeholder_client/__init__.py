"""
Placeholder Client Library.

Endpoint helpers for testing a placeholder REST service: typed CRUD
operations with status-code assertions.

Example usage:
    ```python
    from http import HTTPStatus
    from placeholder_client import CommentDto, CommentEndpoint, RequestSpecification

    spec = RequestSpecification(base_url="https://jsonplaceholder.typicode.com")
    comments = CommentEndpoint(spec)

    # Typed call, asserts 201 Created
    created = comments.create(CommentDto(post_id=1, body="nice"))

    # Negative path, returns the validated response
    comments.get_by_id_with_status(0, HTTPStatus.NOT_FOUND)
    ```
"""

__version__ = "0.1.0"

# Connection configuration
from placeholder_client.config import (
    PlaceholderSettings,
    configure_settings,
    get_settings,
    reset_settings,
)
from placeholder_client.specification import RequestSpecification

# Request helper and responses
from placeholder_client.http import WebEndpoint
from placeholder_client.paths import resolve_path
from placeholder_client.response import ExtractableResponse, ValidatableResponse

# Resource endpoints
from placeholder_client.endpoints import CommentEndpoint, ResourceEndpoint, UserEndpoint

# Data transfer objects
from placeholder_client.models import AddressDto, CommentDto, CompanyDto, GeoDto, UserDto

# Exceptions
from placeholder_client.exceptions import (
    PlaceholderClientError,
    StatusCodeMismatchError,
    DeserializationError,
    PathTemplateError,
    NetworkError,
    TimeoutError,
    ConnectionError,
)

__all__ = [
    # Version
    "__version__",
    # Configuration
    "PlaceholderSettings",
    "configure_settings",
    "get_settings",
    "reset_settings",
    "RequestSpecification",
    # Request helper
    "WebEndpoint",
    "resolve_path",
    "ExtractableResponse",
    "ValidatableResponse",
    # Endpoints
    "ResourceEndpoint",
    "CommentEndpoint",
    "UserEndpoint",
    # DTOs
    "CommentDto",
    "UserDto",
    "AddressDto",
    "GeoDto",
    "CompanyDto",
    # Exceptions
    "PlaceholderClientError",
    "StatusCodeMismatchError",
    "DeserializationError",
    "PathTemplateError",
    "NetworkError",
    "TimeoutError",
    "ConnectionError",
]
