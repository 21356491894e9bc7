"""
Synchronous HTTP request helper for placeholder endpoints.

``WebEndpoint`` turns a verb, a path template with positional parameters and
an optional payload into a request against a ``RequestSpecification``:
- Path template resolution
- JSON serialization of pydantic payloads
- Transport error mapping
- Request/response logging

Requests are never retried.
"""

from typing import Any, Dict, Optional, Union
import logging

import httpx
from pydantic import BaseModel

from placeholder_client.exceptions import (
    ConnectionError as ClientConnectionError,
    NetworkError,
    TimeoutError as ClientTimeoutError,
)
from placeholder_client.paths import resolve_path
from placeholder_client.response import ValidatableResponse
from placeholder_client.specification import RequestSpecification

logger = logging.getLogger(__name__)

Payload = Union[BaseModel, Dict[str, Any], list]


def serialize_payload(payload: Optional[Payload]) -> Any:
    """Convert a payload to JSON-ready data using wire field names."""
    if payload is None:
        return None
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    return payload


class WebEndpoint:
    """
    Generic request helper shared by resource endpoints.

    Each call opens a short-lived httpx client from the given specification,
    sends one request and returns a ``ValidatableResponse``. The instance
    holds no per-request state.
    """

    def __init__(self, transport: Optional[httpx.BaseTransport] = None):
        """
        Initialize the helper.

        Args:
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``);
                httpx's default transport is used otherwise
        """
        self._transport = transport

    def _request(
        self,
        method: str,
        specification: RequestSpecification,
        template: str,
        *params: Any,
        payload: Optional[Payload] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> ValidatableResponse:
        """
        Make an HTTP request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            specification: Connection configuration
            template: Path template (e.g. "/users/{userID}")
            *params: Values for the template placeholders, left-to-right
            payload: JSON body (pydantic model, dict or list)
            headers: Additional headers for this request only

        Returns:
            ValidatableResponse wrapping the httpx response

        Raises:
            PathTemplateError: If the template cannot be resolved
            TimeoutError: On request timeout
            ConnectionError: On connection failures
            NetworkError: On any other transport failure
        """
        path = resolve_path(template, *params)
        json_data = serialize_payload(payload)
        url = specification.url_for(path)

        logger.debug(f"{method} {url}")
        try:
            with specification.create_client(self._transport) as client:
                response = client.request(
                    method,
                    path,
                    json=json_data,
                    headers=headers,
                )
        except httpx.TimeoutException as e:
            raise ClientTimeoutError(
                f"Request timed out: {method} {url}: {e}",
                details={"method": method, "url": url},
            ) from e
        except httpx.ConnectError as e:
            raise ClientConnectionError(
                f"Connection failed: {method} {url}: {e}",
                details={"method": method, "url": url},
            ) from e
        except httpx.TransportError as e:
            raise NetworkError(
                f"Request failed: {method} {url}: {e}",
                details={"method": method, "url": url},
            ) from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return ValidatableResponse(response)

    def get(
        self,
        specification: RequestSpecification,
        template: str,
        *params: Any,
        headers: Optional[Dict[str, str]] = None,
    ) -> ValidatableResponse:
        """Make a GET request."""
        return self._request("GET", specification, template, *params, headers=headers)

    def post(
        self,
        specification: RequestSpecification,
        template: str,
        payload: Optional[Payload] = None,
        *params: Any,
        headers: Optional[Dict[str, str]] = None,
    ) -> ValidatableResponse:
        """Make a POST request."""
        return self._request(
            "POST",
            specification,
            template,
            *params,
            payload=payload,
            headers=headers,
        )

    def put(
        self,
        specification: RequestSpecification,
        template: str,
        payload: Optional[Payload] = None,
        *params: Any,
        headers: Optional[Dict[str, str]] = None,
    ) -> ValidatableResponse:
        """Make a PUT request."""
        return self._request(
            "PUT",
            specification,
            template,
            *params,
            payload=payload,
            headers=headers,
        )

    def delete(
        self,
        specification: RequestSpecification,
        template: str,
        *params: Any,
        headers: Optional[Dict[str, str]] = None,
    ) -> ValidatableResponse:
        """Make a DELETE request."""
        return self._request("DELETE", specification, template, *params, headers=headers)
