"""
Response wrappers returned by the request helpers.

``ValidatableResponse`` asserts on the status code and hands out an
``ExtractableResponse`` for reading the body as typed models.
"""

from http import HTTPStatus
from typing import Any, Dict, List, Type, TypeVar, Union
import json
import logging

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from placeholder_client.exceptions import DeserializationError, StatusCodeMismatchError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

StatusLike = Union[HTTPStatus, int]


class ExtractableResponse:
    """Read access to a response body."""

    def __init__(self, response: httpx.Response):
        self._response = response

    @property
    def text(self) -> str:
        return self._response.text

    def json(self) -> Any:
        """
        Parse the body as JSON.

        Raises:
            DeserializationError: If the body is not valid JSON
        """
        try:
            return self._response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DeserializationError(
                "JSON",
                self.text,
                reason=str(e),
                status_code=self._response.status_code,
            ) from e

    def as_model(self, model: Type[T]) -> T:
        """
        Deserialize the body into a single model instance.

        Raises:
            DeserializationError: If the body does not fit the model
        """
        data = self.json()
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            raise DeserializationError(
                model.__name__,
                self.text,
                reason=str(e),
                status_code=self._response.status_code,
            ) from e

    def as_models(self, model: Type[T]) -> List[T]:
        """
        Deserialize a JSON array body into a list, keeping server order.

        Raises:
            DeserializationError: If the body is not an array of the model
        """
        data = self.json()
        try:
            return TypeAdapter(List[model]).validate_python(data)
        except PydanticValidationError as e:
            raise DeserializationError(
                f"List[{model.__name__}]",
                self.text,
                reason=str(e),
                status_code=self._response.status_code,
            ) from e


class ValidatableResponse:
    """
    A response that can be asserted on.

    ``status_code`` returns the same instance so checks can be chained:

        endpoint.get_by_id_with_status(1, HTTPStatus.OK).status_code(200).extract()
    """

    def __init__(self, response: httpx.Response):
        self._response = response

    @property
    def response(self) -> httpx.Response:
        """The underlying httpx response."""
        return self._response

    @property
    def status(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._response.headers)

    @property
    def text(self) -> str:
        return self._response.text

    def json(self) -> Any:
        return self.extract().json()

    def status_code(self, expected: StatusLike) -> "ValidatableResponse":
        """
        Assert the response status.

        Raises:
            StatusCodeMismatchError: If the actual status differs
        """
        expected = int(expected)
        actual = self._response.status_code
        if actual != expected:
            request = self._response.request
            logger.debug(f"Status mismatch: expected {expected}, got {actual}")
            raise StatusCodeMismatchError(
                expected,
                actual,
                method=request.method,
                url=str(request.url),
                body=self._response.text,
            )
        return self

    def extract(self) -> ExtractableResponse:
        return ExtractableResponse(self._response)

    def __repr__(self) -> str:
        request = self._response.request
        return f"ValidatableResponse({request.method} {request.url} -> {self.status})"
