"""
Base class for resource endpoints.

A resource endpoint binds the shared ``WebEndpoint`` helper to one resource's
collection path (``/resources``) and item path (``/resources/{id}``), and
exposes typed CRUD operations plus ``*_with_status`` variants that return the
``ValidatableResponse`` for negative testing.
"""

from http import HTTPStatus
from typing import Generic, List, Optional, Type, TypeVar, Union
import logging

from pydantic import BaseModel

from placeholder_client.http import WebEndpoint
from placeholder_client.response import StatusLike, ValidatableResponse
from placeholder_client.specification import RequestSpecification

logger = logging.getLogger(__name__)

TModel = TypeVar("TModel", bound=BaseModel)

ResourceId = Union[int, str]


class ResourceEndpoint(Generic[TModel]):
    """
    Typed client for one REST resource.

    Subclasses set ``collection_path``, ``item_path``, ``model`` and
    ``resource_name``; a subclass missing any of them is rejected when it is
    defined. ``ResourceEndpoint`` itself cannot be instantiated.
    """

    collection_path: str
    item_path: str
    model: Type[TModel]
    resource_name: str

    _required_attributes = ("collection_path", "item_path", "model", "resource_name")

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        missing = [name for name in cls._required_attributes if not hasattr(cls, name)]
        if missing:
            raise TypeError(f"{cls.__name__} must define {', '.join(missing)}")
        if not (isinstance(cls.model, type) and issubclass(cls.model, BaseModel)):
            raise TypeError(f"{cls.__name__}.model must be a pydantic model class")

    def __init__(
        self,
        specification: RequestSpecification,
        web: Optional[WebEndpoint] = None,
    ):
        """
        Initialize the endpoint.

        Args:
            specification: Connection configuration used for every request
            web: Request helper; a default ``WebEndpoint`` is created if omitted

        Raises:
            TypeError: If called on ``ResourceEndpoint`` directly
        """
        if type(self) is ResourceEndpoint:
            raise TypeError("ResourceEndpoint must be subclassed for a concrete resource")
        self._specification = specification
        self._web = web or WebEndpoint()

    @property
    def specification(self) -> RequestSpecification:
        return self._specification

    # =========================================================================
    # Create
    # =========================================================================

    def create(self, data: TModel) -> TModel:
        """Create a resource, expecting 201 Created, and return the server copy."""
        return (
            self.create_with_status(data, HTTPStatus.CREATED)
            .extract()
            .as_model(self.model)
        )

    def create_with_status(self, data: TModel, status: StatusLike) -> ValidatableResponse:
        """Create a resource and assert the given status."""
        logger.info(f"Create new {self.resource_name}")
        return self._web.post(
            self._specification,
            self.collection_path,
            data,
        ).status_code(status)

    # =========================================================================
    # Update
    # =========================================================================

    def update(self, id: ResourceId, data: TModel) -> TModel:
        """Replace a resource, expecting 200 OK, and return the server copy."""
        return (
            self.update_with_status(id, data, HTTPStatus.OK)
            .extract()
            .as_model(self.model)
        )

    def update_with_status(
        self,
        id: ResourceId,
        data: TModel,
        status: StatusLike,
    ) -> ValidatableResponse:
        """Replace a resource and assert the given status."""
        logger.info(f"Update {self.resource_name} by id [{id}]")
        return self._web.put(
            self._specification,
            self.item_path,
            data,
            id,
        ).status_code(status)

    # =========================================================================
    # Read
    # =========================================================================

    def get_by_id(self, id: ResourceId) -> TModel:
        """Fetch one resource, expecting 200 OK."""
        return (
            self.get_by_id_with_status(id, HTTPStatus.OK)
            .extract()
            .as_model(self.model)
        )

    def get_by_id_with_status(self, id: ResourceId, status: StatusLike) -> ValidatableResponse:
        """Fetch one resource and assert the given status."""
        logger.info(f"Get {self.resource_name} by id [{id}]")
        return self._web.get(
            self._specification,
            self.item_path,
            id,
        ).status_code(status)

    def get_all(self) -> List[TModel]:
        """Fetch the whole collection, expecting 200 OK, in server order."""
        return (
            self.get_all_with_status(HTTPStatus.OK)
            .extract()
            .as_models(self.model)
        )

    def get_all_with_status(self, status: StatusLike) -> ValidatableResponse:
        """Fetch the whole collection and assert the given status."""
        logger.info(f"Get all {self.resource_name}s")
        return self._web.get(self._specification, self.collection_path).status_code(status)

    # =========================================================================
    # Delete
    # =========================================================================

    def delete(self, id: ResourceId) -> None:
        """Delete a resource, expecting 200 OK."""
        self.delete_with_status(id, HTTPStatus.OK)

    def delete_with_status(self, id: ResourceId, status: StatusLike) -> ValidatableResponse:
        """Delete a resource and assert the given status."""
        logger.info(f"Delete {self.resource_name} by id [{id}]")
        return self._web.delete(
            self._specification,
            self.item_path,
            id,
        ).status_code(status)
