"""Endpoint for the /users resource."""

from placeholder_client.endpoints.base import ResourceEndpoint
from placeholder_client.models import UserDto


class UserEndpoint(ResourceEndpoint[UserDto]):
    """Create, update, fetch and list users. Ids may be ints or strings."""

    collection_path = "/users"
    item_path = "/users/{userID}"
    model = UserDto
    resource_name = "User"
