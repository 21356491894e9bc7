"""Endpoint for the /comments resource."""

from placeholder_client.endpoints.base import ResourceEndpoint
from placeholder_client.models import CommentDto


class CommentEndpoint(ResourceEndpoint[CommentDto]):
    """
    Create, update, fetch and list comments.

    Example:
        comments = CommentEndpoint(specification)
        created = comments.create(CommentDto(post_id=1, body="nice"))
        comments.get_by_id_with_status(999, HTTPStatus.NOT_FOUND)
    """

    collection_path = "/comments"
    item_path = "/comments/{commentID}"
    model = CommentDto
    resource_name = "Comment"
