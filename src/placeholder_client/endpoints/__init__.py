"""
Resource endpoints for the placeholder service.
"""

from placeholder_client.endpoints.base import ResourceEndpoint
from placeholder_client.endpoints.comments import CommentEndpoint
from placeholder_client.endpoints.users import UserEndpoint

__all__ = [
    "ResourceEndpoint",
    "CommentEndpoint",
    "UserEndpoint",
]
