"""Resource collection clients."""

from guac_sdk.resources.base import ResourceClient, encode_segment
from guac_sdk.resources.user_groups import UserGroupsClient
from guac_sdk.resources.users import UsersClient

__all__ = [
    "ResourceClient",
    "UserGroupsClient",
    "UsersClient",
    "encode_segment",
]
