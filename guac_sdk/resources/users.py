"""Client for user accounts."""

from collections.abc import Sequence
from typing import Any

from guac_sdk.models.patch import DirectoryPatch, DirectoryPatchOutcome
from guac_sdk.models.users import User
from guac_sdk.resources.base import ResourceClient


class UsersClient(ResourceClient[User]):
    """Operations on the users of a data source.

    Example:
        users = await client.users.get_users("postgresql", ["ADMINISTER"])
        await client.users.update_user_password("postgresql", "alice", "old", "new")
    """

    resource_type = "users"
    key_field = "username"
    model = User

    async def get_users(
        self,
        data_source: str,
        permission_types: Sequence[str] | None = None,
    ) -> dict[str, User]:
        """Get all users, keyed by username, optionally filtered by permission."""
        return await self.get_many(data_source, permission_types)

    async def get_user(self, data_source: str, username: str) -> User:
        """Get the user having the given username."""
        return await self.get_one(data_source, username)

    async def create_user(self, data_source: str, user: User | dict[str, Any]) -> None:
        await self.create(data_source, user)

    async def save_user(self, data_source: str, user: User | dict[str, Any]) -> None:
        await self.update(data_source, user)

    async def delete_user(
        self, data_source: str, user: User | dict[str, Any] | str
    ) -> None:
        await self.delete(data_source, user)

    async def update_user_password(
        self,
        data_source: str,
        username: str,
        old_password: str,
        new_password: str,
    ) -> None:
        """Change a user's password. The old password must match."""
        await self.change_credential(data_source, username, old_password, new_password)

    async def patch_users(
        self,
        data_source: str,
        patches: Sequence[DirectoryPatch | dict[str, Any]],
    ) -> list[DirectoryPatchOutcome]:
        """Apply patches to the users of a data source, all or nothing."""
        return await self.patch_many(data_source, patches)
