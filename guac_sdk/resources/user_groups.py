"""Client for user groups."""

from collections.abc import Sequence
from typing import Any

from guac_sdk.models.patch import DirectoryPatch, DirectoryPatchOutcome
from guac_sdk.models.users import UserGroup
from guac_sdk.resources.base import ResourceClient


class UserGroupsClient(ResourceClient[UserGroup]):
    """Operations on the user groups of a data source."""

    resource_type = "userGroups"
    key_field = "identifier"
    model = UserGroup

    async def get_user_groups(
        self,
        data_source: str,
        permission_types: Sequence[str] | None = None,
    ) -> dict[str, UserGroup]:
        return await self.get_many(data_source, permission_types)

    async def get_user_group(self, data_source: str, identifier: str) -> UserGroup:
        return await self.get_one(data_source, identifier)

    async def create_user_group(
        self, data_source: str, group: UserGroup | dict[str, Any]
    ) -> None:
        await self.create(data_source, group)

    async def save_user_group(
        self, data_source: str, group: UserGroup | dict[str, Any]
    ) -> None:
        await self.update(data_source, group)

    async def delete_user_group(
        self, data_source: str, group: UserGroup | dict[str, Any] | str
    ) -> None:
        await self.delete(data_source, group)

    async def patch_user_groups(
        self,
        data_source: str,
        patches: Sequence[DirectoryPatch | dict[str, Any]],
    ) -> list[DirectoryPatchOutcome]:
        return await self.patch_many(data_source, patches)
