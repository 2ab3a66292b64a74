"""Public models for Guacamole REST resources."""

from guac_sdk.models.patch import DirectoryPatch, DirectoryPatchOutcome, PatchOperation
from guac_sdk.models.users import User, UserGroup, UserPasswordUpdate

__all__ = [
    "DirectoryPatch",
    "DirectoryPatchOutcome",
    "PatchOperation",
    "User",
    "UserGroup",
    "UserPasswordUpdate",
]
