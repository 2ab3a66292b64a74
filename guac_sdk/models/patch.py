"""Pydantic models for atomic directory patches.

A PATCH request carries an ordered list of ``DirectoryPatch`` entries. The
server applies all of them or none. On success it answers with one
``DirectoryPatchOutcome`` per patch, in request order.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

PatchOperation = Literal["add", "remove", "replace"]


class DirectoryPatch(BaseModel):
    """A single change to a resource collection.

    Required fields:
        op: One of "add", "remove" or "replace"
        path: Target within the collection, e.g. "/" to add or "/alice"

    Optional fields:
        value: The resource to add or replace with (required for add/replace)
    """

    op: PatchOperation
    path: str
    value: Any = None

    @field_validator("path")
    @classmethod
    def path_is_absolute(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("path must start with '/'")
        return v

    @model_validator(mode="after")
    def value_present_when_needed(self) -> "DirectoryPatch":
        if self.op in ("add", "replace") and self.value is None:
            raise ValueError(f"'{self.op}' patch requires a value")
        return self

    def to_wire(self) -> dict[str, Any]:
        """Serialize for the request body, omitting an absent value."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class DirectoryPatchOutcome(BaseModel):
    """Result of one applied (or rejected) patch, as reported by the server."""

    model_config = ConfigDict(extra="allow")

    op: PatchOperation
    identifier: str | None = None
    path: str | None = None
