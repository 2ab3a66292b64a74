"""Pydantic models for user accounts and user groups.

Only the identifying key is interpreted by the SDK. Every other field is
passed through to the server as received, including fields this version of
the models does not declare.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class User(BaseModel):
    """A user account, keyed by username.

    Required fields:
        username: Unique name of the user, used to build URLs

    Optional fields:
        password: New password, only sent when creating or replacing a user
        attributes: Arbitrary attributes defined by the data source
        last_active: Time the user was last active (epoch millis, read-only)
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    username: str
    password: str | None = None
    attributes: dict[str, str | None] = Field(default_factory=dict)
    last_active: int | None = Field(default=None, alias="lastActive")


class UserGroup(BaseModel):
    """A group of users, keyed by identifier."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    identifier: str
    attributes: dict[str, str | None] = Field(default_factory=dict)


class UserPasswordUpdate(BaseModel):
    """Body of a password change request.

    Never cached, and redacted from debug output.
    """

    model_config = ConfigDict(populate_by_name=True)

    old_password: str = Field(alias="oldPassword")
    new_password: str = Field(alias="newPassword")

    @field_validator("old_password", "new_password")
    @classmethod
    def password_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("password must not be empty")
        return v

    def __repr__(self) -> str:
        return "UserPasswordUpdate(old_password=[REDACTED], new_password=[REDACTED])"
