"""Credential context consumed by the request dispatcher.

The SDK never obtains or stores credentials itself. Whatever owns the
session (a login flow, a token file, an environment variable) implements
``CredentialContext`` and hands it to ``GuacClient``.
"""

from typing import Protocol, runtime_checkable

TOKEN_HEADER = "Guacamole-Token"


@runtime_checkable
class CredentialContext(Protocol):
    """Source of the auth token attached to every request."""

    def get_current_token(self) -> str | None:
        """Return the current token, or None to send the request anonymously."""
        ...


class StaticCredentials:
    """Credential context holding a single fixed token."""

    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def get_current_token(self) -> str | None:
        return self._token

    def __repr__(self) -> str:
        state = "set" if self._token else "anonymous"
        return f"StaticCredentials(token={state})"
