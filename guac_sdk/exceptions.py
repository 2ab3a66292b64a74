"""Public exceptions for the Guacamole SDK."""

from typing import Any


class GuacError(Exception):
    """Base exception for all Guacamole SDK errors."""


class GuacConfigError(GuacError):
    """Configuration error (missing env vars, invalid config)."""


class GuacValidationError(GuacError):
    """Invalid input detected before any request was sent."""


class GuacCacheError(GuacError):
    """Error storing a response in the local cache."""


class GuacCacheFullError(GuacCacheError):
    """The cache has reached its configured capacity."""


class GuacRequestError(GuacError):
    """A request to the REST API failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class GuacTransportError(GuacRequestError):
    """No response was received (connection failure, timeout)."""


class GuacHttpError(GuacRequestError):
    """The server responded with a non-2xx status.

    Attributes:
        status_code: HTTP status of the response.
        message: Human-readable message supplied by the server.
        error_type: Error type reported by the server (e.g. "NOT_FOUND",
            "PERMISSION_DENIED", "BAD_REQUEST"), if any.
        translatable_message: Translation key and variables for the message,
            if the server supplied them.
        patches: Per-patch outcomes for a rejected PATCH request.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        *,
        error_type: str | None = None,
        translatable_message: dict[str, Any] | None = None,
        patches: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.error_type = error_type
        self.translatable_message = translatable_message
        self.patches = patches


class GuacAuthExpiredError(GuacHttpError):
    """The current credentials were rejected and must be renewed."""
