"""Single-attempt request dispatcher with credential injection."""

import json
from typing import Any, Literal

import httpx
from pydantic import BaseModel, ConfigDict

from guac_sdk._internal.redaction import redact_payload
from guac_sdk.auth import TOKEN_HEADER, CredentialContext
from guac_sdk.exceptions import (
    GuacAuthExpiredError,
    GuacHttpError,
    GuacTransportError,
)

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

# Error types reported by the server that mean the token is no longer valid
AUTH_EXPIRED_TYPES: frozenset[str] = frozenset({"INVALID_CREDENTIALS"})


class RequestDescriptor(BaseModel):
    """Everything needed to perform one REST call.

    ``url`` is relative to the client's base URL and must already have its
    path segments percent-encoded.
    """

    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    url: str
    params: dict[str, list[str]] | None = None
    body: Any = None


class RequestDispatcher:
    """Performs REST calls on behalf of the resource clients.

    Every call reads the current token from the credential context and sends
    it as the ``Guacamole-Token`` header. Failures are translated into the
    SDK's exception hierarchy; ``httpx`` exceptions never escape.

    There is no retry logic here. A call is attempted exactly once.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        credentials: CredentialContext,
        *,
        debug: bool = False,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            http_client: Shared async HTTP client (owns base URL and timeout).
            credentials: Source of the auth token, read on every call.
            debug: Enable debug logging to stderr.
        """
        self._http_client = http_client
        self._credentials = credentials
        self._debug = debug

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            import sys

            print(f"[guac-sdk] {message}", file=sys.stderr)

    def _get_headers(self, has_body: bool) -> dict[str, str]:
        headers: dict[str, str] = {}
        token = self._credentials.get_current_token()
        if token:
            headers[TOKEN_HEADER] = token
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def dispatch(self, descriptor: RequestDescriptor) -> Any:
        """Send the request and return the decoded JSON response body.

        Args:
            descriptor: Method, URL, query parameters and body of the call.

        Returns:
            The decoded JSON body, or None if the response has no body.

        Raises:
            GuacTransportError: No response was received.
            GuacAuthExpiredError: The credentials were rejected.
            GuacHttpError: The server responded with any other failure.
        """
        has_body = descriptor.body is not None
        content = json.dumps(descriptor.body).encode("utf-8") if has_body else None

        self._log_debug(f"{descriptor.method} {descriptor.url}")
        if has_body:
            self._log_debug(f"Request body: {json.dumps(redact_payload(descriptor.body))}")

        try:
            response = await self._http_client.request(
                descriptor.method,
                descriptor.url,
                params=descriptor.params or None,
                content=content,
                headers=self._get_headers(has_body),
            )
        except httpx.TimeoutException as e:
            self._log_debug(f"{descriptor.method} {descriptor.url} timed out")
            raise GuacTransportError(f"Request timed out: {e}") from e
        except httpx.RequestError as e:
            self._log_debug(f"{descriptor.method} {descriptor.url} failed: {e}")
            raise GuacTransportError(f"Request failed: {e}") from e

        self._log_debug(f"{descriptor.method} {descriptor.url} -> {response.status_code}")

        if response.status_code >= 200 and response.status_code < 300:
            return self._decode_success(response)
        raise self._translate_error(response)

    def _decode_success(self, response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise GuacHttpError(
                "Malformed JSON in response body",
                status_code=response.status_code,
            ) from e

    def _translate_error(self, response: httpx.Response) -> GuacHttpError:
        """Build the exception for a non-2xx response."""
        error_body: dict[str, Any] = {}
        if response.content:
            try:
                data = response.json()
            except ValueError:
                data = None
            if isinstance(data, dict):
                error_body = data

        message = error_body.get("message") or response.reason_phrase or (
            f"HTTP {response.status_code}"
        )
        error_type = error_body.get("type")
        patches = error_body.get("patches")

        error_cls = GuacHttpError
        if response.status_code == 401 or error_type in AUTH_EXPIRED_TYPES:
            error_cls = GuacAuthExpiredError

        return error_cls(
            message,
            status_code=response.status_code,
            error_type=error_type,
            translatable_message=error_body.get("translatableMessage"),
            patches=patches if isinstance(patches, list) else None,
        )
