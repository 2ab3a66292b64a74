"""User-facing client for the Guacamole REST API.

Example usage:
    from guac_sdk import GuacClient, User

    async with GuacClient("https://guac.example.com/guacamole/", token="...") as client:
        users = await client.users.get_users("postgresql")
        await client.users.create_user("postgresql", User(username="alice"))
"""

import os

import httpx

from guac_sdk._internal.dispatcher import RequestDispatcher
from guac_sdk._internal.http import create_http_client
from guac_sdk.auth import CredentialContext, StaticCredentials
from guac_sdk.cache import CacheService
from guac_sdk.exceptions import GuacConfigError
from guac_sdk.resources.user_groups import UserGroupsClient
from guac_sdk.resources.users import UsersClient

DEFAULT_TIMEOUT_MS = 30000


class GuacClient:
    """Client for the resource collections of one Guacamole deployment.

    The resource clients share one HTTP connection pool, one dispatcher and
    one set of caches. Use ``GuacClient.from_env()`` to configure the client
    from environment variables.
    """

    def __init__(
        self,
        base_url: str,
        *,
        credentials: CredentialContext | None = None,
        token: str | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        max_cache_entries: int | None = None,
        http_client: httpx.AsyncClient | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Base URL of the web application, e.g.
                "https://guac.example.com/guacamole/".
            credentials: Source of the auth token. Takes precedence over token.
            token: Fixed auth token, used when no credentials are given.
            timeout_ms: Request timeout in milliseconds.
            max_cache_entries: Per-resource-type cache capacity, or None for
                unbounded.
            http_client: Pre-built async HTTP client. The caller keeps
                ownership and must close it.
            debug: Enable debug logging to stderr.
        """
        if not base_url:
            raise GuacConfigError("base_url is required")
        if credentials is not None and token is not None:
            raise GuacConfigError("Pass either credentials or token, not both")

        self._base_url = base_url
        self._credentials = credentials or StaticCredentials(token)
        self._timeout_ms = timeout_ms
        self._debug = debug

        self._owns_http_client = http_client is None
        self._http_client = http_client or create_http_client(
            timeout=timeout_ms / 1000,
            base_url=base_url,
        )
        self._dispatcher = RequestDispatcher(
            self._http_client, self._credentials, debug=debug
        )
        self._caches = CacheService(max_entries=max_cache_entries)

        self._users = UsersClient(self._dispatcher, self._caches.get("users"), debug=debug)
        self._user_groups = UserGroupsClient(
            self._dispatcher, self._caches.get("userGroups"), debug=debug
        )

    @classmethod
    def from_env(cls) -> "GuacClient":
        """Create a client from environment variables.

        Required environment variables:
            GUAC_BASE_URL: Base URL of the web application.

        Optional environment variables:
            GUAC_AUTH_TOKEN: Auth token. Requests are anonymous without it.
            GUAC_TIMEOUT_MS: Request timeout in milliseconds.
            GUAC_CACHE_MAX_ENTRIES: Per-resource-type cache capacity.
            GUAC_DEBUG: Set to "1" to enable debug logging.

        Raises:
            GuacConfigError: GUAC_BASE_URL is not set.
            ValueError: A numeric variable is not a valid integer.
        """
        base_url = os.environ.get("GUAC_BASE_URL")
        if not base_url:
            raise GuacConfigError("GUAC_BASE_URL is not set")

        token = os.environ.get("GUAC_AUTH_TOKEN") or None
        timeout_ms = int(os.environ.get("GUAC_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))
        max_entries_env = os.environ.get("GUAC_CACHE_MAX_ENTRIES")
        max_cache_entries = int(max_entries_env) if max_entries_env else None
        debug = os.environ.get("GUAC_DEBUG", "") == "1"

        return cls(
            base_url,
            token=token,
            timeout_ms=timeout_ms,
            max_cache_entries=max_cache_entries,
            debug=debug,
        )

    @property
    def users(self) -> UsersClient:
        return self._users

    @property
    def user_groups(self) -> UserGroupsClient:
        return self._user_groups

    @property
    def caches(self) -> CacheService:
        return self._caches

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "GuacClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
