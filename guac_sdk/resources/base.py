"""Generic client for one REST resource collection.

Every resource collection of the REST API has the same shape:

    api/session/data/<dataSource>/<resourceType>          collection
    api/session/data/<dataSource>/<resourceType>/<key>    single resource

``ResourceClient`` implements the request, caching and invalidation
protocol once. Subclasses only name the resource type, its key field and
its model.

Cache contract:
    - Reads (``get_many``, ``get_one``) are served from the cache when
      possible and populate it otherwise.
    - Writes never read the cache. After a write *succeeds*, the whole cache
      for the resource type is cleared, for every data source. A failed write
      leaves the cache untouched.
"""

from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from guac_sdk._internal.dispatcher import RequestDescriptor, RequestDispatcher
from guac_sdk.cache import ResponseCache
from guac_sdk.exceptions import GuacCacheError, GuacRequestError, GuacValidationError
from guac_sdk.models.patch import DirectoryPatch, DirectoryPatchOutcome
from guac_sdk.models.users import UserPasswordUpdate

ModelT = TypeVar("ModelT", bound=BaseModel)
T = TypeVar("T")

API_DATA_ROOT = "api/session/data"


def encode_segment(value: str) -> str:
    """Percent-encode one URL path segment, including any '/'."""
    return quote(value, safe="")


class ResourceClient(Generic[ModelT]):
    """Client for one resource collection, generic over its model.

    Subclasses set:
        resource_type: Path segment of the collection (e.g. "users").
        key_field: Model field holding the resource key (e.g. "username").
        model: Pydantic model of a single resource.
    """

    resource_type: str
    key_field: str
    model: type[ModelT]

    def __init__(
        self,
        dispatcher: RequestDispatcher,
        cache: ResponseCache,
        *,
        debug: bool = False,
    ) -> None:
        """Initialize the resource client.

        Args:
            dispatcher: Performs authenticated requests.
            cache: Read cache for this resource type.
            debug: Enable debug logging to stderr.
        """
        self._dispatcher = dispatcher
        self._cache = cache
        self._debug = debug

    @property
    def cache(self) -> ResponseCache:
        return self._cache

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            import sys

            print(f"[guac-sdk:{self.resource_type}] {message}", file=sys.stderr)

    # =========================================================================
    # URL construction
    # =========================================================================

    def _collection_url(self, data_source: str) -> str:
        _require_identifier(data_source, "data source")
        return f"{API_DATA_ROOT}/{encode_segment(data_source)}/{self.resource_type}"

    def _item_url(self, data_source: str, key: str) -> str:
        _require_identifier(key, self.key_field)
        return f"{self._collection_url(data_source)}/{encode_segment(key)}"

    # =========================================================================
    # Request helpers
    # =========================================================================

    async def _read(
        self,
        descriptor: RequestDescriptor,
        parse: Callable[[Any], T],
    ) -> T:
        """Serve a GET from the cache, or fetch, parse and cache it."""
        key = _cache_key(descriptor)
        cached = self._cache.get(key)
        if cached is not None:
            self._log_debug(f"Cache hit: {key}")
            return parse(cached)

        payload = await self._dispatcher.dispatch(descriptor)
        result = parse(payload)

        try:
            self._cache.put(key, payload)
        except GuacCacheError as e:
            self._log_debug(f"Not caching {key}: {e}")
        return result

    async def _write(self, descriptor: RequestDescriptor) -> Any:
        """Perform a mutating request and invalidate the cache on success."""
        result = await self._dispatcher.dispatch(descriptor)
        self._cache.remove_all()
        self._log_debug(f"Cache cleared after {descriptor.method} {descriptor.url}")
        return result

    def _coerce(self, resource: ModelT | dict[str, Any]) -> ModelT:
        if isinstance(resource, self.model):
            return resource
        try:
            return self.model.model_validate(resource)
        except ValidationError as e:
            raise GuacValidationError(f"Invalid {self.model.__name__}: {e}") from e

    def _key_of(self, resource: ModelT) -> str:
        key = getattr(resource, self.key_field, None)
        _require_identifier(key, self.key_field)
        return key  # type: ignore[return-value]

    def _to_body(self, resource: ModelT) -> dict[str, Any]:
        data = resource.model_dump(mode="json", by_alias=True)
        return {k: v for k, v in data.items() if v is not None}

    def _parse_one(self, payload: Any) -> ModelT:
        try:
            return self.model.model_validate(payload)
        except ValidationError as e:
            raise GuacRequestError(
                f"Unexpected {self.resource_type} response: {e}"
            ) from e

    def _parse_many(self, payload: Any) -> dict[str, ModelT]:
        if not isinstance(payload, dict):
            raise GuacRequestError(
                f"Unexpected {self.resource_type} response format: {type(payload).__name__}"
            )
        return {key: self._parse_one(value) for key, value in payload.items()}

    # =========================================================================
    # Operations
    # =========================================================================

    async def get_many(
        self,
        data_source: str,
        permission_types: Sequence[str] | None = None,
    ) -> dict[str, ModelT]:
        """Get all resources of the collection, keyed by resource key.

        Args:
            data_source: Identifier of the data source holding the resources.
            permission_types: If given, only resources for which the current
                user has at least one of these permissions are returned
                (e.g. "READ", "UPDATE", "DELETE", "ADMINISTER").

        Returns:
            Mapping of resource key to resource.
        """
        params = None
        if isinstance(permission_types, str):
            permission_types = [permission_types]
        if permission_types:
            params = {"permission": list(dict.fromkeys(permission_types))}

        descriptor = RequestDescriptor(
            method="GET",
            url=self._collection_url(data_source),
            params=params,
        )
        return await self._read(descriptor, self._parse_many)

    async def get_one(self, data_source: str, key: str) -> ModelT:
        """Get the single resource with the given key.

        Raises:
            GuacHttpError: The resource does not exist (404) or another
                server failure occurred.
        """
        descriptor = RequestDescriptor(method="GET", url=self._item_url(data_source, key))
        return await self._read(descriptor, self._parse_one)

    async def create(self, data_source: str, resource: ModelT | dict[str, Any]) -> None:
        """Create a new resource. The resource must carry its key."""
        model = self._coerce(resource)
        self._key_of(model)
        await self._write(
            RequestDescriptor(
                method="POST",
                url=self._collection_url(data_source),
                body=self._to_body(model),
            )
        )

    async def update(self, data_source: str, resource: ModelT | dict[str, Any]) -> None:
        """Replace an existing resource, identified by its key."""
        model = self._coerce(resource)
        await self._write(
            RequestDescriptor(
                method="PUT",
                url=self._item_url(data_source, self._key_of(model)),
                body=self._to_body(model),
            )
        )

    async def delete(
        self, data_source: str, resource: ModelT | dict[str, Any] | str
    ) -> None:
        """Delete a resource, given either the resource or its key."""
        if isinstance(resource, str):
            key = resource
        else:
            key = self._key_of(self._coerce(resource))
        await self._write(
            RequestDescriptor(method="DELETE", url=self._item_url(data_source, key))
        )

    async def change_credential(
        self,
        data_source: str,
        key: str,
        old_secret: str,
        new_secret: str,
    ) -> None:
        """Change the password of the resource with the given key.

        The secrets are sent once and never cached or logged.

        Raises:
            GuacValidationError: Either secret is missing.
            GuacHttpError: The old secret did not match, or another failure.
        """
        try:
            update = UserPasswordUpdate(old_password=old_secret, new_password=new_secret)
        except ValidationError:
            raise GuacValidationError("Both old and new passwords are required") from None

        await self._write(
            RequestDescriptor(
                method="PUT",
                url=f"{self._item_url(data_source, key)}/password",
                body=update.model_dump(by_alias=True),
            )
        )

    async def patch_many(
        self,
        data_source: str,
        patches: Sequence[DirectoryPatch | dict[str, Any]],
    ) -> list[DirectoryPatchOutcome]:
        """Apply an ordered list of patches to the collection atomically.

        If any patch is rejected by the server, none of them are applied and
        the cache is left untouched.

        Args:
            data_source: Identifier of the data source holding the resources.
            patches: Patches to apply, in order.

        Returns:
            One outcome per patch, in the same order as the patches.

        Raises:
            GuacValidationError: The patch list is empty or malformed.
            GuacHttpError: The server rejected the patch set. ``patches`` on
                the error carries the server's per-patch outcomes.
        """
        if not patches:
            raise GuacValidationError("Patch set must not be empty")

        validated: list[DirectoryPatch] = []
        for index, patch in enumerate(patches):
            if isinstance(patch, DirectoryPatch):
                validated.append(patch)
                continue
            try:
                validated.append(DirectoryPatch.model_validate(patch))
            except ValidationError as e:
                raise GuacValidationError(f"Invalid patch at index {index}: {e}") from e

        payload = await self._write(
            RequestDescriptor(
                method="PATCH",
                url=self._collection_url(data_source),
                body=[patch.to_wire() for patch in validated],
            )
        )
        return _parse_outcomes(payload)


def _require_identifier(value: Any, name: str) -> None:
    if not isinstance(value, str) or not value:
        raise GuacValidationError(f"{name} must be a non-empty string")


def _cache_key(descriptor: RequestDescriptor) -> str:
    """Cache key of a GET request: its path plus encoded query string."""
    query = str(httpx.QueryParams(descriptor.params or {}))
    return f"{descriptor.url}?{query}" if query else descriptor.url


def _parse_outcomes(payload: Any) -> list[DirectoryPatchOutcome]:
    if payload is None:
        return []
    outcomes = payload.get("patches", []) if isinstance(payload, dict) else payload
    if not isinstance(outcomes, list):
        raise GuacRequestError(f"Unexpected patch response format: {type(outcomes).__name__}")
    try:
        return [DirectoryPatchOutcome.model_validate(item) for item in outcomes]
    except ValidationError as e:
        raise GuacRequestError(f"Unexpected patch response: {e}") from e
