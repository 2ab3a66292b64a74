"""Guacamole SDK for Python.

Async client for the resource collections of the Guacamole REST API.

Public API:
    GuacClient - User-facing client (``client.users``, ``client.user_groups``)
    guac_sdk.models - Resource and patch models
    guac_sdk.exceptions - Error hierarchy

Internal (not for direct use):
    _internal.dispatcher - Authenticated single-attempt request dispatch
"""

from guac_sdk._version import __version__
from guac_sdk.auth import CredentialContext, StaticCredentials
from guac_sdk.cache import CacheService, ResponseCache
from guac_sdk.client import GuacClient
from guac_sdk.models import DirectoryPatch, DirectoryPatchOutcome, User, UserGroup

__all__ = [
    "__version__",
    "CacheService",
    "CredentialContext",
    "DirectoryPatch",
    "DirectoryPatchOutcome",
    "GuacClient",
    "ResponseCache",
    "StaticCredentials",
    "User",
    "UserGroup",
]
