"""Redaction of secrets from request bodies before they reach debug output."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "password",
    "oldpassword",
    "newpassword",
    "token",
    "authtoken",
    "secret",
    "credentials",
})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: Any) -> Any:
    """Recursively redact sensitive keys from a JSON body.

    Dicts are matched on lower-cased keys, so both ``password`` and
    ``oldPassword`` are caught. The original payload is never mutated.

    Args:
        payload: A JSON-serializable value (dict, list or scalar).

    Returns:
        A copy of the payload with sensitive values replaced by "[REDACTED]".
    """
    if isinstance(payload, dict):
        result = {}
        for key, value in payload.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = redact_payload(value)
        return result
    elif isinstance(payload, list):
        return [redact_payload(item) for item in payload]
    else:
        return payload
