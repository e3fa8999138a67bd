"""Event payload parsing."""

import json
from typing import Any

from loginnotify.core.exceptions import ParseError

RECOGNIZED_KEYS = frozenset({"submittedAt", "loginPhone", "loginPin", "otp", "device"})


def _as_mapping(value: Any) -> dict[str, Any]:
    if isinstance(value, dict):
        return value
    if isinstance(value, (list, tuple)):
        return {str(index): item for index, item in enumerate(value)}
    return {}


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_payload(body: str | bytes | Any | None) -> dict[str, Any]:
    """Turn a request body into an ordered event payload.

    Raw bodies (``str`` or ``bytes``) are decoded as JSON, an empty body
    counts as ``{}``. ``NaN`` and ``Infinity`` are rejected and nesting
    deeper than the interpreter recursion limit is a parse error. Any other
    value is taken as already structured.

    Raises:
        ParseError: If a raw body is not valid JSON.
    """
    if isinstance(body, (str, bytes, bytearray)):
        try:
            parsed = json.loads(body or "{}", parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            raise ParseError(str(e)) from e
    else:
        parsed = {} if body is None else body
    return _as_mapping(parsed)


def extra_keys(payload: dict[str, Any]) -> list[str]:
    """Keys outside the recognized set, in the order they were received."""
    return [key for key in payload if key not in RECOGNIZED_KEYS]
