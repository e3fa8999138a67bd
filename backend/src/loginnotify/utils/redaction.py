"""Redaction helpers for diagnostic logs. Raw PIN and OTP values never reach a log line."""

import json
from typing import Any

from loginnotify.services.message_builder import coerce_str

MASKED_KEYS = ("loginPin", "otp")

UNSERIALIZABLE_PAYLOAD = "[unserializable payload]"


def mask(value: Any) -> str:
    """Mask a secret-like value, keeping only its last two characters.

    >>> mask("abcd")
    '**cd'
    """
    if not value and not isinstance(value, (dict, list, tuple)):
        return ""
    s = coerce_str(value)
    if len(s) <= 2:
        return "*" * len(s)
    return "*" * (len(s) - 2) + s[-2:]


def masked_log_record(payload: dict[str, Any]) -> dict[str, Any]:
    """Shallow copy of the payload with PIN and OTP masked."""
    logged = dict(payload)
    for key in MASKED_KEYS:
        if logged.get(key) is not None:
            logged[key] = mask(logged[key])
    return logged


def render_for_log(payload: dict[str, Any]) -> str:
    """Pretty-print the masked payload as ASCII. Never raises."""
    try:
        return json.dumps(masked_log_record(payload), indent=2)
    except (TypeError, ValueError, RecursionError):
        return UNSERIALIZABLE_PAYLOAD
