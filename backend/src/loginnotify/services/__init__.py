"""LoginNotify services."""

from loginnotify.services.message_builder import build_message, esc_html, to_safe_string
from loginnotify.services.payload import RECOGNIZED_KEYS, extra_keys, parse_payload
from loginnotify.services.telegram_notifier import (
    TelegramConfig,
    TelegramNotifier,
    TelegramResponse,
)

__all__ = [
    "RECOGNIZED_KEYS",
    "TelegramConfig",
    "TelegramNotifier",
    "TelegramResponse",
    "build_message",
    "esc_html",
    "extra_keys",
    "parse_payload",
    "to_safe_string",
]
