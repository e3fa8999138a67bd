"""
LoginNotify Custom Exceptions

Each exception maps to one HTTP status and plain-text body returned by the
relay endpoint.
"""

from typing import Any


class LoginNotifyError(Exception):
    """Base exception for all LoginNotify errors."""

    status_code: int = 500
    response_text: str = "Internal Server Error"
    log_level: str = "error"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(LoginNotifyError):
    """Raised when the Telegram secrets are missing."""

    response_text = "Missing TELEGRAM_TOKEN or TELEGRAM_CHAT_ID"

    def __init__(self, present: dict[str, bool]) -> None:
        missing = [name for name, ok in present.items() if not ok]
        super().__init__(
            f"Missing env vars: {', '.join(missing)}",
            details=dict(present),
        )


# =============================================================================
# Payload Errors
# =============================================================================


class ParseError(LoginNotifyError):
    """Raised when the request body is not valid JSON."""

    status_code = 400
    response_text = "Invalid JSON"
    log_level = "warning"

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Invalid JSON body: {reason}",
            details={"reason": reason},
        )
        self.reason = reason


# =============================================================================
# Delivery Errors
# =============================================================================


class DeliveryError(LoginNotifyError):
    """Base exception for Telegram delivery failures."""

    response_text = "Failed to contact Telegram API"


class TelegramConnectionError(DeliveryError):
    """Raised when the Telegram API could not be reached."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Telegram connection failed: {reason}",
            details={"reason": reason},
        )
        self.reason = reason


class TelegramAPIError(DeliveryError):
    """Raised when the Telegram API answers with a non-2xx status."""

    status_code = 502

    def __init__(self, status: int, body: str) -> None:
        super().__init__(
            f"Telegram API rejected the message with status {status}",
            details={"telegram_status": status},
        )
        self.telegram_status = status
        self.body = body

    @property
    def response_text(self) -> str:  # type: ignore[override]
        return "Telegram API error: " + self.body
