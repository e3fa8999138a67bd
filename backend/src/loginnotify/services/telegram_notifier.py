"""Telegram delivery service for login / OTP events."""

import json
from dataclasses import dataclass

import httpx

from loginnotify.config import Settings, get_settings
from loginnotify.core.exceptions import TelegramAPIError, TelegramConnectionError
from loginnotify.utils.logging import get_logger

logger = get_logger(__name__)

TELEGRAM_API_BASE = "https://api.telegram.org/bot{token}"

JSON_HEADERS = {"Content-Type": "application/json"}

LOG_TAG = "[sendTelegram]"


@dataclass(frozen=True)
class TelegramConfig:
    """Telegram bot configuration."""

    bot_token: str
    chat_id: str

    @classmethod
    def from_settings(cls, settings: Settings) -> "TelegramConfig":
        return cls(bot_token=settings.telegram_token, chat_id=settings.telegram_chat_id)

    def presence(self) -> dict[str, bool]:
        """Which secrets are set, without their values."""
        return {
            "TELEGRAM_TOKEN": bool(self.bot_token),
            "TELEGRAM_CHAT_ID": bool(self.chat_id),
        }

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        return bool(self.bot_token and self.chat_id)


@dataclass(frozen=True)
class TelegramResponse:
    """Raw outcome of a sendMessage call."""

    status_code: int
    text: str


class TelegramNotifier:
    """Sends formatted event messages to the configured Telegram chat."""

    def __init__(
        self,
        config: TelegramConfig | None = None,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize notifier.

        Args:
            config: Telegram configuration, derived from settings when omitted
            settings: Application settings
            transport: Optional httpx transport for the HTTP client
        """
        self.settings = settings or get_settings()
        self._config = config or TelegramConfig.from_settings(self.settings)
        self._transport = transport
        self._http_client: httpx.AsyncClient | None = None

    @property
    def config(self) -> TelegramConfig:
        """Current configuration."""
        return self._config

    def is_configured(self) -> bool:
        """Check if Telegram is properly configured."""
        return self._config.is_valid()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(
                timeout=self.settings.telegram_timeout,
                transport=self._transport,
            )
        return self._http_client

    async def send_message(self, text: str) -> TelegramResponse:
        """Send an HTML message to the configured chat.

        Makes exactly one attempt.

        Args:
            text: Message text, already escaped for HTML parse mode

        Returns:
            Status and raw body of a successful call

        Raises:
            TelegramAPIError: If Telegram answers with a non-2xx status
            TelegramConnectionError: If Telegram could not be reached
        """
        url = f"{TELEGRAM_API_BASE.format(token=self._config.bot_token)}/sendMessage"
        payload = {
            "chat_id": self._config.chat_id,
            "text": text,
            "parse_mode": "HTML",
            "disable_web_page_preview": True,
        }

        # ASCII-escaped JSON keeps lone surrogates from caller text encodable.
        body = json.dumps(payload)

        try:
            client = await self._get_client()
            response = await client.post(url, content=body, headers=JSON_HEADERS)
        except httpx.InvalidURL as e:
            # The URL carries the token, keep it out of the reason.
            raise TelegramConnectionError("invalid Telegram API URL") from e
        except httpx.HTTPError as e:
            raise TelegramConnectionError(str(e) or type(e).__name__) from e

        logger.info(
            f"{LOG_TAG} Telegram response:",
            status_code=response.status_code,
            body=response.text,
        )

        if not response.is_success:
            raise TelegramAPIError(response.status_code, response.text)

        return TelegramResponse(status_code=response.status_code, text=response.text)

    async def close(self) -> None:
        """Close HTTP client."""
        if self._http_client and not self._http_client.is_closed:
            await self._http_client.aclose()
