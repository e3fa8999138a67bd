"""Test helpers: a fake Telegram Bot API served through httpx.MockTransport."""

import json

import httpx

TEST_TOKEN = "123456:test-token"
TEST_CHAT_ID = "-1001234567890"

TELEGRAM_OK_BODY = '{"ok":true,"result":{"message_id":42}}'


class FakeTelegram:
    """httpx.MockTransport handler that records sendMessage calls."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = TELEGRAM_OK_BODY
        self.error: Exception | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.body)

    @property
    def sent(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]
