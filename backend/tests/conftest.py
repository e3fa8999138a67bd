"""Shared fixtures: settings from env and a fake Telegram Bot API."""

import httpx
import pytest
from fastapi.testclient import TestClient

from loginnotify.config import Settings
from loginnotify.main import create_app
from loginnotify.services.telegram_notifier import TelegramNotifier

from helpers import TEST_CHAT_ID, TEST_TOKEN, FakeTelegram


@pytest.fixture
def fake_telegram() -> FakeTelegram:
    return FakeTelegram()


@pytest.fixture
def make_settings(monkeypatch):
    """Build Settings from env, with TELEGRAM_* overridable per test."""

    def _make(token: str | None = TEST_TOKEN, chat_id: str | None = TEST_CHAT_ID) -> Settings:
        for name, value in (("TELEGRAM_TOKEN", token), ("TELEGRAM_CHAT_ID", chat_id)):
            if value is None:
                monkeypatch.delenv(name, raising=False)
            else:
                monkeypatch.setenv(name, value)
        return Settings(_env_file=None, env="testing", log_level="WARNING")

    return _make


@pytest.fixture
def settings(make_settings) -> Settings:
    return make_settings()


@pytest.fixture
def make_client(fake_telegram):
    """Start the app around a notifier wired to the fake Telegram API."""
    clients: list[TestClient] = []

    def _make(settings: Settings, raise_server_exceptions: bool = True) -> TestClient:
        notifier = TelegramNotifier(
            settings=settings, transport=httpx.MockTransport(fake_telegram)
        )
        client = TestClient(
            create_app(settings=settings, telegram_notifier=notifier),
            raise_server_exceptions=raise_server_exceptions,
        )
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client, settings) -> TestClient:
    return make_client(settings)
