"""Settings loading from the environment."""

import pytest
from pydantic import ValidationError

from loginnotify.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TELEGRAM_TOKEN", "TELEGRAM_CHAT_ID", "LOGINNOTIFY_LOG_LEVEL", "LOGINNOTIFY_PORT"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_env():
    settings = Settings(_env_file=None)

    assert settings.telegram_token == ""
    assert settings.telegram_chat_id == ""
    assert settings.env == "production"
    assert settings.log_level == "INFO"
    assert settings.telegram_timeout == 30.0


def test_telegram_secrets_use_unprefixed_names(monkeypatch):
    monkeypatch.setenv("TELEGRAM_TOKEN", "abc:def")
    monkeypatch.setenv("TELEGRAM_CHAT_ID", "-100999")

    settings = Settings(_env_file=None)

    assert settings.telegram_token == "abc:def"
    assert settings.telegram_chat_id == "-100999"


def test_app_settings_use_prefix(monkeypatch):
    monkeypatch.setenv("LOGINNOTIFY_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOGINNOTIFY_PORT", "9000")

    settings = Settings(_env_file=None)

    assert settings.log_level == "DEBUG"
    assert settings.port == 9000


def test_reads_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("TELEGRAM_TOKEN=from-file\nTELEGRAM_CHAT_ID=42\n")

    settings = Settings(_env_file=env_file)

    assert settings.telegram_token == "from-file"
    assert settings.telegram_chat_id == "42"


def test_settings_are_immutable():
    settings = Settings(_env_file=None)

    with pytest.raises(ValidationError):
        settings.telegram_chat_id = "changed"


def test_rejects_invalid_log_level(monkeypatch):
    monkeypatch.setenv("LOGINNOTIFY_LOG_LEVEL", "LOUD")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
