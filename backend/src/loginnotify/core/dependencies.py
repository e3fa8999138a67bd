"""
LoginNotify FastAPI Dependencies

Provides dependency injection functions for FastAPI routes.
"""

from typing import Annotated

from fastapi import Depends, Request

from loginnotify.services.telegram_notifier import TelegramNotifier


def get_telegram_notifier(request: Request) -> TelegramNotifier:
    """Get Telegram notifier from app state."""
    return request.app.state.telegram_notifier


TelegramNotifierDep = Annotated[TelegramNotifier, Depends(get_telegram_notifier)]
