"""LoginNotify - Login / OTP Event Relay Main Application."""

import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Awaitable, Callable

import uvicorn
from fastapi import FastAPI, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from loginnotify import __version__
from loginnotify.api.health import set_startup_time
from loginnotify.api.notify import RELAY_PATH, method_not_allowed
from loginnotify.api.router import api_router
from loginnotify.config import Settings, get_settings
from loginnotify.core.exceptions import LoginNotifyError
from loginnotify.services.telegram_notifier import LOG_TAG, TelegramConfig, TelegramNotifier
from loginnotify.utils.logging import (
    clear_request_context,
    get_logger,
    log_request_context,
    setup_logging,
)

logger = get_logger(__name__)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings

    setup_logging(settings.log_level, json_logs=settings.json_logs)
    logger.info(f"Starting LoginNotify in {settings.env} mode")

    telegram_notifier: TelegramNotifier | None = getattr(app.state, "telegram_notifier", None)
    if telegram_notifier is None:
        telegram_notifier = TelegramNotifier(
            config=TelegramConfig.from_settings(settings), settings=settings
        )
        app.state.telegram_notifier = telegram_notifier

    if telegram_notifier.is_configured():
        logger.info("Telegram notifier configured")
    else:
        logger.warning(
            "Telegram notifier not configured, requests will fail",
            **telegram_notifier.config.presence(),
        )

    set_startup_time()
    logger.info("LoginNotify started successfully")

    yield

    logger.info("Shutting down LoginNotify...")
    await telegram_notifier.close()
    logger.info("LoginNotify shutdown complete")


async def handle_loginnotify_error(request: Request, exc: LoginNotifyError) -> PlainTextResponse:
    """Convert relay errors into plain-text responses."""
    log = getattr(logger, exc.log_level)
    log(f"{LOG_TAG} {exc.message}", status_code=exc.status_code, **exc.details)
    return PlainTextResponse(exc.response_text, status_code=exc.status_code)


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> Response:
    """Answer any non-POST method on the relay with the plain-text 405."""
    if (
        exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        and request.url.path == API_PREFIX + RELAY_PATH
    ):
        return method_not_allowed()
    return await http_exception_handler(request, exc)


async def bind_request_context(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Attach request id and route info to every log line of a request."""
    log_request_context(
        request_id=request.headers.get("x-request-id") or uuid.uuid4().hex,
        method=request.method,
        path=request.url.path,
        client_ip=request.client.host if request.client else None,
    )
    try:
        return await call_next(request)
    finally:
        clear_request_context()


def create_app(
    settings: Settings | None = None,
    telegram_notifier: TelegramNotifier | None = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        settings: Settings to use instead of the cached environment settings
        telegram_notifier: Pre-built notifier, otherwise created at startup
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="LoginNotify API",
        description="Relays login / OTP events to a Telegram chat",
        version=__version__,
        docs_url="/api/docs" if settings.env != "production" else None,
        redoc_url="/api/redoc" if settings.env != "production" else None,
        openapi_url="/api/openapi.json" if settings.env != "production" else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.telegram_notifier = telegram_notifier

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["POST"],
            allow_headers=["*"],
        )

    app.middleware("http")(bind_request_context)
    app.add_exception_handler(LoginNotifyError, handle_loginnotify_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)

    app.include_router(api_router, prefix=API_PREFIX)

    return app


app = create_app()


def main() -> None:
    """Main entry point for running the application."""
    settings = get_settings()

    uvicorn.run(
        "loginnotify.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.env == "development",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
