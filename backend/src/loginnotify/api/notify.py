"""Login / OTP event relay endpoint."""

from fastapi import APIRouter, Request, status
from fastapi.responses import PlainTextResponse

from loginnotify.core.dependencies import TelegramNotifierDep
from loginnotify.core.exceptions import ConfigurationError
from loginnotify.services.message_builder import build_message
from loginnotify.services.payload import parse_payload
from loginnotify.services.telegram_notifier import LOG_TAG
from loginnotify.utils.logging import get_logger
from loginnotify.utils.redaction import render_for_log

router = APIRouter()
logger = get_logger(__name__)

RELAY_PATH = "/sendTelegram"

# Methods outside this list are answered by the 405 handler in main.
ACCEPTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def method_not_allowed() -> PlainTextResponse:
    """Plain-text 405 for anything but POST."""
    return PlainTextResponse(
        "Method not allowed",
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers={"Allow": "POST"},
    )


@router.api_route(RELAY_PATH, methods=ACCEPTED_METHODS, response_class=PlainTextResponse)
async def send_telegram(request: Request, notifier: TelegramNotifierDep) -> PlainTextResponse:
    """Relay one login / OTP event to Telegram.

    Only POST is served; the body is a JSON object whose recognized fields
    are rendered first and whose remaining keys are listed as "Other Data".
    The Telegram response body is passed through on success.
    """
    if request.method != "POST":
        return method_not_allowed()

    if not notifier.is_configured():
        raise ConfigurationError(notifier.config.presence())

    payload = parse_payload(await request.body())

    logger.info(f"{LOG_TAG} Incoming payload:\n{render_for_log(payload)}")

    text = build_message(payload)
    result = await notifier.send_message(text)

    return PlainTextResponse(result.text, status_code=status.HTTP_200_OK)
