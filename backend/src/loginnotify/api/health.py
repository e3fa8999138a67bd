"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from loginnotify import __version__
from loginnotify.models.health import HealthResponse, ReadinessResponse

router = APIRouter()


_startup_time: datetime | None = None


def set_startup_time() -> None:
    """Set the application startup time."""
    global _startup_time
    _startup_time = datetime.now(timezone.utc)


def get_uptime() -> float:
    """Get uptime in seconds."""
    if _startup_time is None:
        return 0.0
    return (datetime.now(timezone.utc) - _startup_time).total_seconds()


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns the service status, current timestamp, version, and uptime.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=__version__,
        uptime_seconds=get_uptime(),
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(request: Request) -> ReadinessResponse:
    """
    Readiness check endpoint.

    The relay is ready once the notifier exists and both Telegram
    secrets are set.
    """
    notifier = getattr(request.app.state, "telegram_notifier", None)
    checks = {
        "telegram_notifier": notifier is not None,
        "telegram_configured": notifier is not None and notifier.is_configured(),
    }
    return ReadinessResponse(ready=all(checks.values()), checks=checks)


@router.get("/live")
async def liveness_check() -> dict[str, str]:
    """Liveness check endpoint."""
    return {"status": "alive"}
