"""LoginNotify data models."""

from loginnotify.models.health import (
    HealthResponse,
    ReadinessResponse,
)

__all__ = [
    "HealthResponse",
    "ReadinessResponse",
]
