"""Main API router aggregating all endpoints."""

from fastapi import APIRouter

from loginnotify.api.health import router as health_router
from loginnotify.api.notify import router as notify_router

api_router = APIRouter()

api_router.include_router(health_router, prefix="/health", tags=["Health"])
api_router.include_router(notify_router, tags=["Notify"])
