"""Aggregate all v1 API routers."""

from fastapi import APIRouter
from coursition.api.v1.health import router as health_router
from coursition.api.v1.media import router as media_router

v1_router = APIRouter()
v1_router.include_router(health_router, tags=["health"])
v1_router.include_router(media_router, tags=["media"])
