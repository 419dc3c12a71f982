"""Health check endpoint."""

import platform
import sys

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """Service health and the backends it is wired to."""
    container = request.app.state.container
    return {
        "status": "healthy",
        "jobs_store": type(container.jobs_store).__name__,
        "jobs_table": container.jobs_store.table_name,
        "media_store": type(container.media_store).__name__,
        "parsing_engine_url": container.media_store.engine_url,
        "python_version": sys.version,
        "platform": platform.platform(),
    }
