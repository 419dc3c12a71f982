"""Coursition media service - FastAPI application."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from coursition.api.v1.router import v1_router
from coursition.config import Settings, settings
from coursition.container import Container, build_container
from coursition.errors import FatalError, WireError
from coursition.handlers.translation import check_exhaustive

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("coursition")


async def wire_error_handler(request: Request, exc: WireError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def fatal_error_handler(request: Request, exc: FatalError) -> JSONResponse:
    # Log the full chain here; the client only sees a generic failure
    logger.error(
        "Fatal error on %s %s: %s (cause: %r)",
        request.method, request.url.path, exc.message, exc.cause,
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


def create_app(
    app_settings: Optional[Settings] = None,
    container: Optional[Container] = None,
) -> FastAPI:
    """Build the FastAPI app around a wired container."""
    app_settings = app_settings or settings
    check_exhaustive()
    container = container or build_container(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Coursition media service on port %d", app_settings.port)
        logger.info("Jobs backend: %s", type(container.jobs_store).__name__)
        logger.info("Media backend: %s", type(container.media_store).__name__)
        yield
        logger.info("Shutting down Coursition media service")
        await container.aclose()

    app = FastAPI(
        title="Coursition Media Service",
        description="Parse media into subtitles and track asynchronous parsing jobs",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(WireError, wire_error_handler)
    app.add_exception_handler(FatalError, fatal_error_handler)

    app.include_router(v1_router)
    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
