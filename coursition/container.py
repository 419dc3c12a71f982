"""Composition root: wires stores → use cases → handlers."""

import logging
from dataclasses import dataclass
from typing import Optional

from coursition.config import Settings, settings as default_settings
from coursition.handlers.jobs import JobsHandlers
from coursition.handlers.media import MediaHandlers
from coursition.stores.jobs_store import InMemoryJobsStore, JobsStore, SupabaseJobsStore
from coursition.stores.media_store import HttpMediaStore, MediaStore, MockMediaStore
from coursition.usecases.jobs import JobsUsecases
from coursition.usecases.media import MediaUsecases

logger = logging.getLogger("coursition.container")


@dataclass
class Container:
    jobs_store: JobsStore
    media_store: MediaStore
    jobs: JobsHandlers
    media: MediaHandlers

    async def aclose(self) -> None:
        if isinstance(self.media_store, HttpMediaStore):
            await self.media_store.aclose()


def build_jobs_store(settings: Settings) -> JobsStore:
    if settings.jobs_backend == "memory":
        return InMemoryJobsStore(table_name=settings.jobs_table)
    if settings.jobs_backend == "supabase":
        from coursition.db.supabase_client import get_supabase

        return SupabaseJobsStore(get_supabase(settings), settings.jobs_table)
    raise ValueError(
        f"Unknown jobs backend '{settings.jobs_backend}'. Available: memory, supabase"
    )


def build_media_store(settings: Settings) -> MediaStore:
    if settings.media_backend == "mock":
        return MockMediaStore(
            delay_seconds=settings.parse_delay_seconds,
            engine_url=settings.parsing_engine_url,
        )
    if settings.media_backend == "http":
        return HttpMediaStore(
            settings.parsing_engine_url, timeout=settings.parsing_engine_timeout
        )
    raise ValueError(
        f"Unknown media backend '{settings.media_backend}'. Available: mock, http"
    )


def build_container(
    settings: Settings = default_settings,
    jobs_store: Optional[JobsStore] = None,
    media_store: Optional[MediaStore] = None,
) -> Container:
    """Build the full chain. Explicit stores override the configured backends."""
    jobs_store = jobs_store or build_jobs_store(settings)
    media_store = media_store or build_media_store(settings)
    logger.info(
        "Wiring jobs store %s and media store %s",
        type(jobs_store).__name__, type(media_store).__name__,
    )
    return Container(
        jobs_store=jobs_store,
        media_store=media_store,
        jobs=JobsHandlers(JobsUsecases(jobs_store)),
        media=MediaHandlers(MediaUsecases(media_store)),
    )
