"""Jobs access layer: store interface and backends.

Every backend raises only job domain errors. Failures specific to the
backing system are caught here and re-raised as ``JobNotFoundError`` or
``JobsStoreError``; callers never see a Supabase or PostgREST exception.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from postgrest.exceptions import APIError
from pydantic import ValidationError

from coursition.jobs.errors import (
    JobNotFoundError,
    JobResultNotFoundError,
    JobsStoreError,
)
from coursition.jobs.models import Job, JobResult, JobStatus
from coursition.tracing import span

logger = logging.getLogger("coursition.stores.jobs")


class JobsStore(ABC):
    """Abstract interface for reading jobs (in-memory or database)."""

    table_name: str = ""

    @abstractmethod
    async def list_all(self) -> List[Job]:
        """Return every known job."""
        ...

    @abstractmethod
    async def get_by_id(self, id: int) -> Job:
        """Return one job. Raises JobNotFoundError."""
        ...

    async def get_result(self, job_id: int) -> JobResult:
        """Return the result of a completed job.

        The job is resolved through ``get_by_id`` first, so a missing job
        fails with JobNotFoundError. An existing job that has not completed
        fails with JobResultNotFoundError.
        """
        with span("JobsStore.get_result", job_id=job_id, table_name=self.table_name):
            job = await self.get_by_id(job_id)
            if not job.is_completed:
                logger.debug("Job %d is %s, no result", job_id, job.status.value)
                raise JobResultNotFoundError(job_id)
            return JobResult(id=job.id, result=job.result)


# Mock data - replace with a real backend via JOBS_BACKEND
DEFAULT_JOBS = [
    Job(id=1, name="Parse Video 1", status=JobStatus.IN_PROGRESS),
    Job(id=2, name="Parse Audio 2", status=JobStatus.COMPLETED, result="Result for job 2"),
    Job(id=3, name="Parse Document 3", status=JobStatus.PENDING),
]


class InMemoryJobsStore(JobsStore):
    """Jobs kept in a dict. Stand-in until a real backend is configured.

    Records are frozen; ``advance`` swaps in a new record rather than
    mutating the old one, so jobs already handed to callers never change.
    """

    def __init__(self, jobs: Optional[Iterable[Job]] = None, table_name: str = "memory"):
        self.table_name = table_name
        seed = DEFAULT_JOBS if jobs is None else jobs
        self._jobs: Dict[int, Job] = {job.id: job for job in seed}

    async def list_all(self) -> List[Job]:
        with span("JobsStore.list_all", table_name=self.table_name):
            return [self._jobs[k] for k in sorted(self._jobs)]

    async def get_by_id(self, id: int) -> Job:
        with span("JobsStore.get_by_id", id=id, table_name=self.table_name):
            job = self._jobs.get(id)
            if job is None:
                raise JobNotFoundError(id)
            return job

    def add(self, job: Job) -> None:
        if job.id in self._jobs:
            raise ValueError(f"job {job.id} already exists")
        self._jobs[job.id] = job

    def advance(self, job_id: int, result: Optional[str] = None) -> Job:
        """Move a job one step along its lifecycle (driven by the processor)."""
        job = self._jobs.get(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        updated = job.advance(result=result)
        self._jobs[job_id] = updated
        logger.info("Job %d: %s -> %s", job_id, job.status.value, updated.status.value)
        return updated


class SupabaseJobsStore(JobsStore):
    """Jobs read from a Supabase (PostgREST) table.

    Expected columns: id, name, status, result.
    """

    _columns = "id, name, status, result"

    def __init__(self, client: Any, table_name: str):
        self._client = client
        self.table_name = table_name

    async def _execute(self, operation: str, query) -> List[Dict[str, Any]]:
        # supabase-py is synchronous; keep the event loop free
        loop = asyncio.get_running_loop()
        try:
            response = await loop.run_in_executor(None, query.execute)
        except APIError as e:
            logger.error("Supabase %s on %s failed: %s", operation, self.table_name, e)
            raise JobsStoreError(operation, e) from e
        return response.data or []

    def _to_job(self, operation: str, row: Dict[str, Any]) -> Job:
        try:
            return Job.model_validate(row)
        except ValidationError as e:
            raise JobsStoreError(operation, e) from e

    async def list_all(self) -> List[Job]:
        with span("JobsStore.list_all", table_name=self.table_name):
            query = self._client.table(self.table_name).select(self._columns).order("id")
            rows = await self._execute("list_all", query)
            return [self._to_job("list_all", row) for row in rows]

    async def get_by_id(self, id: int) -> Job:
        with span("JobsStore.get_by_id", id=id, table_name=self.table_name):
            query = (
                self._client.table(self.table_name)
                .select(self._columns)
                .eq("id", id)
                .limit(1)
            )
            rows = await self._execute("get_by_id", query)
            if not rows:
                raise JobNotFoundError(id)
            return self._to_job("get_by_id", rows[0])
