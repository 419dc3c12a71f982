"""Job endpoint handlers.

Each handler calls exactly one use case and maps domain errors to API
errors. No validation or business logic lives here.
"""

import logging
from typing import List

from coursition.errors import DomainError
from coursition.handlers.translation import to_wire_error
from coursition.jobs.models import Job, JobResult, JobsResponse
from coursition.tracing import span
from coursition.usecases.jobs import JobsUsecases

logger = logging.getLogger("coursition.handlers.jobs")


class JobsHandlers:
    def __init__(self, usecases: JobsUsecases):
        self._usecases = usecases

    async def get_jobs(self) -> JobsResponse:
        # get_jobs cannot fail with a domain error; nothing to map
        with span("get_jobs_handler"):
            jobs: List[Job] = await self._usecases.get_jobs()
            return JobsResponse(jobs=jobs)

    async def get_job_by_id(self, id: int) -> Job:
        with span("get_job_by_id_handler", job_id=id):
            try:
                return await self._usecases.get_job_by_id(id)
            except DomainError as e:
                wire = to_wire_error(e)
                logger.info("get_job_by_id(%d) -> %s", id, wire.tag())
                raise wire from e

    async def get_job_result(self, job_id: int) -> JobResult:
        with span("get_job_result_handler", job_id=job_id):
            try:
                return await self._usecases.get_job_result(job_id)
            except DomainError as e:
                wire = to_wire_error(e)
                logger.info("get_job_result(%d) -> %s", job_id, wire.tag())
                raise wire from e
