"""Job use cases."""

from typing import List

from coursition.jobs.errors import JobNotFoundError, JobResultNotFoundError
from coursition.jobs.models import Job, JobResult
from coursition.stores.jobs_store import JobsStore
from coursition.usecases.policy import run_usecase


class JobsUsecases:
    def __init__(self, store: JobsStore):
        self._store = store

    async def get_jobs(self) -> List[Job]:
        # No expected domain errors for listing
        return await run_usecase("get_jobs_usecase", self._store.list_all)

    async def get_job_by_id(self, id: int) -> Job:
        # Let JobNotFoundError bubble up for client handling
        return await run_usecase(
            "get_job_by_id_usecase",
            lambda: self._store.get_by_id(id),
            propagate=(JobNotFoundError,),
            job_id=id,
        )

    async def get_job_result(self, job_id: int) -> JobResult:
        return await run_usecase(
            "get_job_result_usecase",
            lambda: self._store.get_result(job_id),
            propagate=(JobNotFoundError, JobResultNotFoundError),
            job_id=job_id,
        )
