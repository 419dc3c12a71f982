"""Job data model and lifecycle."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from coursition.jobs.errors import InvalidJobTransitionError


class JobStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"

    @property
    def rank(self) -> int:
        return _LIFECYCLE.index(self)

    def can_transition_to(self, target: "JobStatus") -> bool:
        """Transitions only move forward, one or more steps, never back."""
        return target.rank > self.rank

    def next(self) -> Optional["JobStatus"]:
        if self is JobStatus.COMPLETED:
            return None
        return _LIFECYCLE[self.rank + 1]


_LIFECYCLE = [JobStatus.PENDING, JobStatus.IN_PROGRESS, JobStatus.COMPLETED]


class Job(BaseModel):
    """One unit of asynchronous work.

    ``result`` is set exactly when the job is completed.
    """
    id: int = Field(gt=0)
    name: str
    status: JobStatus = JobStatus.PENDING
    result: Optional[str] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _result_iff_completed(self) -> "Job":
        if self.result is not None and self.status != JobStatus.COMPLETED:
            raise ValueError(
                f"job {self.id} is {self.status.value} and cannot carry a result"
            )
        if self.result is None and self.status == JobStatus.COMPLETED:
            raise ValueError(f"job {self.id} is completed but has no result")
        return self

    @property
    def is_completed(self) -> bool:
        return self.status == JobStatus.COMPLETED

    def advance(self, result: Optional[str] = None) -> "Job":
        """Return a copy of this job moved to the next lifecycle state.

        A result is required when, and only when, the job completes.
        """
        target = self.status.next()
        if target is None:
            raise InvalidJobTransitionError(self.id, self.status.value, "(none)")
        if (target == JobStatus.COMPLETED) != (result is not None):
            raise ValueError(
                f"job {self.id} needs a result exactly when it completes"
            )
        return Job(id=self.id, name=self.name, status=target, result=result)


class JobResult(BaseModel):
    id: int
    result: str

    model_config = {"frozen": True}


class JobsResponse(BaseModel):
    jobs: List[Job]
