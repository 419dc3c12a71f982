"""Job error types.

Wire errors (``JobNotFound``, ``JobResultNotFound``) are what the API
returns. Domain errors (``*Error``) are what stores and use cases raise.
"""

from typing import Any, Dict

from coursition.errors import DomainError, WireError


# API boundary errors

class JobNotFound(WireError):
    status_code = 404


class JobResultNotFound(WireError):
    status_code = 404


# Internal domain errors

class JobNotFoundError(DomainError):
    """Raised when no job exists for the given id."""

    def __init__(self, id: int):
        self.id = id
        super().__init__(f"Job not found: {id}")

    def attributes(self) -> Dict[str, Any]:
        return {"id": self.id}


class JobResultNotFoundError(DomainError):
    """Raised when the job exists but has not completed yet."""

    def __init__(self, job_id: int):
        self.job_id = job_id
        super().__init__(f"Job {job_id} has no result yet")

    def attributes(self) -> Dict[str, Any]:
        return {"job_id": self.job_id}


class JobsStoreError(DomainError):
    """Raised when the backing jobs store itself fails."""

    def __init__(self, operation: str, cause: Any):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Jobs store failure during {operation}: {cause}")

    def attributes(self) -> Dict[str, Any]:
        return {"operation": self.operation, "cause": str(self.cause)}


class InvalidJobTransitionError(Exception):
    """Raised when a job is moved backwards or past completion."""

    def __init__(self, job_id: int, current: str, target: str):
        self.job_id = job_id
        self.current = current
        self.target = target
        super().__init__(
            f"Invalid job state transition for job {job_id}: {current} -> {target}"
        )
