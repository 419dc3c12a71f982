"""Typed HTTP client for the media API.

Tagged error bodies (``{"_tag": "JobNotFound"}``) are raised as the
matching WireError subclass, so callers handle the same error types the
server declares.
"""

from typing import Dict, List, Optional, Type

import httpx

from coursition.errors import WireError
from coursition.jobs.errors import JobNotFound, JobResultNotFound
from coursition.jobs.models import Job, JobResult, JobsResponse
from coursition.media.errors import MediaEmpty, MediaNotFound
from coursition.media.models import MediaResponse, SubtitleSegment

WIRE_ERRORS: Dict[str, Type[WireError]] = {
    cls.tag(): cls for cls in (JobNotFound, JobResultNotFound, MediaEmpty, MediaNotFound)
}


class MediaApiClient:
    """Usage:
        client = MediaApiClient("http://localhost:3001")
        job = client.get_job(1)
    """

    def __init__(self, base_url: str = "http://localhost:3001", http: Optional[httpx.Client] = None):
        self._http = http or httpx.Client(base_url=base_url)

    def close(self) -> None:
        self._http.close()

    def _send(self, method: str, path: str, **kwargs) -> dict:
        response = self._http.request(method, f"/media{path}", **kwargs)
        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None
            tag = body.get("_tag") if isinstance(body, dict) else None
            if tag in WIRE_ERRORS:
                raise WIRE_ERRORS[tag]()
            response.raise_for_status()
        return response.json()

    def get_jobs(self) -> List[Job]:
        return JobsResponse.model_validate(self._send("GET", "/jobs")).jobs

    def get_job(self, id: int) -> Job:
        return Job.model_validate(self._send("GET", f"/job/{id}"))

    def get_job_result(self, id: int) -> JobResult:
        return JobResult.model_validate(self._send("GET", f"/job/{id}/result"))

    def parse_url(self, url: str, language: str) -> List[SubtitleSegment]:
        body = self._send("POST", "/parse", json={"url": url, "language": language})
        return MediaResponse.model_validate(body).segments

    def parse_file(self, content: bytes, language: str, filename: str = "upload") -> List[SubtitleSegment]:
        body = self._send(
            "POST", "/parse",
            files={"file": (filename, content)},
            data={"language": language},
        )
        return MediaResponse.model_validate(body).segments
