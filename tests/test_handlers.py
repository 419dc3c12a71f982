"""
Tests for the boundary layer: error translation and handlers.
"""

import asyncio

import pytest

from coursition.errors import DomainError, FatalError
from coursition.handlers import translation
from coursition.handlers.jobs import JobsHandlers
from coursition.handlers.media import MediaHandlers
from coursition.handlers.translation import (
    DOMAIN_TO_WIRE,
    UnmappedDomainError,
    check_exhaustive,
    domain_errors,
    status_for,
    to_wire_error,
)
from coursition.jobs.errors import (
    JobNotFound,
    JobNotFoundError,
    JobResultNotFound,
    JobResultNotFoundError,
    JobsStoreError,
)
from coursition.jobs.models import Job, JobStatus
from coursition.media.errors import (
    MediaEmpty,
    MediaEmptyError,
    MediaNotFound,
    MediaNotFoundError,
    MediaParsingError,
)
from coursition.media.models import UrlMediaRequest
from coursition.stores.jobs_store import JobsStore
from coursition.stores.media_store import MediaStore
from coursition.testing import make_test_service
from coursition.usecases.jobs import JobsUsecases
from coursition.usecases.media import MediaUsecases


class TestTranslationTable:
    def test_every_domain_error_is_mapped(self):
        check_exhaustive()

    def test_known_domain_errors_are_discovered(self):
        found = set(domain_errors())
        assert {
            JobNotFoundError, JobResultNotFoundError, JobsStoreError,
            MediaEmptyError, MediaNotFoundError, MediaParsingError,
        } <= found

    def test_new_domain_error_without_mapping_fails(self):
        class MediaTooLongError(DomainError):
            pass

        with pytest.raises(UnmappedDomainError) as exc_info:
            check_exhaustive([MediaTooLongError, JobNotFoundError])
        assert exc_info.value.missing == [MediaTooLongError]

    def test_removing_a_mapping_fails(self, monkeypatch):
        monkeypatch.delitem(translation.DOMAIN_TO_WIRE, MediaNotFoundError)
        with pytest.raises(UnmappedDomainError):
            check_exhaustive()

    @pytest.mark.parametrize("error, wire, status", [
        (JobNotFoundError(1), JobNotFound, 404),
        (JobResultNotFoundError(1), JobResultNotFound, 404),
        (MediaEmptyError("no bytes"), MediaEmpty, 422),
        (MediaParsingError("file", "bad codec"), MediaEmpty, 422),
        (MediaNotFoundError("https://x/missing.mp4"), MediaNotFound, 404),
    ])
    def test_mapping(self, error, wire, status):
        assert type(to_wire_error(error)) is wire
        assert status_for(error) == status

    def test_wire_errors_serialize_tag_only(self):
        assert JobNotFound().to_dict() == {"_tag": "JobNotFound"}
        assert MediaEmpty().to_dict() == {"_tag": "MediaEmpty"}

    def test_fatal_only_error_has_no_wire_form(self):
        assert DOMAIN_TO_WIRE[JobsStoreError] is None
        with pytest.raises(FatalError):
            to_wire_error(JobsStoreError("get_by_id", "down"))

    def test_unmapped_error_is_fatal_not_swallowed(self):
        class UnknownError(DomainError):
            pass

        error = UnknownError()
        with pytest.raises(FatalError) as exc_info:
            to_wire_error(error)
        assert exc_info.value.cause is error


class TestJobsHandlers:
    def _handlers(self, **overrides):
        return JobsHandlers(JobsUsecases(make_test_service(JobsStore, **overrides)))

    def test_get_jobs(self, jobs_store):
        response = asyncio.run(JobsHandlers(JobsUsecases(jobs_store)).get_jobs())

        assert len(response.jobs) == 3
        assert response.jobs[0].name == "Parse Video 1"
        assert response.jobs[1].name == "Parse Audio 2"
        assert response.jobs[2].name == "Parse Document 3"

    def test_get_jobs_with_test_service(self):
        async def list_all():
            return [Job(id=99, name="Handler Test Job", status=JobStatus.PENDING)]

        response = asyncio.run(self._handlers(list_all=list_all).get_jobs())
        assert [j.name for j in response.jobs] == ["Handler Test Job"]

    def test_get_job_by_id_not_found(self, jobs_store):
        with pytest.raises(JobNotFound):
            asyncio.run(JobsHandlers(JobsUsecases(jobs_store)).get_job_by_id(999))

    def test_get_job_result_not_ready(self, jobs_store):
        with pytest.raises(JobResultNotFound):
            asyncio.run(JobsHandlers(JobsUsecases(jobs_store)).get_job_result(1))

    def test_get_job_result_missing_job(self, jobs_store):
        with pytest.raises(JobNotFound):
            asyncio.run(JobsHandlers(JobsUsecases(jobs_store)).get_job_result(999))

    def test_wire_error_keeps_domain_cause(self, jobs_store):
        with pytest.raises(JobNotFound) as exc_info:
            asyncio.run(JobsHandlers(JobsUsecases(jobs_store)).get_job_by_id(999))
        assert isinstance(exc_info.value.__cause__, JobNotFoundError)


class TestMediaHandlers:
    def test_parse_media(self, media_store):
        request = UrlMediaRequest(url="https://x/video.mp4", language="en")
        response = asyncio.run(MediaHandlers(MediaUsecases(media_store)).parse_media(request))

        assert len(response.segments) == 3
        assert response.model_dump(by_alias=True)["json"][0]["text"] == "Hello world"

    def test_parsing_error_becomes_media_empty(self):
        async def parse(request):
            raise MediaParsingError(request.source, "unreadable")

        handlers = MediaHandlers(MediaUsecases(make_test_service(MediaStore, parse=parse)))
        request = UrlMediaRequest(url="https://x/video.mp4", language="en")

        with pytest.raises(MediaEmpty):
            asyncio.run(handlers.parse_media(request))
