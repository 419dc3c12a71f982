"""
Tests for the Job entity and its lifecycle.
"""

import pytest
from pydantic import ValidationError

from coursition.jobs.errors import InvalidJobTransitionError
from coursition.jobs.models import Job, JobStatus


class TestJobStatus:
    def test_transitions_only_move_forward(self):
        assert JobStatus.PENDING.can_transition_to(JobStatus.IN_PROGRESS)
        assert JobStatus.PENDING.can_transition_to(JobStatus.COMPLETED)
        assert JobStatus.IN_PROGRESS.can_transition_to(JobStatus.COMPLETED)

    def test_no_regression_or_self_loop(self):
        assert not JobStatus.COMPLETED.can_transition_to(JobStatus.IN_PROGRESS)
        assert not JobStatus.IN_PROGRESS.can_transition_to(JobStatus.PENDING)
        assert not JobStatus.PENDING.can_transition_to(JobStatus.PENDING)

    def test_next(self):
        assert JobStatus.PENDING.next() is JobStatus.IN_PROGRESS
        assert JobStatus.IN_PROGRESS.next() is JobStatus.COMPLETED
        assert JobStatus.COMPLETED.next() is None

    def test_wire_values(self):
        assert [s.value for s in JobStatus] == ["pending", "in-progress", "completed"]


class TestJob:
    def test_result_rejected_unless_completed(self):
        with pytest.raises(ValidationError):
            Job(id=1, name="Parse Video 1", status=JobStatus.IN_PROGRESS, result="early")

    def test_completed_job_requires_result(self):
        with pytest.raises(ValidationError):
            Job(id=7, name="done", status=JobStatus.COMPLETED)

    def test_completed_job_carries_result(self):
        job = Job(id=2, name="Parse Audio 2", status="completed", result="done")
        assert job.is_completed
        assert job.result == "done"

    def test_id_must_be_positive(self):
        with pytest.raises(ValidationError):
            Job(id=0, name="zero")

    def test_job_is_frozen(self):
        job = Job(id=1, name="Parse Video 1")
        with pytest.raises(ValidationError):
            job.status = JobStatus.COMPLETED

    def test_advance_returns_new_job(self):
        job = Job(id=1, name="Parse Video 1")
        started = job.advance()

        assert job.status is JobStatus.PENDING
        assert started.status is JobStatus.IN_PROGRESS
        assert started.name == job.name

        done = started.advance(result="subtitles.srt")
        assert done.status is JobStatus.COMPLETED
        assert done.result == "subtitles.srt"

    def test_completing_requires_result(self):
        job = Job(id=1, name="Parse Video 1", status=JobStatus.IN_PROGRESS)
        with pytest.raises(ValueError):
            job.advance()

    def test_result_only_on_completion(self):
        job = Job(id=1, name="Parse Video 1")
        with pytest.raises(ValueError):
            job.advance(result="too soon")

    def test_cannot_advance_past_completed(self):
        job = Job(id=1, name="Parse Video 1", status=JobStatus.COMPLETED, result="x")
        with pytest.raises(InvalidJobTransitionError):
            job.advance()
