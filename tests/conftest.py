"""
Shared fixtures for the media service tests.
"""

import pytest
from fastapi.testclient import TestClient

from coursition.container import build_container
from coursition.main import create_app
from coursition.stores.jobs_store import InMemoryJobsStore
from coursition.stores.media_store import MockMediaStore


@pytest.fixture
def jobs_store():
    """Fresh in-memory store seeded with the default jobs."""
    return InMemoryJobsStore()


@pytest.fixture
def media_store():
    return MockMediaStore()


@pytest.fixture
def make_client():
    """Build a TestClient around explicit stores."""
    def _make(jobs_store=None, media_store=None):
        container = build_container(
            jobs_store=jobs_store or InMemoryJobsStore(),
            media_store=media_store or MockMediaStore(),
        )
        return TestClient(create_app(container=container))
    return _make


@pytest.fixture
def client(make_client, jobs_store, media_store):
    return make_client(jobs_store, media_store)
