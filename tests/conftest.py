"""
Pytest configuration and shared fixtures.
"""

import time
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from jobsearch_api.config import Settings
from jobsearch_api.db import init_db, make_engine, make_session_factory
from jobsearch_api.main import create_app
from jobsearch_api.schemas import JobItem


class FakeFetcher:
    """Stands in for JSearchClient; records every query it is asked for."""

    def __init__(self, records: List[Dict[str, Any]] | None = None):
        self.records = records or []
        self.calls: List[str] = []

    def fetch(self, query: str) -> List[Dict[str, Any]]:
        self.calls.append(query)
        return list(self.records)


def make_record(i: int, **overrides) -> Dict[str, Any]:
    record = {
        "job_title": f"Engineer {i}",
        "employer_name": f"Company {i}",
        "job_city": "Austin",
        "job_state": "TX",
        "job_apply_link": f"https://example.com/jobs/{i}",
    }
    record.update(overrides)
    return record


def wait_for(predicate, timeout: float = 5.0) -> bool:
    """Poll until ``predicate()`` is true; background refreshes run on another thread."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.02)
    return predicate()


def make_items(n: int, prefix: str = "Job") -> List[JobItem]:
    return [
        JobItem(title=f"{prefix} {i}", company="Acme", location="Austin", experience=i % 5, link=f"https://example.com/{prefix}/{i}")
        for i in range(n)
    ]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        REFRESH_ON_STARTUP=False,
        REFRESH_INTERVAL_SECONDS=0,
        API_KEY="",
        RAPIDAPI_KEY="test-key",
    )


@pytest.fixture
def engine():
    engine = make_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Session on a fresh in-memory database."""
    session = make_session_factory(engine)()
    yield session
    session.close()


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher([make_record(i) for i in range(3)])


@pytest.fixture
def app(settings, fake_fetcher):
    return create_app(settings, fetcher_factory=lambda: fake_fetcher)


@pytest.fixture
def client(app):
    # context manager runs the startup hook, which creates the tables
    with TestClient(app) as client:
        yield client
