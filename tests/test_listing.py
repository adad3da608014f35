"""
Tests for services/listing.py - paged listing and single lookup.
"""

import pytest

from jobsearch_api.errors import NotFoundError
from jobsearch_api.services.cache import replace_jobs
from jobsearch_api.services.listing import get_job, list_jobs, parse_positive_int

from conftest import make_items


class TestListJobs:
    """Test windowed reads over the stored batch."""

    def test_second_page_of_25(self, db_session):
        replace_jobs(db_session, make_items(25))

        rows = list_jobs(db_session, page=2, limit=10)

        assert [r.title for r in rows] == [f"Job {i}" for i in range(10, 20)]

    def test_last_partial_page(self, db_session):
        replace_jobs(db_session, make_items(25))
        assert len(list_jobs(db_session, page=3, limit=10)) == 5

    def test_page_past_end_is_empty(self, db_session):
        replace_jobs(db_session, make_items(3))
        assert list_jobs(db_session, page=4, limit=10) == []

    def test_offset_beyond_store_range(self, db_session):
        replace_jobs(db_session, make_items(3))
        assert list_jobs(db_session, page=2**62, limit=10) == []

    def test_empty_store(self, db_session):
        assert list_jobs(db_session) == []


class TestParsePositiveInt:
    """Test query-string page/limit parsing."""

    @pytest.mark.parametrize("value, expected", [("2", 2), (" 7 ", 7), (5, 5)])
    def test_valid(self, value, expected):
        assert parse_positive_int(value, 1) == expected

    @pytest.mark.parametrize("value", [None, "", "abc", "0", "-3", "1.5", "99999999999999999999"])
    def test_falls_back_to_default(self, value):
        assert parse_positive_int(value, 10) == 10


class TestGetJob:
    """Test single-job lookup."""

    def test_found(self, db_session):
        replace_jobs(db_session, make_items(2))
        first = list_jobs(db_session)[0]
        assert get_job(db_session, first.id).title == "Job 0"

    def test_unknown_id(self, db_session):
        with pytest.raises(NotFoundError):
            get_job(db_session, "does-not-exist")

    def test_id_cleared_by_refresh(self, db_session):
        replace_jobs(db_session, make_items(2, prefix="old"))
        old_id = list_jobs(db_session)[0].id

        replace_jobs(db_session, make_items(2, prefix="new"))

        with pytest.raises(NotFoundError):
            get_job(db_session, old_id)
