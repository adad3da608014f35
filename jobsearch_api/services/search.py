"""Fetch-map-replace pipeline.

``search_jobs`` serves caller searches; ``refresh_jobs`` runs the same cycle
for a raw query (startup, scheduler and the on-demand refresh endpoint).
"""
from typing import List, Protocol, Tuple

from sqlalchemy.orm import Session

from ..collectors.jsearch import compose_query, map_job
from ..errors import ValidationError
from ..logging_config import get_logger
from ..schemas import JobItem, RefreshSummary, SearchFilters
from .cache import replace_jobs

logger = get_logger(__name__)


class Fetcher(Protocol):
    def fetch(self, query: str) -> List[dict]: ...


def _fetch_and_store(db: Session, fetcher: Fetcher, query: str) -> Tuple[List[JobItem], int]:
    jobs = [map_job(record) for record in fetcher.fetch(query)]
    stored = replace_jobs(db, jobs)
    return jobs, stored


def search_jobs(db: Session, fetcher: Fetcher, filters: SearchFilters) -> List[JobItem]:
    """Search the external source and refresh the stored jobs with the result.

    Returns the freshly mapped batch (not re-read from the store). External
    failures come back as an empty list; a missing filter set raises
    ValidationError before any external call.
    """
    if filters.is_empty():
        raise ValidationError()

    logger.info(
        "search request title=%r location=%r experience=%r",
        filters.title, filters.location, filters.experience,
    )
    query = compose_query(filters.title, filters.location, filters.experience)
    jobs, _ = _fetch_and_store(db, fetcher, query)
    logger.info("returning %d jobs query=%r", len(jobs), query)
    return jobs


def refresh_jobs(db: Session, fetcher: Fetcher, query: str) -> RefreshSummary:
    jobs, stored = _fetch_and_store(db, fetcher, query)
    return RefreshSummary(query=query, fetched=len(jobs), stored=stored)
