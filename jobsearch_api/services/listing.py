from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import NotFoundError, StoreError
from ..logging_config import get_logger
from ..models import JobORM

logger = get_logger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_SQL_INT = 2**63 - 1  # largest value an SQL BIGINT / SQLite INTEGER holds


def parse_positive_int(value, default: int) -> int:
    """Query-string integer, or ``default`` when missing, malformed, < 1 or
    too large for the store to take as an offset or limit."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = int(str(value).strip())
    except ValueError:
        return default
    return number if 1 <= number <= MAX_SQL_INT else default


def list_jobs(db: Session, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> List[JobORM]:
    offset = (page - 1) * limit
    if offset > MAX_SQL_INT:
        return []
    try:
        return list(
            db.scalars(select(JobORM).order_by(JobORM.position).offset(offset).limit(min(limit, MAX_SQL_INT)))
        )
    except (SQLAlchemyError, OverflowError) as e:
        logger.exception("listing jobs failed page=%d limit=%d", page, limit)
        raise StoreError(f"list failed: {e!s}") from e


def get_job(db: Session, job_id: str) -> JobORM:
    try:
        job: Optional[JobORM] = db.get(JobORM, job_id)
    except SQLAlchemyError as e:
        logger.exception("fetching job %s failed", job_id)
        raise StoreError(f"lookup failed: {e!s}") from e
    if job is None:
        raise NotFoundError(f"job {job_id} not found")
    return job
