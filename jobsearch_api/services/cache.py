from typing import Sequence

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import StoreError
from ..logging_config import get_logger
from ..models import JobORM
from ..schemas import JobItem

logger = get_logger(__name__)


def _rows_from_items(items: Sequence[JobItem]):
    rows = []
    for position, it in enumerate(items):
        rows.append(JobORM(
            position=position,
            title=it.title,
            company=it.company,
            location=it.location,
            experience=it.experience,
            link=it.link,
        ))
    return rows


def replace_jobs(db: Session, items: Sequence[JobItem]) -> int:
    """Make the jobs table hold exactly ``items``, in order.

    An empty batch leaves the table untouched. Otherwise every stored job is
    deleted and the batch inserted in the same transaction, so readers never
    see a merge of two batches. Returns the number of rows stored.
    """
    if not items:
        logger.info("empty batch; stored jobs left untouched")
        return 0

    try:
        db.execute(delete(JobORM))
        db.add_all(_rows_from_items(items))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("replacing stored jobs failed")
        raise StoreError(f"replace failed: {e!s}") from e

    logger.info("%d jobs saved", len(items))
    return len(items)
