from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from ..deps import get_db
from ..schemas import JobOut, JobsPage
from ..services.listing import DEFAULT_LIMIT, DEFAULT_PAGE, get_job, list_jobs, parse_positive_int

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=JobsPage)
def list_stored_jobs(
    # raw strings: malformed values fall back to defaults instead of a 422
    page: str | None = Query(None),
    limit: str | None = Query(None),
    db: Session = Depends(get_db),
):
    rows = list_jobs(
        db,
        page=parse_positive_int(page, DEFAULT_PAGE),
        limit=parse_positive_int(limit, DEFAULT_LIMIT),
    )
    return JobsPage(jobs=[JobOut.model_validate(r) for r in rows])


@router.get("/{job_id}", response_model=JobOut)
def get_stored_job(job_id: str, db: Session = Depends(get_db)):
    return JobOut.model_validate(get_job(db, job_id))
