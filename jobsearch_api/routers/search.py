from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..deps import get_db, get_fetcher
from ..schemas import JobItem, SearchFilters
from ..services.search import search_jobs

router = APIRouter(tags=["search"])


@router.get("/search", response_model=List[JobItem])
@router.get("/search-jobs", response_model=List[JobItem], include_in_schema=False)
def search(
    title: Optional[str] = Query(None),
    location: Optional[str] = Query(None),
    experience: Optional[str] = Query(None, description="years of experience"),
    db: Session = Depends(get_db),
    fetcher=Depends(get_fetcher),
):
    """Fetch matching jobs from JSearch, replace the stored jobs, return the batch."""
    filters = SearchFilters(title=title, location=location, experience=experience)
    return search_jobs(db, fetcher, filters)
