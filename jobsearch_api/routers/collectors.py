from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..config import Settings, get_settings
from ..deps import get_db, get_fetcher, require_api_key
from ..schemas import RefreshSummary
from ..services.search import refresh_jobs

router = APIRouter(prefix="/collectors/jsearch", tags=["collectors: jsearch"])


@router.get("/health")
def health():
    return {"ok": True, "source": "jsearch"}


@router.post("/refresh", response_model=RefreshSummary, dependencies=[Depends(require_api_key)])
def refresh(
    query: str | None = Query(None, description="free-text query; defaults to INITIAL_QUERY"),
    db: Session = Depends(get_db),
    fetcher=Depends(get_fetcher),
    settings: Settings = Depends(get_settings),
):
    """Run one fetch-and-replace cycle now and report what was stored."""
    return refresh_jobs(db, fetcher, (query or "").strip() or settings.INITIAL_QUERY)
