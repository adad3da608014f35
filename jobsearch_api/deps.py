# jobsearch_api/deps.py
from fastapi import Depends, Header, HTTPException, Request

from .collectors.jsearch import JSearchClient
from .config import Settings, get_settings


def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_fetcher(request: Request) -> JSearchClient:
    # same factory the startup and periodic refreshes use
    return request.app.state.fetcher_factory()


def require_api_key(
    x_api_key: str | None = Header(None),
    settings: Settings = Depends(get_settings),
):
    """Guard for the on-demand refresh route.

    Open when API_KEY is blank; otherwise the X-API-Key header must match
    it or the request gets a 401.
    """
    expected = settings.API_KEY.strip()
    if not expected:
        return
    if x_api_key != expected:
        raise HTTPException(status_code=401, detail="Unauthorized: invalid API key")
