from __future__ import annotations

from typing import Any, List, Optional
import math

import httpx  # HTTP client with timeouts

from ..config import Settings
from ..errors import ExternalSourceError
from ..logging_config import get_logger
from ..schemas import JobItem

logger = get_logger(__name__)

DEFAULT_LOCATION = "Remote"


# -----------------------
# Query
# -----------------------
def compose_query(title=None, location=None, experience=None) -> str:
    """Join the present filters into one free-text query.

    Order is fixed: title, location, "<experience> years". Absent or blank
    filters are left out.
    """
    parts: List[str] = []
    if _text(title):
        parts.append(_text(title))
    if _text(location):
        parts.append(_text(location))
    if _text(experience):
        parts.append(f"{_text(experience)} years")
    return " ".join(parts)


def _text(value) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    return str(value).strip() or None


# -----------------------
# Mapping
# -----------------------
def _verbatim(value) -> Optional[str]:
    return value if isinstance(value, str) else None


def _non_blank(value) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _years(value) -> Optional[int]:
    """Parse a whole, non-negative number out of int/float/numeric-string input."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number) or number < 0:
        return None
    return int(number)


def _experience(record: dict) -> int:
    years = _years(record.get("job_experience"))
    if years is not None:
        return years
    required = record.get("job_required_experience")
    if isinstance(required, dict):
        months = _years(required.get("required_experience_in_months"))
        if months is not None:
            return months // 12
    return 0


def map_job(record: dict) -> JobItem:
    """Normalize one JSearch record into a JobItem.

    Missing or malformed fields fall back (location to city, state, then
    "Remote"; experience to 0) instead of raising.
    """
    return JobItem(
        title=_verbatim(record.get("job_title")),
        company=_verbatim(record.get("employer_name")),
        location=(
            _non_blank(record.get("job_city"))
            or _non_blank(record.get("job_state"))
            or DEFAULT_LOCATION
        ),
        experience=_experience(record),
        link=_verbatim(record.get("job_apply_link")),
    )


# -----------------------
# Client
# -----------------------
class JSearchClient:
    """Thin client for the JSearch search endpoint.

    ``fetch`` never raises: transport errors, timeouts, bad status codes and
    payloads without a ``data`` list are logged and reported as no records.
    """

    def __init__(
        self,
        api_key: str,
        url: str = "https://jsearch.p.rapidapi.com/search",
        host: str = "jsearch.p.rapidapi.com",
        num_pages: int = 10,
        timeout_seconds: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_key = api_key
        self.url = url
        self.host = host
        self.num_pages = num_pages
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings, transport: httpx.BaseTransport | None = None) -> "JSearchClient":
        return cls(
            api_key=settings.RAPIDAPI_KEY,
            url=settings.JSEARCH_URL,
            host=settings.JSEARCH_HOST,
            num_pages=settings.JSEARCH_NUM_PAGES,
            timeout_seconds=settings.JSEARCH_TIMEOUT_SECONDS,
            transport=transport,
        )

    def headers(self) -> dict:
        return {
            "X-RapidAPI-Key": self.api_key,
            "X-RapidAPI-Host": self.host,
            "Accept": "application/json",
        }

    def _request(self, query: str) -> List[dict]:
        params = {"query": query, "num_pages": self.num_pages}
        try:
            with httpx.Client(transport=self._transport, timeout=self.timeout_seconds, headers=self.headers()) as client:
                resp = client.get(self.url, params=params)
                resp.raise_for_status()
                payload: Any = resp.json()
        except httpx.HTTPError as e:
            raise ExternalSourceError(f"request failed: {e!s}") from e
        except ValueError as e:
            # body was not JSON
            raise ExternalSourceError(f"invalid JSON payload: {e!s}") from e

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, list):
            raise ExternalSourceError("response missing expected data field")

        records = [r for r in data if isinstance(r, dict)]
        if len(records) != len(data):
            logger.warning("jsearch skipped %d malformed records query=%r", len(data) - len(records), query)
        return records

    def fetch(self, query: str) -> List[dict]:
        logger.info("jsearch fetch query=%r num_pages=%d", query, self.num_pages)
        try:
            records = self._request(query)
        except ExternalSourceError as e:
            logger.error("jsearch fetch failed query=%r: %s", query, e.detail)
            return []
        if not records:
            logger.warning("jsearch returned no jobs query=%r", query)
        else:
            logger.info("jsearch returned %d jobs query=%r", len(records), query)
        return records
