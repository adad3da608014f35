from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List


class JobItem(BaseModel):
    title: Optional[str] = None
    company: Optional[str] = None
    location: str = "Remote"
    experience: int = Field(0, ge=0)  # years
    link: Optional[str] = None  # keep optional, some postings have no apply link


class JobOut(JobItem):
    model_config = ConfigDict(from_attributes=True)

    id: str


class JobsPage(BaseModel):
    jobs: List[JobOut] = []


class SearchFilters(BaseModel):
    title: Optional[str] = None
    location: Optional[str] = None
    # accept either "3" or 3 from callers
    experience: Optional[int | str] = None

    def is_empty(self) -> bool:
        return not any(_present(v) for v in (self.title, self.location, self.experience))


class RefreshSummary(BaseModel):
    query: str
    fetched: int = 0
    stored: int = 0


def _present(value) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


__all__ = [
    "JobItem",
    "JobOut",
    "JobsPage",
    "SearchFilters",
    "RefreshSummary",
]
