import uuid

from sqlalchemy import Column, Integer, String, Text
from .db import Base


def _new_id() -> str:
    return uuid.uuid4().hex


class JobORM(Base):
    __tablename__ = "jobs"
    id = Column(String(32), primary_key=True, default=_new_id)  # never reused across refreshes
    position = Column(Integer, nullable=False, index=True)  # order within the stored batch
    title = Column(Text, nullable=True)
    company = Column(Text, nullable=True)
    location = Column(Text, nullable=False, default="Remote")
    experience = Column(Integer, nullable=False, default=0)  # years
    link = Column(Text, nullable=True)  # often long
