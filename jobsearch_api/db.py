from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def make_engine(database_url: str) -> Engine:
	if database_url.startswith("sqlite"):
		kwargs = {"connect_args": {"check_same_thread": False}}
		if ":memory:" in database_url or database_url in ("sqlite://", "sqlite+pysqlite://"):
			# one shared connection, otherwise every session sees its own empty db
			kwargs["poolclass"] = StaticPool
		return create_engine(database_url, **kwargs)
	return create_engine(database_url, pool_pre_ping=True)


def make_session_factory(engine: Engine) -> sessionmaker:
	return sessionmaker(bind=engine, autoflush=False, autocommit=False)


def init_db(engine: Engine):
	"""Create the jobs table if it does not exist yet.

	Run by the app lifespan before the first refresh is scheduled; existing
	tables are left as they are.
	"""
	from . import models  # noqa: F401  (registers tables on Base)

	Base.metadata.create_all(bind=engine)
