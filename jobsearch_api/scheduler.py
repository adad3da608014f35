from typing import Callable

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger
from sqlalchemy.orm import sessionmaker

from .collectors.jsearch import JSearchClient
from .config import Settings
from .logging_config import get_logger
from .services.search import refresh_jobs

logger = get_logger(__name__)


def make_refresh_job(settings: Settings, session_factory: sessionmaker, fetcher_factory: Callable[[], JSearchClient]):
    def _job():
        # Own session per run; never reuse request-scoped sessions
        db = session_factory()
        try:
            summary = refresh_jobs(db, fetcher_factory(), settings.INITIAL_QUERY)
            logger.info("scheduled refresh query=%r fetched=%d stored=%d", summary.query, summary.fetched, summary.stored)
        except Exception as e:
            logger.exception("scheduled refresh failed: %s", e)
        finally:
            db.close()
    return _job


def start_scheduler(
    settings: Settings,
    session_factory: sessionmaker,
    fetcher_factory: Callable[[], JSearchClient],
) -> BackgroundScheduler | None:
    """Start the background refresh jobs; None when nothing is configured."""
    if not settings.REFRESH_ON_STARTUP and settings.REFRESH_INTERVAL_SECONDS <= 0:
        return None

    scheduler = BackgroundScheduler()
    job = make_refresh_job(settings, session_factory, fetcher_factory)

    if settings.REFRESH_ON_STARTUP:
        # no trigger: runs once, right away, while the server starts accepting requests
        scheduler.add_job(job, id="initial_refresh")
        logger.info("Scheduled initial refresh query=%r", settings.INITIAL_QUERY)
    if settings.REFRESH_INTERVAL_SECONDS > 0:
        scheduler.add_job(job, IntervalTrigger(seconds=settings.REFRESH_INTERVAL_SECONDS), id="periodic_refresh")
        logger.info("Scheduled periodic refresh interval=%ss", settings.REFRESH_INTERVAL_SECONDS)

    scheduler.start()
    return scheduler
