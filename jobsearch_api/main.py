from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .collectors.jsearch import JSearchClient
from .config import Settings, get_settings
from .db import init_db, make_engine, make_session_factory
from .errors import JobSearchError
from .logging_config import configure_logging, get_logger
from .routers import collectors as collectors_router
from .routers import jobs as jobs_router
from .routers import search as search_router
from .scheduler import start_scheduler

logger = get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    fetcher_factory: Callable[[], JSearchClient] | None = None,
) -> FastAPI:
    explicit_settings = settings is not None
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    engine = make_engine(settings.DATABASE_URL)
    session_factory = make_session_factory(engine)
    if fetcher_factory is None:
        fetcher_factory = lambda: JSearchClient.from_settings(settings)  # noqa: E731

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # create tables on startup (development convenience). Use migrations for prod.
        init_db(engine)
        try:
            app.state.scheduler = start_scheduler(
                settings,
                session_factory,
                fetcher_factory,
            )
        except Exception as e:
            # do not crash app if scheduling fails
            logger.error("[scheduler] failed to start: %s", e)
        yield
        if app.state.scheduler is not None:
            app.state.scheduler.shutdown(wait=False)
            app.state.scheduler = None
        engine.dispose()

    app = FastAPI(title=settings.APP_NAME, version="1.0.0", lifespan=lifespan)
    if explicit_settings:
        app.dependency_overrides[get_settings] = lambda: settings

    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.fetcher_factory = fetcher_factory
    app.state.scheduler = None

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins or ["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # ✅ Mount routers at the root and under /api (paths of the original service)
    for prefix in ("", "/api"):
        app.include_router(search_router.router, prefix=prefix)
        app.include_router(jobs_router.router, prefix=prefix)
    app.include_router(collectors_router.router)

    @app.exception_handler(JobSearchError)
    async def _job_search_error(request: Request, exc: JobSearchError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def _unexpected_error(request: Request, exc: Exception):
        logger.exception("Error in %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


def run():
    import uvicorn

    settings = get_settings()
    logger.info("Server running on port %d", settings.PORT)
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
