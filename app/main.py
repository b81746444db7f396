from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from starlette.concurrency import run_in_threadpool

from app.admin.routes import admin_analytics
from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.core.log_config import RequestLoggingMiddleware, setup_logging
from app.db import base as db_base  # noqa: F401 — register all models so relationships resolve
from app.db.session import SessionLocal, engine

setup_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("starting", project=settings.PROJECT_NAME, api_prefix=settings.API_PREFIX)

    yield

    logger.info("disposing_database_engine")
    engine.dispose()
    logger.info("database_engine_disposed")


app = FastAPI(
    title=settings.PROJECT_NAME,
    debug=settings.DEBUG,
    lifespan=lifespan,
    description="Read-only analytics API for the EduConnect admin dashboard",
    version="1.0.0",
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(
    admin_analytics.router, prefix=f"{settings.API_PREFIX}/admin", tags=["admin-analytics"]
)


def _probe_database() -> str:
    try:
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
            return "healthy"
        finally:
            db.close()
    except Exception:
        logger.exception("database_health_check_failed")
        return "unhealthy"


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": "EduConnect Admin Analytics API", "version": "1.0.0", "status": "running"}


@app.get("/health")
async def health_check() -> dict[str, str]:
    db_status = await run_in_threadpool(_probe_database)
    overall = "healthy" if db_status == "healthy" else "degraded"
    return {"status": overall, "database": db_status}
