"""Concurrent fan-out of independent read queries.

Each query is a plain function taking a SQLAlchemy ``Session``. Queries run
in the server thread pool, each against its own session, and are awaited
jointly. Sessions are never shared between threads.
"""

import asyncio
from collections.abc import Callable, Mapping
from typing import Any

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from starlette.concurrency import run_in_threadpool

from app.core.exceptions import AnalyticsUnavailableError

logger = structlog.get_logger(__name__)

Query = Callable[[Session], Any]


def _run_in_own_session(session_factory: sessionmaker[Session], name: str, query: Query) -> Any:
    with session_factory() as db:
        try:
            return query(db)
        except SQLAlchemyError as e:
            logger.exception("analytics_query_failed", query=name, error=str(e))
            raise AnalyticsUnavailableError() from e


async def run_queries(
    session_factory: sessionmaker[Session],
    queries: Mapping[str, Query],
) -> dict[str, Any]:
    """Run all ``queries`` concurrently and return their results by name.

    Args:
        session_factory: Factory producing one session per query.
        queries: Named read-only query functions.

    Returns:
        Mapping of query name to result, in the same key order as ``queries``.

    Raises:
        AnalyticsUnavailableError: If any query fails at the database level.
            Every query has finished before the first failure is raised.
    """
    names = list(queries)
    results = await asyncio.gather(
        *(
            run_in_threadpool(_run_in_own_session, session_factory, name, queries[name])
            for name in names
        ),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return dict(zip(names, results, strict=True))
