"""Read-only aggregate queries behind the analytics endpoint.

Every function takes its own session and returns plain values or
``Row`` tuples, never ORM instances, so results stay usable after the
session that produced them is closed.
"""

import enum
from datetime import date, datetime
from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import InstrumentedAttribute, Session
from sqlalchemy.sql import ColumnElement

from app.applications.models.application import Application
from app.auth.models.user import User
from app.core.constants import (
    FEED_REGISTRATION_ROLES,
    RECENT_APPLICATIONS_LIMIT,
    RECENT_REGISTRATIONS_LIMIT,
    RECENT_UNIVERSITIES_LIMIT,
    TOP_COUNTRIES_LIMIT,
)
from app.universities.models.university import University


def _key(value: Any) -> str:
    if isinstance(value, enum.Enum):
        return str(value.value)
    return "" if value is None else str(value)


def count_all(db: Session, model: type[Any]) -> int:
    """Count every row of ``model``."""
    result: int | None = db.query(func.count(model.id)).scalar()
    return result or 0


def count_created_between(
    db: Session,
    model: type[Any],
    since: datetime,
    until: datetime | None = None,
) -> int:
    """Count rows of ``model`` created at or after ``since``.

    Args:
        db: Database session.
        model: Mapped class with ``id`` and ``created_at`` columns.
        since: Inclusive lower bound.
        until: Exclusive upper bound. If None, no upper bound.

    Returns:
        Number of matching rows.
    """
    query = db.query(func.count(model.id)).filter(model.created_at >= since)
    if until is not None:
        query = query.filter(model.created_at < until)
    return query.scalar() or 0


def count_grouped_by(
    db: Session,
    column: InstrumentedAttribute[Any],
    order_by_count: bool = False,
    limit: int | None = None,
) -> list[tuple[str, int]]:
    """Count rows grouped by ``column``.

    Args:
        db: Database session.
        column: Grouping column; its table's ``id`` is counted.
        order_by_count: Sort groups by count descending (key ascending on ties).
        limit: Keep only the first ``limit`` groups.

    Returns:
        List of (group key, count). Enum keys are reported by value.
    """
    id_column: ColumnElement[Any] = column.class_.id
    count = func.count(id_column)
    query = db.query(column, count).group_by(column)
    if order_by_count:
        query = query.order_by(count.desc(), column)
    else:
        query = query.order_by(column)
    if limit is not None:
        query = query.limit(limit)
    return [(_key(key), value) for key, value in query.all()]


def top_university_countries(db: Session) -> list[tuple[str, int]]:
    return count_grouped_by(
        db, University.country, order_by_count=True, limit=TOP_COUNTRIES_LIMIT
    )


def utc_day(column: ColumnElement[Any], dialect_name: str) -> ColumnElement[Any]:
    """Calendar day of a timestamp column, taken in UTC.

    PostgreSQL casts ``timestamptz`` to a date in the session time zone, so the
    value is shifted to UTC first. SQLite stores the UTC wall time already.
    """
    if dialect_name == "postgresql":
        return func.date(func.timezone("UTC", column))
    return func.date(column)


def daily_registrations(db: Session, since: datetime) -> dict[date, int]:
    """Registrations per UTC calendar day from ``since`` onwards."""
    day = utc_day(User.created_at, db.get_bind().dialect.name).label("day")
    rows = (
        db.query(day, func.count(User.id))
        .filter(User.created_at >= since)
        .group_by(day)
        .all()
    )
    by_day: dict[date, int] = {}
    for raw_day, count in rows:
        # SQLite returns the day as a string, PostgreSQL as a date
        parsed = raw_day if isinstance(raw_day, date) else date.fromisoformat(str(raw_day))
        by_day[parsed] = by_day.get(parsed, 0) + count
    return by_day


def recent_applications(db: Session) -> list[Any]:
    """Newest applications with the applicant's name."""
    return (
        db.query(
            Application.id,
            Application.status,
            Application.created_at,
            User.first_name,
            User.last_name,
        )
        .outerjoin(User, User.id == Application.user_id)
        .order_by(Application.created_at.desc())
        .limit(RECENT_APPLICATIONS_LIMIT)
        .all()
    )


def recent_registrations(db: Session) -> list[Any]:
    """Newest student and counselor accounts."""
    return (
        db.query(User.id, User.first_name, User.last_name, User.role, User.created_at)
        .filter(User.role.in_(FEED_REGISTRATION_ROLES))
        .order_by(User.created_at.desc())
        .limit(RECENT_REGISTRATIONS_LIMIT)
        .all()
    )


def recent_universities(db: Session) -> list[Any]:
    return (
        db.query(University.id, University.name, University.created_at)
        .order_by(University.created_at.desc())
        .limit(RECENT_UNIVERSITIES_LIMIT)
        .all()
    )
