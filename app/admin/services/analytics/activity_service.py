"""Merged recent-activity feed for the admin dashboard."""

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from app.admin.schemas.admin_analytics import ActivityItem
from app.applications.models.application import ApplicationStatus
from app.core.constants import ACTIVITY_FEED_LIMIT
from app.core.datetime_utils import ensure_utc

APPLICATION_STATUS_TONE: dict[str, str] = {
    ApplicationStatus.APPROVED.value: "success",
    ApplicationStatus.REJECTED.value: "warning",
}


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''} ago"


def format_time_ago(created_at: datetime, now: datetime) -> str:
    """Human label for how long ago ``created_at`` happened.

    Under an hour is "Just now", under a day is counted in hours, under a
    week in days; anything older is shown as a calendar date (M/D/YYYY).
    """
    created_at = ensure_utc(created_at)
    elapsed_seconds = (ensure_utc(now) - created_at).total_seconds()
    hours = int(elapsed_seconds // 3600)
    days = hours // 24

    if hours < 1:
        return "Just now"
    if hours < 24:
        return _plural(hours, "hour")
    if days < 7:
        return _plural(days, "day")
    return f"{created_at.month}/{created_at.day}/{created_at.year}"


def _full_name(first_name: str | None, last_name: str | None) -> str:
    return " ".join(part for part in (first_name, last_name) if part)


class ActivityFeedService:
    """Turns recent rows of each entity into dashboard activity items."""

    @staticmethod
    def from_application(row: Any, now: datetime) -> ActivityItem:
        status = row.status.value if isinstance(row.status, ApplicationStatus) else str(row.status)
        applicant = _full_name(row.first_name, row.last_name)
        return ActivityItem(
            id=str(row.id),
            title="New Application",
            description=f"{applicant} applied for university".lstrip(),
            time=format_time_ago(row.created_at, now),
            status=APPLICATION_STATUS_TONE.get(status, "info"),
            createdAt=ensure_utc(row.created_at),
        )

    @staticmethod
    def from_registration(row: Any, now: datetime) -> ActivityItem:
        role = str(row.role)
        return ActivityItem(
            id=str(row.id),
            title=f"New {role} Registration",
            description=f"{_full_name(row.first_name, row.last_name)} registered as a {role}",
            time=format_time_ago(row.created_at, now),
            status="success",
            createdAt=ensure_utc(row.created_at),
        )

    @staticmethod
    def from_university(row: Any, now: datetime) -> ActivityItem:
        return ActivityItem(
            id=str(row.id),
            title="New University Added",
            description=f"{row.name} was added to the system",
            time=format_time_ago(row.created_at, now),
            status="success",
            createdAt=ensure_utc(row.created_at),
        )

    @staticmethod
    def merge(
        *sources: Iterable[ActivityItem], limit: int = ACTIVITY_FEED_LIMIT
    ) -> list[ActivityItem]:
        """Merge feeds newest first and keep at most ``limit`` items.

        The sort is stable, so items created at the same instant keep the
        order of the sources they came from.
        """
        merged = [item for source in sources for item in source]
        merged.sort(key=lambda item: item.createdAt, reverse=True)
        return merged[:limit]

    @staticmethod
    def build(
        applications: Iterable[Any],
        registrations: Iterable[Any],
        universities: Iterable[Any],
        now: datetime,
    ) -> list[ActivityItem]:
        """Build the complete feed from the rows of each source."""
        return ActivityFeedService.merge(
            [ActivityFeedService.from_application(row, now) for row in applications],
            [ActivityFeedService.from_registration(row, now) for row in registrations],
            [ActivityFeedService.from_university(row, now) for row in universities],
        )
