"""Dashboard analytics aggregation."""

import time
from datetime import UTC, datetime
from typing import Any

import structlog
from sqlalchemy.orm import Session, sessionmaker

from app.admin.schemas.admin_analytics import (
    AnalyticsDistributions,
    AnalyticsGrowth,
    AnalyticsOverview,
    AnalyticsResponse,
    AnalyticsTrends,
    CountryCount,
    DailyRegistrationPoint,
    RoleCount,
    StatusCount,
)
from app.admin.services.analytics import queries
from app.admin.services.analytics.activity_service import ActivityFeedService
from app.admin.services.analytics.base import (
    calculate_growth_rate,
    get_previous_window,
    get_window_boundaries,
    iter_days,
)
from app.admin.services.analytics.query_runner import Query, run_queries
from app.applications.models.application import Application
from app.auth.models.user import User
from app.core.datetime_utils import ensure_utc
from app.counseling.models.counseling_session import CounselingSession
from app.universities.models.university import University

logger = structlog.get_logger(__name__)


class AnalyticsService:
    """Service for the admin dashboard analytics payload."""

    @staticmethod
    def build_queries(start: datetime, previous_start: datetime) -> dict[str, Query]:
        """All independent reads needed for one analytics payload.

        Args:
            start: Start of the current window.
            previous_start: Start of the previous window (which ends at ``start``).

        Returns:
            Named query functions, each taking its own session.
        """
        return {
            "total_users": lambda db: queries.count_all(db, User),
            "total_universities": lambda db: queries.count_all(db, University),
            "total_applications": lambda db: queries.count_all(db, Application),
            "total_sessions": lambda db: queries.count_all(db, CounselingSession),
            "new_users": lambda db: queries.count_created_between(db, User, start),
            "new_applications": lambda db: queries.count_created_between(db, Application, start),
            "previous_users": lambda db: queries.count_created_between(
                db, User, previous_start, start
            ),
            "previous_applications": lambda db: queries.count_created_between(
                db, Application, previous_start, start
            ),
            "users_by_role": lambda db: queries.count_grouped_by(db, User.role),
            "applications_by_status": lambda db: queries.count_grouped_by(
                db, Application.status
            ),
            "universities_by_country": queries.top_university_countries,
            "sessions_by_status": lambda db: queries.count_grouped_by(
                db, CounselingSession.status
            ),
            "daily_registrations": lambda db: queries.daily_registrations(db, start),
            "recent_applications": queries.recent_applications,
            "recent_registrations": queries.recent_registrations,
            "recent_universities": queries.recent_universities,
        }

    @staticmethod
    def build_daily_series(
        by_day: dict[Any, int], start: datetime, end: datetime
    ) -> list[DailyRegistrationPoint]:
        """One point per UTC day of the window, oldest first, zero-filled."""
        return [
            DailyRegistrationPoint(day=day.isoformat(), count=by_day.get(day, 0))
            for day in iter_days(ensure_utc(start).date(), ensure_utc(end).date())
        ]

    @staticmethod
    async def get_analytics(
        session_factory: sessionmaker[Session],
        period_days: int,
        now: datetime | None = None,
    ) -> AnalyticsResponse:
        """Aggregate every dashboard figure for a trailing window.

        Args:
            session_factory: Factory for the per-query sessions.
            period_days: Window length in days.
            now: End of the window; defaults to the current UTC time.

        Returns:
            AnalyticsResponse with totals, growth, distributions, trends and
            the recent-activity feed.

        Raises:
            AnalyticsUnavailableError: If any query fails.
        """
        now = now or datetime.now(UTC)
        start, end = get_window_boundaries(period_days, now)
        previous_start, _ = get_previous_window(start, end)

        started = time.perf_counter()
        query_map = AnalyticsService.build_queries(start, previous_start)
        results = await run_queries(session_factory, query_map)

        growth = AnalyticsGrowth(
            newUsers=results["new_users"],
            newApplications=results["new_applications"],
            userGrowthRate=calculate_growth_rate(results["new_users"], results["previous_users"]),
            applicationGrowthRate=calculate_growth_rate(
                results["new_applications"], results["previous_applications"]
            ),
        )

        response = AnalyticsResponse(
            overview=AnalyticsOverview(
                totalUsers=results["total_users"],
                totalUniversities=results["total_universities"],
                totalApplications=results["total_applications"],
                totalSessions=results["total_sessions"],
                period=period_days,
            ),
            growth=growth,
            distributions=AnalyticsDistributions(
                usersByRole=[
                    RoleCount(role=role, count=count) for role, count in results["users_by_role"]
                ],
                applicationsByStatus=[
                    StatusCount(status=status, count=count)
                    for status, count in results["applications_by_status"]
                ],
                universitiesByCountry=[
                    CountryCount(country=country, count=count)
                    for country, count in results["universities_by_country"]
                ],
                sessionsByStatus=[
                    StatusCount(status=status, count=count)
                    for status, count in results["sessions_by_status"]
                ],
            ),
            trends=AnalyticsTrends(
                dailyRegistrations=AnalyticsService.build_daily_series(
                    results["daily_registrations"], start, end
                ),
            ),
            timestamp=now,
            recentActivity=ActivityFeedService.build(
                results["recent_applications"],
                results["recent_registrations"],
                results["recent_universities"],
                now,
            ),
        )

        logger.info(
            "analytics_computed",
            period_days=period_days,
            queries=len(query_map),
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response
