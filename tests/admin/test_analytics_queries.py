"""
Tests for the aggregate queries and their window bounds.
"""

from datetime import UTC, date, datetime, timedelta

from sqlalchemy.dialects import postgresql, sqlite

from app.admin.services.analytics import queries
from app.admin.services.analytics.analytics_service import AnalyticsService
from app.auth.models.user import User
from tests.utils.factories import create_user_factory

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


class TestCountCreatedBetween:
    def test_lower_bound_inclusive_upper_bound_exclusive(self, db_session):
        since = NOW - timedelta(days=30)
        create_user_factory(db_session, created_at=since)
        create_user_factory(db_session, created_at=since - timedelta(seconds=1))
        create_user_factory(db_session, created_at=NOW)

        assert queries.count_created_between(db_session, User, since) == 2
        assert queries.count_created_between(db_session, User, since, NOW) == 1
        previous_start = since - timedelta(days=1)
        assert queries.count_created_between(db_session, User, previous_start, since) == 1


class TestDailyRegistrations:
    def test_postgresql_day_is_taken_in_utc(self):
        expr = queries.utc_day(User.created_at, "postgresql")

        sql = str(expr.compile(dialect=postgresql.dialect()))

        assert "timezone(" in sql
        assert "date(" in sql

    def test_sqlite_day_uses_stored_value(self):
        expr = queries.utc_day(User.created_at, "sqlite")

        sql = str(expr.compile(dialect=sqlite.dialect()))

        assert "timezone(" not in sql

    def test_late_evening_registration_stays_on_its_utc_day(self, db_session):
        create_user_factory(db_session, created_at=datetime(2026, 10, 18, 23, 30, tzinfo=UTC))
        create_user_factory(db_session, created_at=datetime(2026, 10, 19, 0, 15, tzinfo=UTC))

        by_day = queries.daily_registrations(db_session, NOW - timedelta(days=2))

        assert by_day == {date(2026, 10, 18): 1, date(2026, 10, 19): 1}


class TestWindowEdges:
    async def test_row_at_window_start_counts_only_in_current_window(
        self, test_session_local, db_session
    ):
        start = NOW - timedelta(days=1)
        create_user_factory(db_session, created_at=start)
        create_user_factory(db_session, created_at=datetime(2026, 10, 18, 23, 30, tzinfo=UTC))
        create_user_factory(db_session, created_at=start - timedelta(days=1))
        create_user_factory(db_session, created_at=start - timedelta(days=1, seconds=1))

        result = await AnalyticsService.get_analytics(test_session_local, 1, now=NOW)

        assert result.overview.totalUsers == 4
        assert result.growth.newUsers == 2
        # Only the row at exactly the previous start falls in the previous window
        assert result.growth.userGrowthRate == 100.0

    async def test_daily_series_adds_up_to_new_users(self, test_session_local, db_session):
        create_user_factory(db_session, created_at=datetime(2026, 10, 18, 23, 30, tzinfo=UTC))
        create_user_factory(db_session, created_at=datetime(2026, 10, 19, 11, 59, tzinfo=UTC))
        create_user_factory(db_session, created_at=NOW - timedelta(days=3))

        result = await AnalyticsService.get_analytics(test_session_local, 1, now=NOW)

        points = [(p.day, p.count) for p in result.trends.dailyRegistrations]
        assert points == [("2026-10-18", 1), ("2026-10-19", 1)]
        assert sum(count for _, count in points) == result.growth.newUsers
