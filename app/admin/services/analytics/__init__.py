"""Analytics module for the admin dashboard.

This module is split into focused pieces:
- base: Window helpers and growth-rate arithmetic
- queries: Read-only aggregate queries (one session each)
- query_runner: Concurrent fan-out of independent queries
- activity_service: Merged recent-activity feed
- analytics_service: Full dashboard payload
"""

from app.admin.services.analytics.activity_service import ActivityFeedService, format_time_ago
from app.admin.services.analytics.analytics_service import AnalyticsService
from app.admin.services.analytics.base import (
    calculate_growth_rate,
    get_previous_window,
    get_window_boundaries,
    iter_days,
)
from app.admin.services.analytics.query_runner import run_queries

__all__ = [
    # Base utilities
    "get_window_boundaries",
    "get_previous_window",
    "calculate_growth_rate",
    "iter_days",
    "run_queries",
    "format_time_ago",
    # Services
    "AnalyticsService",
    "ActivityFeedService",
]
