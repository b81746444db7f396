"""Analytics schemas for the admin dashboard.

Field names are camelCase because the dashboard frontend consumes the
payload as-is.
"""

from pydantic import BaseModel, ConfigDict, Field

from app.core.datetime_utils import UTCDatetime

# ============ Overview & Growth ============


class AnalyticsOverview(BaseModel):
    """All-time totals."""

    totalUsers: int
    totalUniversities: int
    totalApplications: int
    totalSessions: int
    period: int = Field(description="Window length in days")


class AnalyticsGrowth(BaseModel):
    """Current window compared with the window before it."""

    newUsers: int = Field(description="Users registered in the current window")
    newApplications: int = Field(description="Applications created in the current window")
    userGrowthRate: float = Field(description="Percentage change vs. previous window")
    applicationGrowthRate: float = Field(description="Percentage change vs. previous window")


# ============ Distributions ============


class RoleCount(BaseModel):
    role: str
    count: int


class StatusCount(BaseModel):
    status: str
    count: int


class CountryCount(BaseModel):
    country: str
    count: int


class AnalyticsDistributions(BaseModel):
    usersByRole: list[RoleCount]
    applicationsByStatus: list[StatusCount]
    universitiesByCountry: list[CountryCount] = Field(description="Top countries by count")
    sessionsByStatus: list[StatusCount]


# ============ Trends ============


class DailyRegistrationPoint(BaseModel):
    """Registrations on a single UTC day."""

    model_config = ConfigDict(populate_by_name=True)

    day: str = Field(alias="_id", description="Date as YYYY-MM-DD")
    count: int


class AnalyticsTrends(BaseModel):
    dailyRegistrations: list[DailyRegistrationPoint]


# ============ Activity Feed ============


class ActivityItem(BaseModel):
    """Single entry of the merged recent-activity feed."""

    id: str
    title: str
    description: str
    time: str = Field(description="Relative label, e.g. '3 hours ago'")
    status: str = Field(description="One of 'success', 'warning', 'info'")
    createdAt: UTCDatetime


# ============ Response ============


class AnalyticsResponse(BaseModel):
    """Complete analytics payload for the admin dashboard."""

    overview: AnalyticsOverview
    growth: AnalyticsGrowth
    distributions: AnalyticsDistributions
    trends: AnalyticsTrends
    timestamp: UTCDatetime
    recentActivity: list[ActivityItem]
