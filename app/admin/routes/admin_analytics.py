"""Analytics route for the admin dashboard."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session, sessionmaker

from app.admin.schemas.admin_analytics import AnalyticsResponse
from app.admin.services.analytics import AnalyticsService
from app.auth.dependencies import TokenPrincipal, require_admin
from app.core.constants import DEFAULT_ANALYTICS_PERIOD_DAYS, MAX_ANALYTICS_PERIOD_DAYS
from app.db.session import get_session_factory

router = APIRouter(prefix="/analytics", tags=["admin-analytics"])


@router.get("", response_model=AnalyticsResponse)
async def get_analytics(
    period: int = Query(
        DEFAULT_ANALYTICS_PERIOD_DAYS,
        ge=1,
        le=MAX_ANALYTICS_PERIOD_DAYS,
        description="Trailing window in days",
    ),
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
    admin: TokenPrincipal = Depends(require_admin),
) -> AnalyticsResponse:
    """
    Get system analytics for the admin dashboard.

    Returns:
    - Overview totals (users, universities, applications, counseling sessions)
    - New users/applications in the window and growth vs. the previous window
    - Distributions by role, application status, country and session status
    - Daily registrations for the window
    - The 10 most recent activity items
    """
    return await AnalyticsService.get_analytics(session_factory, period)
