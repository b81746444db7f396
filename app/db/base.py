"""
Database base module - imports all models so their tables and relationships
are registered on ``Base.metadata``.

The analytics service only reads from these tables; importing this module
once (from ``app.main``) is enough for string-based relationships to resolve.
"""

from app.applications.models.application import Application
from app.auth.models.user import User
from app.counseling.models.counseling_session import CounselingSession
from app.universities.models.university import University

__all__ = [
    "Application",
    "CounselingSession",
    "University",
    "User",
]
