import enum
import uuid
from datetime import UTC, datetime

from sqlalchemy import Boolean, Column, DateTime, String, Uuid

from app.db.session import Base


class UserRole(str, enum.Enum):
    STUDENT = "STUDENT"
    COUNSELOR = "COUNSELOR"
    ADMIN = "ADMIN"
    SUPER_ADMIN = "SUPER_ADMIN"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class User(Base):
    """
    Platform user as stored by the account service.

    Attributes:
        id: Unique UUID primary key
        email: Unique email address
        first_name: Given name
        last_name: Family name
        role: One of STUDENT, COUNSELOR, ADMIN, SUPER_ADMIN
        is_active: Whether the user account is active
        created_at: Registration timestamp (UTC)
        updated_at: Last update timestamp (UTC)
    """

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    first_name = Column(String(100), nullable=False, default="")
    last_name = Column(String(100), nullable=False, default="")

    role = Column(String(50), nullable=False, default=UserRole.STUDENT.value, index=True)
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
