import uuid
from datetime import UTC, datetime

from faker import Faker
from sqlalchemy.orm import Session

from app.applications.models.application import Application, ApplicationStatus
from app.auth.models.user import User, UserRole
from app.counseling.models.counseling_session import CounselingSession, SessionStatus
from app.universities.models.university import University

fake = Faker()


def create_user_factory(
    db_session: Session,
    role: str = UserRole.STUDENT.value,
    first_name: str | None = None,
    last_name: str | None = None,
    email: str | None = None,
    created_at: datetime | None = None,
) -> User:
    """
    Factory function to create test users.

    Args:
        db_session: Database session
        role: User role (STUDENT, COUNSELOR, ADMIN, SUPER_ADMIN)
        first_name: Given name (generates random if None)
        last_name: Family name (generates random if None)
        email: User email (generates random if None)
        created_at: Registration time (defaults to now)

    Returns:
        Created User instance
    """
    now = datetime.now(UTC)
    user = User(
        id=uuid.uuid4(),
        email=email or fake.unique.email(),
        first_name=first_name if first_name is not None else fake.first_name(),
        last_name=last_name if last_name is not None else fake.last_name(),
        role=role,
        is_active=True,
        created_at=created_at or now,
        updated_at=created_at or now,
    )

    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)

    return user


def create_university_factory(
    db_session: Session,
    name: str | None = None,
    country: str = "United Kingdom",
    created_at: datetime | None = None,
) -> University:
    now = datetime.now(UTC)
    university = University(
        id=uuid.uuid4(),
        name=name or f"University of {fake.city()}",
        country=country,
        created_at=created_at or now,
        updated_at=created_at or now,
    )
    db_session.add(university)
    db_session.commit()
    db_session.refresh(university)
    return university


def create_application_factory(
    db_session: Session,
    user: User,
    university: University | None = None,
    status: ApplicationStatus = ApplicationStatus.PENDING,
    created_at: datetime | None = None,
) -> Application:
    now = datetime.now(UTC)
    application = Application(
        id=uuid.uuid4(),
        user_id=user.id,
        university_id=university.id if university else None,
        status=status,
        created_at=created_at or now,
        updated_at=created_at or now,
    )
    db_session.add(application)
    db_session.commit()
    db_session.refresh(application)
    return application


def create_counseling_session_factory(
    db_session: Session,
    student: User,
    counselor: User | None = None,
    status: SessionStatus = SessionStatus.SCHEDULED,
    created_at: datetime | None = None,
) -> CounselingSession:
    now = datetime.now(UTC)
    counseling_session = CounselingSession(
        id=uuid.uuid4(),
        student_id=student.id,
        counselor_id=counselor.id if counselor else None,
        status=status,
        created_at=created_at or now,
        updated_at=created_at or now,
    )
    db_session.add(counseling_session)
    db_session.commit()
    db_session.refresh(counseling_session)
    return counseling_session
