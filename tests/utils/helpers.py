from datetime import timedelta
from typing import Any

from jose import jwt

from app.core.config import settings
from app.core.security import create_access_token


def create_auth_headers(token: str) -> dict[str, str]:
    """Create Authorization headers with Bearer token."""
    return {"Authorization": f"Bearer {token}"}


def create_token_for_role(role: str) -> str:
    return create_access_token({"sub": "user-id", "email": "user@example.com", "role": role})


def create_expired_token(role: str = "ADMIN") -> str:
    return create_access_token(
        {"sub": "user-id", "email": "user@example.com", "role": role},
        expires_delta=timedelta(minutes=-5),
    )


def create_raw_token(
    role: str = "ADMIN", token_type: str = "access", secret: str | None = None
) -> str:
    """Sign a token by hand, e.g. with a foreign key or a non-access type."""
    return jwt.encode(
        {"sub": "user-id", "role": role, "type": token_type},
        secret or settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )


def assert_error_envelope(data: dict[str, Any], code: str, message: str) -> None:
    assert data["success"] is False
    assert data["error"]["code"] == code
    assert data["error"]["message"] == message
