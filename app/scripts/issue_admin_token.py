"""Mint a signed admin bearer token for local dashboard development."""

import sys
import uuid
from datetime import timedelta
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from app.auth.models.user import UserRole
from app.core.security import create_access_token

ADMIN_ROLE_CHOICES = (UserRole.ADMIN.value, UserRole.SUPER_ADMIN.value)


def issue_admin_token(
    email: str,
    role: str = UserRole.ADMIN.value,
    subject: str | None = None,
    expires_minutes: int | None = None,
) -> str:
    """Return an access token carrying an admin role claim."""
    if role not in ADMIN_ROLE_CHOICES:
        raise ValueError(f"role must be one of {', '.join(ADMIN_ROLE_CHOICES)}")

    expires_delta = timedelta(minutes=expires_minutes) if expires_minutes else None
    return create_access_token(
        {"sub": subject or str(uuid.uuid4()), "email": email, "role": role},
        expires_delta=expires_delta,
    )


def main() -> None:
    import argparse

    parser = argparse.ArgumentParser(description="Issue an admin access token")
    parser.add_argument("--email", default="admin@educonnect.local", help="Email claim")
    parser.add_argument(
        "--role", default=UserRole.ADMIN.value, choices=ADMIN_ROLE_CHOICES, help="Role claim"
    )
    parser.add_argument("--sub", default=None, help="Subject claim (default: random UUID)")
    parser.add_argument(
        "--expires-minutes",
        type=int,
        default=None,
        help="Lifetime in minutes (default: ACCESS_TOKEN_EXPIRE_MINUTES)",
    )
    args = parser.parse_args()

    token = issue_admin_token(args.email, args.role, args.sub, args.expires_minutes)
    print(token)


if __name__ == "__main__":
    main()
