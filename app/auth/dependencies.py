import logging
from dataclasses import dataclass
from typing import Annotated, Any

from fastapi import Depends, Header

from app.core import security
from app.core.constants import ADMIN_ROLES
from app.core.exceptions import ForbiddenError, UnauthorizedError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class TokenPrincipal:
    """Identity carried by a verified access token."""

    subject: str | None
    email: str | None
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role.lower() in ADMIN_ROLES


async def get_bearer_token(
    authorization: Annotated[str | None, Header()] = None,
) -> str:
    """Extract the raw token from an ``Authorization: Bearer`` header"""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise UnauthorizedError("Missing or invalid Authorization header")
    token = authorization[len(BEARER_PREFIX) :].strip()
    if not token:
        raise UnauthorizedError("Missing or invalid Authorization header")
    return token


async def get_token_principal(token: str = Depends(get_bearer_token)) -> TokenPrincipal:
    """Decode and validate the bearer JWT"""
    payload: dict[str, Any] | None = security.decode_token(token)
    if payload is None:
        raise UnauthorizedError("Invalid or expired token")

    token_type = payload.get("type")
    if token_type is not None and token_type != "access":
        raise UnauthorizedError("Invalid or expired token")

    role = payload.get("role")
    return TokenPrincipal(
        subject=payload.get("sub") or payload.get("id"),
        email=payload.get("email"),
        role=role if isinstance(role, str) else "",
    )


async def require_admin(
    principal: TokenPrincipal = Depends(get_token_principal),
) -> TokenPrincipal:
    if not principal.is_admin:
        logger.warning(
            "Non-admin token rejected (sub=%s, role=%s)", principal.subject, principal.role
        )
        raise ForbiddenError("Admin access required")
    return principal
