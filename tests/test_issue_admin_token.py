"""
Tests for the admin token developer script.
"""

import pytest

from app.auth.dependencies import TokenPrincipal
from app.core.security import decode_token
from app.scripts.issue_admin_token import issue_admin_token
from tests.utils.helpers import create_auth_headers


def test_token_carries_admin_claims():
    token = issue_admin_token("ops@example.com", role="SUPER_ADMIN", subject="ops-1")

    payload = decode_token(token)
    assert payload is not None
    assert payload["sub"] == "ops-1"
    assert payload["email"] == "ops@example.com"
    assert payload["role"] == "SUPER_ADMIN"
    assert payload["type"] == "access"
    assert TokenPrincipal(payload["sub"], payload["email"], payload["role"]).is_admin


def test_rejects_non_admin_role():
    with pytest.raises(ValueError):
        issue_admin_token("student@example.com", role="STUDENT")


async def test_issued_token_opens_dashboard(test_client):
    token = issue_admin_token("ops@example.com")

    response = await test_client.get("/api/admin/analytics", headers=create_auth_headers(token))

    assert response.status_code == 200
