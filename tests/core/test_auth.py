"""
Tests for the bearer-token dependency, directly and through a protected route.
"""

from datetime import timedelta
from types import SimpleNamespace
from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt

from mou_tracker.core.auth import AuthenticatedAdmin, get_current_admin
from mou_tracker.core.config import settings
from mou_tracker.core.errors import AuthError, ForbiddenError
from mou_tracker.core.security import create_access_token


def _request():
    request = MagicMock()
    request.url.path = "/api/mous"
    request.state = SimpleNamespace()
    return request


def _bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestGetCurrentAdmin:
    @pytest.mark.asyncio
    async def test_missing_credentials_is_401(self):
        with pytest.raises(AuthError) as exc_info:
            await get_current_admin(_request(), None)

        assert exc_info.value.status_code == 401
        assert exc_info.value.error_code == "MISSING_TOKEN"

    @pytest.mark.asyncio
    async def test_garbage_token_is_403(self):
        with pytest.raises(ForbiddenError) as exc_info:
            await get_current_admin(_request(), _bearer("not.a.jwt"))

        assert exc_info.value.status_code == 403
        assert exc_info.value.error_code == "INVALID_TOKEN"

    @pytest.mark.asyncio
    async def test_wrong_token_type_is_403(self):
        forged = jwt.encode(
            {"sub": str(uuid4()), "email": "a@b.com", "name": "A", "type": "refresh"},
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(ForbiddenError) as exc_info:
            await get_current_admin(_request(), _bearer(forged))

        assert exc_info.value.error_code == "INVALID_TOKEN_TYPE"

    @pytest.mark.asyncio
    async def test_missing_claims_is_403(self):
        token = create_access_token(subject="not-a-uuid")

        with pytest.raises(ForbiddenError) as exc_info:
            await get_current_admin(_request(), _bearer(token))

        assert exc_info.value.error_code == "INVALID_TOKEN_CLAIMS"

    @pytest.mark.asyncio
    async def test_valid_token_yields_admin(self):
        admin_id = uuid4()
        token = create_access_token(
            subject=str(admin_id),
            additional_claims={"email": "ada@university.edu", "name": "Ada"},
        )
        request = _request()

        admin = await get_current_admin(request, _bearer(token))

        assert admin == AuthenticatedAdmin(id=admin_id, email="ada@university.edu", name="Ada")
        assert request.state.admin is admin
        assert request.state.admin_id == str(admin_id)


class TestProtectedRoute:
    @pytest.mark.asyncio
    async def test_no_header_returns_401(self, client):
        response = await client.get("/api/mous")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        body = response.json()
        assert body["success"] is False
        assert body["code"] == "MISSING_TOKEN"

    @pytest.mark.asyncio
    async def test_non_bearer_scheme_returns_401(self, client):
        response = await client.get("/api/mous", headers={"Authorization": "Basic YTpi"})
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_tampered_token_returns_403(self, client):
        forged = jwt.encode(
            {"sub": str(uuid4()), "email": "x@y.com", "name": "X", "type": "access"},
            "not-the-server-key",
            algorithm="HS256",
        )
        response = await client.get(
            "/api/participants", headers={"Authorization": f"Bearer {forged}"}
        )

        assert response.status_code == 403
        assert response.json()["code"] == "INVALID_TOKEN"

    @pytest.mark.asyncio
    async def test_expired_token_returns_403(self, client, admin_identity):
        token = create_access_token(
            subject=str(admin_identity["id"]),
            additional_claims={"email": admin_identity["email"], "name": admin_identity["name"]},
            expires_delta=timedelta(minutes=-1),
        )
        response = await client.get("/api/fields", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_valid_token_reaches_handler(self, client, auth_headers, mock_db):
        result = MagicMock()
        result.scalars.return_value.all.return_value = []
        mock_db.execute.return_value = result

        response = await client.get("/api/mous", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"success": True, "count": 0, "data": []}
