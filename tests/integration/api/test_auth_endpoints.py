"""Integration tests for the authentication endpoints."""

from datetime import timedelta
from uuid import UUID

import pytest

from shopfront.presentation.api.routers.auth import REFRESH_TOKEN_COOKIE
from shopfront_auth import JWTService
from tests.shared.fixtures.api import bearer

pytestmark = pytest.mark.integration


class TestRegister:
    def test_register_returns_tokens_and_customer(
        self,
        test_client,
        registered_user_data,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json=registered_user_data,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["access_token"]
        assert data["refresh_token"]
        assert data["token_type"] == "bearer"
        assert data["user"]["email"] == "a@b.com"
        assert data["user"]["role"] == "CUSTOMER"
        assert REFRESH_TOKEN_COOKIE in response.cookies

    def test_register_creates_empty_cart(
        self,
        test_client,
        auth_headers,
        api_v1_prefix,
    ):
        response = test_client.get(f"{api_v1_prefix}/cart", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["items"] == []

    def test_duplicate_email_conflicts(
        self,
        test_client,
        registered_user,
        registered_user_data,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={**registered_user_data, "email": "A@B.com"},
        )

        assert response.status_code == 409
        assert response.json() == {
            "success": False,
            "error": "Email address is already registered",
            "code": "EMAIL_ALREADY_EXISTS",
        }

    def test_short_password_is_rejected(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": "a@b.com", "password": "short", "name": "Ada"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_invalid_email_is_rejected(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": "not-an-email", "password": "password123", "name": "Ada"},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False


class TestLogin:
    def test_login_succeeds(
        self,
        test_client,
        registered_user,
        registered_user_data,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={
                "email": registered_user_data["email"],
                "password": registered_user_data["password"],
            },
        )

        assert response.status_code == 200
        assert response.json()["data"]["user"]["id"] == registered_user["user"]["id"]

    @pytest.mark.parametrize(
        ("email", "password"),
        [("a@b.com", "wrong-password"), ("nobody@b.com", "password123")],
    )
    def test_bad_credentials_give_the_same_answer(
        self,
        test_client,
        registered_user,
        api_v1_prefix,
        email,
        password,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": email, "password": password},
        )

        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "error": "Invalid credentials",
            "code": "INVALID_CREDENTIALS",
        }


class TestTokens:
    def test_protected_route_requires_token(self, test_client, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/cart")

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHORIZED"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_garbage_token_is_rejected(self, test_client, api_v1_prefix):
        response = test_client.get(
            f"{api_v1_prefix}/cart",
            headers=bearer("not.a.token"),
        )

        assert response.status_code == 401

    def test_refresh_token_is_not_accepted_as_access_token(
        self,
        test_client,
        registered_user,
        api_v1_prefix,
    ):
        response = test_client.get(
            f"{api_v1_prefix}/cart",
            headers=bearer(registered_user["refresh_token"]),
        )

        assert response.status_code == 401

    def test_expired_access_token_then_refresh(
        self,
        test_client,
        registered_user,
        api_settings,
        api_v1_prefix,
    ):
        # Arrange: an access token that expired a second ago
        jwt_service = JWTService(
            secret_key=api_settings.jwt_secret_key.get_secret_value(),
            refresh_secret_key=api_settings.refresh_secret_key,
        )
        expired = jwt_service.create_access_token(
            UUID(registered_user["user"]["id"]),
            "CUSTOMER",
            expires_delta=timedelta(seconds=-1),
        )

        # Act & Assert: rejected...
        response = test_client.get(f"{api_v1_prefix}/cart", headers=bearer(expired))
        assert response.status_code == 401

        # ...then the refresh cookie yields a working access token
        test_client.cookies.clear()
        test_client.cookies.set(REFRESH_TOKEN_COOKIE, registered_user["refresh_token"])
        refreshed = test_client.post(f"{api_v1_prefix}/auth/refresh")
        assert refreshed.status_code == 200
        new_token = refreshed.json()["data"]["access_token"]

        response = test_client.get(f"{api_v1_prefix}/cart", headers=bearer(new_token))
        assert response.status_code == 200

    def test_refresh_without_cookie(self, test_client, api_v1_prefix):
        test_client.cookies.clear()

        response = test_client.post(f"{api_v1_prefix}/auth/refresh")

        assert response.status_code == 401
        assert response.json()["success"] is False

    def test_refresh_with_unknown_token(
        self,
        test_client,
        registered_user,
        api_settings,
        api_v1_prefix,
    ):
        jwt_service = JWTService(
            secret_key=api_settings.jwt_secret_key.get_secret_value(),
            refresh_secret_key=api_settings.refresh_secret_key,
        )
        forged = jwt_service.create_refresh_token(UUID(registered_user["user"]["id"]))
        test_client.cookies.clear()
        test_client.cookies.set(REFRESH_TOKEN_COOKIE, forged)

        response = test_client.post(f"{api_v1_prefix}/auth/refresh")

        # Correctly signed but never stored
        assert response.status_code == 401


class TestLogout:
    def test_logout_revokes_refresh_tokens(
        self,
        test_client,
        registered_user,
        api_v1_prefix,
    ):
        token = registered_user["refresh_token"]
        test_client.cookies.clear()
        test_client.cookies.set(REFRESH_TOKEN_COOKIE, token)

        response = test_client.post(f"{api_v1_prefix}/auth/logout")
        assert response.status_code == 200
        assert response.json()["data"]["message"] == "Logged out"

        test_client.cookies.clear()
        test_client.cookies.set(REFRESH_TOKEN_COOKIE, token)
        response = test_client.post(f"{api_v1_prefix}/auth/refresh")
        assert response.status_code == 401

    def test_logout_without_cookie_still_succeeds(self, test_client, api_v1_prefix):
        test_client.cookies.clear()

        response = test_client.post(f"{api_v1_prefix}/auth/logout")

        assert response.status_code == 200
