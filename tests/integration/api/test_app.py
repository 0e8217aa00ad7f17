"""Tests for application-wide behavior: health, headers, error envelope."""

import pytest

pytestmark = pytest.mark.integration


def test_health_is_unversioned(test_client):
    response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": "1.0.0"}


def test_security_headers_are_set(test_client, api_v1_prefix):
    response = test_client.get(f"{api_v1_prefix}/products")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"


def test_security_headers_on_errors(test_client, api_v1_prefix):
    response = test_client.get(f"{api_v1_prefix}/cart")

    assert response.status_code == 401
    assert response.headers["X-Frame-Options"] == "DENY"


def test_unknown_route_uses_error_envelope(test_client, api_v1_prefix):
    response = test_client.get(f"{api_v1_prefix}/does-not-exist")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert "error" in body


def test_malformed_json_is_a_bad_request(test_client, api_v1_prefix):
    response = test_client.post(
        f"{api_v1_prefix}/auth/login",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_cors_allows_configured_origin(test_client, api_v1_prefix):
    response = test_client.options(
        f"{api_v1_prefix}/products",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
