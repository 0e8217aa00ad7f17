"""Pytest fixtures for API integration tests."""

import asyncio

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from shopfront.infrastructure.persistence.sqlalchemy.init_db import create_tables
from shopfront.presentation.api.app import API_V1_PREFIX, create_app
from shopfront.presentation.api.config import get_api_settings
from shopfront.presentation.api.dependencies import get_db_session
from shopfront_config.settings import Settings
from tests.shared.fixtures.api import bearer, create_user_directly

ADMIN_EMAIL = "admin@shop.com"
ADMIN_PASSWORD = "admin-password-1"

@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX

@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        # Required security settings
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        postgres_password=SecretStr("test-password"),
        # API settings
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        api_cookie_secure=False,  # Allow HTTP in tests
        bcrypt_rounds=4,
    )

@pytest.fixture
def test_db_engine(tmp_path):
    """Create a file-backed SQLite database for one test.

    NullPool opens a connection per session, so the engine can be used
    from the TestClient's event loop.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        echo=False,
        poolclass=NullPool,
    )
    asyncio.run(create_tables(engine))

    yield engine

    asyncio.run(engine.dispose())

@pytest.fixture
def test_session_maker(test_db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

@pytest.fixture
def test_client(api_settings, test_session_maker) -> TestClient:
    """Create a test client bound to the per-test database."""
    app = create_app(settings=api_settings)

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings

    return TestClient(app)

@pytest.fixture
def registered_user_data() -> dict:
    """Test user registration data."""
    return {
        "email": "a@b.com",
        "password": "password123",
        "name": "Ada",
    }

@pytest.fixture
def registered_user(test_client, registered_user_data, api_v1_prefix) -> dict:
    """Register the default customer and return the auth payload."""
    response = test_client.post(
        f"{api_v1_prefix}/auth/register",
        json=registered_user_data,
    )
    assert response.status_code == 201
    return response.json()["data"]

@pytest.fixture
def auth_headers(registered_user) -> dict:
    """Get auth headers for a registered customer."""
    return bearer(registered_user["access_token"])

@pytest.fixture
def admin_headers(test_client, test_session_maker, api_v1_prefix) -> dict:
    """Create an ADMIN directly in the database and log in as them."""
    create_user_directly(test_session_maker, ADMIN_EMAIL, ADMIN_PASSWORD)
    response = test_client.post(
        f"{api_v1_prefix}/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return bearer(response.json()["data"]["access_token"])

@pytest.fixture
def category(test_client, admin_headers, api_v1_prefix) -> dict:
    response = test_client.post(
        f"{api_v1_prefix}/admin/categories",
        json={"name": "Electronics", "description": "Things with batteries"},
        headers=admin_headers,
    )
    assert response.status_code == 201
    return response.json()["data"]

@pytest.fixture
def create_product(test_client, admin_headers, category, api_v1_prefix):
    """Factory fixture: create a product through the admin API."""

    def _create(name: str = "Widget", price: str = "10.00", stock: int = 5) -> dict:
        response = test_client.post(
            f"{api_v1_prefix}/products",
            json={
                "name": name,
                "price": price,
                "stock": stock,
                "category_id": category["id"],
                "description": f"A {name.lower()}",
            },
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create
