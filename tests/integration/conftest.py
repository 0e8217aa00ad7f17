"""
Integration test configuration.

Integration tests run against a fresh SQLite file per test (see
tests/shared/fixtures/database.py). Helpers here seed the catalog through
the real repositories.
"""

import pytest_asyncio

from shopfront.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from tests.shared.fixtures.database import (  # noqa: F401
    async_engine,
    db_session,
    session_maker,
)
from tests.shared.fixtures.factories import TestCatalogFactory


@pytest_asyncio.fixture
async def factory(db_session) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(db_session)


@pytest_asyncio.fixture
async def seeded_catalog(factory):
    """Electronics category with a Widget (stock 5, 10.00) and a Gadget."""
    await factory.category_repository().save(TestCatalogFactory.electronics())
    widget = TestCatalogFactory.widget(stock=5, price="10.00")
    gadget = TestCatalogFactory.gadget(stock=3, price="2.50")
    await factory.product_repository().save(widget)
    await factory.product_repository().save(gadget)
    await factory.session.commit()
    return {"widget": widget, "gadget": gadget}
