"""Integration tests for the cart repository."""

import pytest
from sqlalchemy import func, select

from shopfront.infrastructure.persistence.sqlalchemy.models import (
    CartItemModel,
    CartModel,
)
from shopfront.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from tests.shared.fixtures.factories import TestUserFactory

pytestmark = pytest.mark.integration


async def _count(session, model) -> int:
    return (await session.execute(select(func.count()).select_from(model))).scalar_one()


class TestCartGetOrCreate:
    async def test_creates_cart_once(self, factory):
        repo = factory.cart_repository()

        first = await repo.get_or_create(TestUserFactory.ALICE_ID)
        second = await repo.get_or_create(TestUserFactory.ALICE_ID)
        await factory.session.commit()

        assert first.id == second.id
        assert await _count(factory.session, CartModel) == 1

    async def test_is_idempotent_across_sessions(self, factory, session_maker):
        cart = await factory.cart_repository().get_or_create(TestUserFactory.ALICE_ID)
        await factory.session.commit()

        async with session_maker() as other_session:
            other = SQLAlchemyRepositoryFactory(other_session).cart_repository()
            again = await other.get_or_create(TestUserFactory.ALICE_ID)
            await other_session.commit()

        assert again.id == cart.id
        assert await _count(factory.session, CartModel) == 1

    async def test_find_returns_none_without_cart(self, factory):
        repo = factory.cart_repository()

        assert await repo.find_by_user_id(TestUserFactory.BOB_ID) is None


class TestCartSave:
    async def test_round_trips_lines_with_live_products(self, factory, seeded_catalog):
        widget = seeded_catalog["widget"]
        repo = factory.cart_repository()
        cart = await repo.get_or_create(TestUserFactory.ALICE_ID)
        cart.add_item(widget, 2)
        cart.add_item(widget, 1)
        await repo.save(cart)
        await factory.session.commit()

        # Price change after adding shows up in the cart
        widget.update(price="12.00")
        await factory.product_repository().save(widget)
        await factory.session.commit()

        loaded = await repo.find_by_user_id(TestUserFactory.ALICE_ID)

        assert loaded is not None
        assert len(loaded.items) == 1
        assert loaded.items[0].quantity == 3
        assert str(loaded.subtotal) == "36.00"
        assert await _count(factory.session, CartItemModel) == 1

    async def test_removed_lines_are_deleted(self, factory, seeded_catalog):
        repo = factory.cart_repository()
        cart = await repo.get_or_create(TestUserFactory.ALICE_ID)
        cart.add_item(seeded_catalog["widget"], 1)
        cart.add_item(seeded_catalog["gadget"], 1)
        await repo.save(cart)

        cart.set_item_quantity(seeded_catalog["widget"].id, 0)
        await repo.save(cart)
        await factory.session.commit()

        loaded = await repo.find_by_user_id(TestUserFactory.ALICE_ID)
        assert [item.product_id for item in loaded.items] == [
            seeded_catalog["gadget"].id,
        ]
