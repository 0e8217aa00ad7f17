"""Integration tests for the catalog repositories."""

from decimal import Decimal

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from shopfront.domain.catalog import Category, Product, ProductInUseError
from shopfront.domain.wishlist import WishlistItem
from shopfront.infrastructure.persistence.sqlalchemy.models import (
    CartItemModel,
    ProductImageModel,
    WishlistItemModel,
)
from tests.shared.fixtures.factories import TestCatalogFactory, TestUserFactory

pytestmark = pytest.mark.integration


class TestProductRepository:
    async def test_save_and_find(self, factory, seeded_catalog):
        repo = factory.product_repository()

        widget = await repo.find_by_id(TestCatalogFactory.WIDGET_ID)

        assert widget is not None
        assert widget.price == Decimal("10.00")
        assert widget.stock == 5
        assert widget.category_id == TestCatalogFactory.ELECTRONICS_ID

    async def test_images_are_replaced(self, factory, seeded_catalog):
        repo = factory.product_repository()
        widget = await repo.find_by_id(TestCatalogFactory.WIDGET_ID)

        widget.update(images=["front.png", "back.png"])
        await repo.save(widget)
        widget.update(images=["side.png"])
        await repo.save(widget)
        await factory.session.commit()

        reloaded = await repo.find_by_id(TestCatalogFactory.WIDGET_ID)
        assert reloaded.images == ["side.png"]
        count = await factory.session.execute(
            select(func.count()).select_from(ProductImageModel),
        )
        assert count.scalar_one() == 1

    async def test_list_filters_and_counts(self, factory, seeded_catalog):
        await factory.category_repository().save(TestCatalogFactory.books())
        await factory.product_repository().save(
            Product(
                name="Novel",
                price="7.00",
                category_id=TestCatalogFactory.BOOKS_ID,
            ),
        )
        await factory.session.commit()
        repo = factory.product_repository()

        products, total = await repo.list_products(take=1)
        books, books_total = await repo.list_products(
            category_id=TestCatalogFactory.BOOKS_ID,
        )

        assert total == 3
        assert len(products) == 1
        assert books_total == 1
        assert books[0].name == "Novel"

    async def test_decrement_stock_is_guarded(self, factory, seeded_catalog):
        repo = factory.product_repository()

        assert await repo.decrement_stock(TestCatalogFactory.WIDGET_ID, 3) is True
        assert await repo.decrement_stock(TestCatalogFactory.WIDGET_ID, 3) is False
        await factory.session.commit()

        widget = await repo.find_by_id(TestCatalogFactory.WIDGET_ID)
        assert widget.stock == 2

    async def test_delete_removes_cart_and_wishlist_references(
        self,
        factory,
        seeded_catalog,
    ):
        widget = seeded_catalog["widget"]
        cart_repo = factory.cart_repository()
        cart = await cart_repo.get_or_create(TestUserFactory.ALICE_ID)
        cart.add_item(widget, 1)
        await cart_repo.save(cart)
        await factory.wishlist_repository().add(
            WishlistItem(user_id=TestUserFactory.ALICE_ID, product=widget),
        )
        await factory.session.commit()

        await factory.product_repository().delete(widget.id)
        await factory.session.commit()

        assert await factory.product_repository().find_by_id(widget.id) is None
        for model in (CartItemModel, WishlistItemModel):
            count = await factory.session.execute(
                select(func.count()).select_from(model),
            )
            assert count.scalar_one() == 0

    async def test_delete_blocked_by_late_order_reference(
        self,
        factory,
        seeded_catalog,
        monkeypatch,
    ):
        # An order item written after the reference check fails the flush
        async def flush_with_order_reference(*args, **kwargs):
            raise IntegrityError(
                "DELETE FROM products",
                {},
                Exception("FOREIGN KEY constraint failed"),
            )

        monkeypatch.setattr(factory.session, "flush", flush_with_order_reference)

        with pytest.raises(ProductInUseError):
            await factory.product_repository().delete(TestCatalogFactory.WIDGET_ID)


class TestCategoryRepository:
    async def test_conflict_lookup_is_case_insensitive(self, factory, seeded_catalog):
        repo = factory.category_repository()

        conflict = await repo.find_conflicting("ELECTRONICS", "electronics")
        self_excluded = await repo.find_conflicting(
            "Electronics",
            "electronics",
            exclude_id=TestCatalogFactory.ELECTRONICS_ID,
        )

        assert conflict is not None
        assert self_excluded is None

    async def test_list_with_product_counts(self, factory, seeded_catalog):
        repo = factory.category_repository()
        await repo.save(Category(name="Empty Shelf"))
        await factory.session.commit()

        counts = {c.slug: n for c, n in await repo.list_with_product_counts()}

        assert counts == {"electronics": 2, "empty-shelf": 0}
