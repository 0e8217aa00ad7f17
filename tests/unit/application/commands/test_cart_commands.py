"""Unit tests for the cart commands."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from shopfront.application.commands.cart import (
    AddCartItemCommand,
    UpdateCartItemCommand,
)
from shopfront.domain.cart import Cart, CartItemNotFoundError, InvalidQuantityError
from shopfront.domain.catalog import InsufficientStockError, ProductNotFoundError
from tests.shared.fixtures.factories import TestCatalogFactory, TestUserFactory


class TestAddCartItemCommand:
    def setup_method(self):
        self.cart_repo = AsyncMock()
        self.product_repo = AsyncMock()
        self.command = AddCartItemCommand(
            cart_repository=self.cart_repo,
            product_repository=self.product_repo,
            current_user=TestUserFactory.alice_context(),
        )
        self.widget = TestCatalogFactory.widget(stock=5)
        self.cart = Cart.create(TestUserFactory.ALICE_ID)
        self.cart_repo.get_or_create.return_value = self.cart
        self.product_repo.find_by_id.return_value = self.widget

    @pytest.mark.asyncio
    async def test_adds_to_the_callers_cart(self):
        cart = await self.command.execute(self.widget.id, 2)

        assert cart.get_item(self.widget.id).quantity == 2
        self.cart_repo.get_or_create.assert_awaited_once_with(TestUserFactory.ALICE_ID)
        self.cart_repo.save.assert_awaited_once_with(self.cart)

    @pytest.mark.asyncio
    async def test_unknown_product(self):
        self.product_repo.find_by_id.return_value = None

        with pytest.raises(ProductNotFoundError):
            await self.command.execute(uuid4(), 1)

        self.cart_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_quantity_is_validated_before_lookup(self):
        with pytest.raises(InvalidQuantityError):
            await self.command.execute(self.widget.id, 0)

        self.product_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_over_stock_is_not_saved(self):
        with pytest.raises(InsufficientStockError):
            await self.command.execute(self.widget.id, 6)

        self.cart_repo.save.assert_not_called()


class TestUpdateCartItemCommand:
    def setup_method(self):
        self.cart_repo = AsyncMock()
        self.product_repo = AsyncMock()
        self.command = UpdateCartItemCommand(
            cart_repository=self.cart_repo,
            product_repository=self.product_repo,
            current_user=TestUserFactory.alice_context(),
        )
        self.widget = TestCatalogFactory.widget(stock=5)
        self.cart = Cart.create(TestUserFactory.ALICE_ID)
        self.cart.add_item(self.widget, 2)
        self.cart_repo.get_or_create.return_value = self.cart
        self.product_repo.find_by_id.return_value = self.widget

    @pytest.mark.asyncio
    async def test_sets_quantity(self):
        cart = await self.command.execute(self.widget.id, 4)

        assert cart.get_item(self.widget.id).quantity == 4
        self.cart_repo.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_zero_removes_without_product_lookup(self):
        cart = await self.command.execute(self.widget.id, 0)

        assert cart.is_empty
        self.product_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_line_not_in_cart(self):
        gadget = TestCatalogFactory.gadget()
        self.product_repo.find_by_id.return_value = gadget

        with pytest.raises(CartItemNotFoundError):
            await self.command.execute(gadget.id, 1)
