"""Unit tests for the Order aggregate and its status lifecycle."""

from decimal import Decimal

import pytest

from shopfront.domain.cart import Cart
from shopfront.domain.ordering import (
    EmptyCartError,
    InvalidOrderStatusError,
    InvalidStatusTransitionError,
    Order,
    OrderStatus,
)
from tests.shared.fixtures.factories import TestCatalogFactory, TestUserFactory


def _cart_with(*lines) -> Cart:
    cart = Cart.create(TestUserFactory.ALICE_ID)
    for product, quantity in lines:
        cart.add_item(product, quantity)
    return cart


class TestPlaceFromCart:
    def test_snapshots_lines_and_total(self):
        widget = TestCatalogFactory.widget(stock=5, price="10.00")
        gadget = TestCatalogFactory.gadget(stock=3, price="2.50")
        cart = _cart_with((widget, 3), (gadget, 1))

        order = Order.place_from_cart(cart)

        assert order.status == OrderStatus.PENDING
        assert order.user_id == TestUserFactory.ALICE_ID
        assert order.total == Decimal("32.50")
        assert {item.product_name for item in order.items} == {"Widget", "Gadget"}
        assert sum(item.line_total for item in order.items) == order.total

    def test_price_is_copied_not_referenced(self):
        widget = TestCatalogFactory.widget(stock=5, price="10.00")
        order = Order.place_from_cart(_cart_with((widget, 1)))

        widget.update(price="99.00", name="Renamed")

        assert order.items[0].price == Decimal("10.00")
        assert order.items[0].product_name == "Widget"
        assert order.total == Decimal("10.00")

    def test_empty_cart_is_rejected(self):
        with pytest.raises(EmptyCartError):
            Order.place_from_cart(Cart.create(TestUserFactory.ALICE_ID))


class TestOrderStatus:
    @pytest.mark.parametrize(
        ("current", "target"),
        [
            (OrderStatus.PENDING, OrderStatus.PAID),
            (OrderStatus.PENDING, OrderStatus.CANCELLED),
            (OrderStatus.PAID, OrderStatus.SHIPPED),
            (OrderStatus.SHIPPED, OrderStatus.DELIVERED),
        ],
    )
    def test_allowed_transitions(self, current, target):
        assert current.can_transition_to(target)

    @pytest.mark.parametrize(
        ("current", "target"),
        [
            (OrderStatus.PENDING, OrderStatus.SHIPPED),
            (OrderStatus.PAID, OrderStatus.CANCELLED),
            (OrderStatus.DELIVERED, OrderStatus.PENDING),
            (OrderStatus.CANCELLED, OrderStatus.PAID),
        ],
    )
    def test_forbidden_transitions(self, current, target):
        assert not current.can_transition_to(target)

    def test_terminal_states(self):
        assert OrderStatus.DELIVERED.is_terminal
        assert OrderStatus.CANCELLED.is_terminal
        assert not OrderStatus.PENDING.is_terminal

    def test_parse_unknown_value(self):
        with pytest.raises(InvalidOrderStatusError) as exc_info:
            OrderStatus.parse("LOST")

        assert "PENDING" in exc_info.value.details["valid_statuses"]

    def test_parse_is_case_sensitive(self):
        with pytest.raises(InvalidOrderStatusError):
            OrderStatus.parse("paid")


class TestChangeStatus:
    def setup_method(self):
        widget = TestCatalogFactory.widget()
        self.order = Order.place_from_cart(_cart_with((widget, 1)))

    def test_walks_the_happy_path(self):
        for status in (OrderStatus.PAID, OrderStatus.SHIPPED, OrderStatus.DELIVERED):
            assert self.order.change_status(status) is True

        assert self.order.status == OrderStatus.DELIVERED

    def test_same_status_is_a_no_op(self):
        assert self.order.change_status(OrderStatus.PENDING) is False

    def test_invalid_transition_raises(self):
        with pytest.raises(InvalidStatusTransitionError):
            self.order.change_status(OrderStatus.DELIVERED)

        assert self.order.status == OrderStatus.PENDING
