"""Integration tests for placing, reading and administering orders."""

from uuid import uuid4

import pytest

from tests.shared.fixtures.api import bearer, register_customer

pytestmark = pytest.mark.integration


@pytest.fixture
def placed_order(test_client, auth_headers, create_product, api_v1_prefix) -> dict:
    """A PENDING order for two widgets at 10.00."""
    product = create_product(price="10.00", stock=5)
    response = test_client.post(
        f"{api_v1_prefix}/cart/items",
        json={"product_id": product["id"], "quantity": 2},
        headers=auth_headers,
    )
    assert response.status_code == 201

    response = test_client.post(f"{api_v1_prefix}/orders", headers=auth_headers)
    assert response.status_code == 201
    return response.json()["data"]


class TestPlaceOrder:
    def test_empty_cart_is_rejected(self, test_client, auth_headers, api_v1_prefix):
        response = test_client.post(f"{api_v1_prefix}/orders", headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Cart is empty",
            "code": "EMPTY_CART",
        }

    def test_order_snapshots_cart(self, placed_order):
        assert placed_order["status"] == "PENDING"
        assert placed_order["total"] == "20.00"
        assert len(placed_order["items"]) == 1
        item = placed_order["items"][0]
        assert item["product_name"] == "Widget"
        assert item["quantity"] == 2
        assert item["price"] == "10.00"

    def test_order_fails_when_stock_dropped_after_adding(
        self,
        test_client,
        auth_headers,
        admin_headers,
        create_product,
        api_v1_prefix,
    ):
        product = create_product(stock=5)
        test_client.post(
            f"{api_v1_prefix}/cart/items",
            json={"product_id": product["id"], "quantity": 3},
            headers=auth_headers,
        )
        test_client.put(
            f"{api_v1_prefix}/products/{product['id']}",
            json={"stock": 1},
            headers=admin_headers,
        )

        response = test_client.post(f"{api_v1_prefix}/orders", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["code"] == "INSUFFICIENT_STOCK"

        # Nothing was written: stock unchanged, cart kept, no order
        product_now = test_client.get(f"{api_v1_prefix}/products/{product['id']}")
        assert product_now.json()["data"]["stock"] == 1
        cart = test_client.get(f"{api_v1_prefix}/cart", headers=auth_headers)
        assert cart.json()["data"]["items"][0]["quantity"] == 3
        orders = test_client.get(f"{api_v1_prefix}/orders", headers=auth_headers)
        assert orders.json()["data"] == []


class TestReadOrders:
    def test_list_own_orders(
        self,
        test_client,
        auth_headers,
        placed_order,
        api_v1_prefix,
    ):
        response = test_client.get(f"{api_v1_prefix}/orders", headers=auth_headers)

        assert response.status_code == 200
        assert [o["id"] for o in response.json()["data"]] == [placed_order["id"]]

    def test_get_own_order(
        self,
        test_client,
        auth_headers,
        placed_order,
        api_v1_prefix,
    ):
        response = test_client.get(
            f"{api_v1_prefix}/orders/{placed_order['id']}",
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["data"]["total"] == "20.00"

    def test_other_customer_cannot_read_order(
        self,
        test_client,
        placed_order,
        api_v1_prefix,
    ):
        other = register_customer(test_client, api_v1_prefix, "eve@shop.com")

        response = test_client.get(
            f"{api_v1_prefix}/orders/{placed_order['id']}",
            headers=bearer(other["access_token"]),
        )

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"

        # Their own list does not include it either
        listed = test_client.get(
            f"{api_v1_prefix}/orders",
            headers=bearer(other["access_token"]),
        )
        assert listed.json()["data"] == []

    def test_unknown_order(self, test_client, auth_headers, api_v1_prefix):
        response = test_client.get(
            f"{api_v1_prefix}/orders/{uuid4()}",
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.json()["code"] == "ORDER_NOT_FOUND"

    def test_admin_can_read_any_order(
        self,
        test_client,
        admin_headers,
        placed_order,
        api_v1_prefix,
    ):
        response = test_client.get(
            f"{api_v1_prefix}/orders/{placed_order['id']}",
            headers=admin_headers,
        )

        assert response.status_code == 200


class TestUpdateOrderStatus:
    def _put_status(self, client, prefix, order_id, status, headers):
        return client.put(
            f"{prefix}/orders/{order_id}",
            json={"status": status},
            headers=headers,
        )

    def test_admin_moves_order_through_lifecycle(
        self,
        test_client,
        admin_headers,
        placed_order,
        api_v1_prefix,
    ):
        for status in ("PAID", "SHIPPED", "DELIVERED"):
            response = self._put_status(
                test_client,
                api_v1_prefix,
                placed_order["id"],
                status,
                admin_headers,
            )
            assert response.status_code == 200, response.text
            assert response.json()["data"]["status"] == status

    def test_same_status_is_a_no_op(
        self,
        test_client,
        admin_headers,
        placed_order,
        api_v1_prefix,
    ):
        response = self._put_status(
            test_client,
            api_v1_prefix,
            placed_order["id"],
            "PENDING",
            admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "PENDING"

    def test_unknown_status_is_rejected(
        self,
        test_client,
        admin_headers,
        placed_order,
        api_v1_prefix,
    ):
        response = self._put_status(
            test_client,
            api_v1_prefix,
            placed_order["id"],
            "LOST",
            admin_headers,
        )

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "INVALID_ORDER_STATUS"
        assert "PENDING" in body["error"]

    def test_disallowed_transition_is_a_conflict(
        self,
        test_client,
        admin_headers,
        placed_order,
        api_v1_prefix,
    ):
        response = self._put_status(
            test_client,
            api_v1_prefix,
            placed_order["id"],
            "DELIVERED",
            admin_headers,
        )

        assert response.status_code == 409
        assert response.json()["code"] == "INVALID_STATUS_TRANSITION"

    def test_unknown_order(self, test_client, admin_headers, api_v1_prefix):
        response = self._put_status(
            test_client,
            api_v1_prefix,
            uuid4(),
            "PAID",
            admin_headers,
        )

        assert response.status_code == 404

    def test_customer_cannot_update_status(
        self,
        test_client,
        auth_headers,
        placed_order,
        api_v1_prefix,
    ):
        response = self._put_status(
            test_client,
            api_v1_prefix,
            placed_order["id"],
            "PAID",
            auth_headers,
        )

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"
