"""Integration tests for the wishlist endpoints."""

from uuid import uuid4

import pytest

pytestmark = pytest.mark.integration


class TestWishlist:
    def test_add_and_list(
        self,
        test_client,
        auth_headers,
        create_product,
        api_v1_prefix,
    ):
        product = create_product()

        response = test_client.post(
            f"{api_v1_prefix}/wishlist",
            json={"product_id": product["id"]},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json()["data"]["product"]["name"] == "Widget"

        listed = test_client.get(f"{api_v1_prefix}/wishlist", headers=auth_headers)
        assert [i["product_id"] for i in listed.json()["data"]] == [product["id"]]

    def test_duplicate_is_a_conflict(
        self,
        test_client,
        auth_headers,
        create_product,
        api_v1_prefix,
    ):
        product = create_product()
        url = f"{api_v1_prefix}/wishlist"
        test_client.post(url, json={"product_id": product["id"]}, headers=auth_headers)

        response = test_client.post(
            url,
            json={"product_id": product["id"]},
            headers=auth_headers,
        )

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_WISHLIST_ITEM"

    def test_unknown_product(self, test_client, auth_headers, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/wishlist",
            json={"product_id": str(uuid4())},
            headers=auth_headers,
        )

        assert response.status_code == 404

    def test_remove(self, test_client, auth_headers, create_product, api_v1_prefix):
        product = create_product()
        test_client.post(
            f"{api_v1_prefix}/wishlist",
            json={"product_id": product["id"]},
            headers=auth_headers,
        )

        response = test_client.delete(
            f"{api_v1_prefix}/wishlist",
            params={"product_id": product["id"]},
            headers=auth_headers,
        )

        assert response.status_code == 200
        listed = test_client.get(f"{api_v1_prefix}/wishlist", headers=auth_headers)
        assert listed.json()["data"] == []

    def test_remove_missing_item_succeeds(
        self,
        test_client,
        auth_headers,
        api_v1_prefix,
    ):
        response = test_client.delete(
            f"{api_v1_prefix}/wishlist",
            params={"product_id": str(uuid4())},
            headers=auth_headers,
        )

        assert response.status_code == 200
