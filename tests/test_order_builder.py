"""Tests for the in-memory order aggregate builder."""

import uuid
from types import SimpleNamespace

import pytest

from app.core.exceptions import InsufficientStock, InvalidOrderRequest, ProductNotFound
from app.models.order import OrderStatus
from app.schemas.order import OrderItemCreate
from app.services.order_builder import build_order


def _user():
    return SimpleNamespace(id=uuid.uuid4())


def _product(price=1000, available_quantity=5):
    return SimpleNamespace(id=uuid.uuid4(), price=price, available_quantity=available_quantity)


def _item(product, quantity):
    return OrderItemCreate(product_id=product.id, quantity=quantity)


class TestBuildOrder:
    def test_single_item_example(self):
        user, product = _user(), _product(price=1000, available_quantity=5)

        draft = build_order(user, [_item(product, 3)], [product])

        assert draft.user_id == user.id
        assert draft.status == OrderStatus.IN_PROGRESS
        assert len(draft.items) == 1
        assert draft.items[0].quantity == 3
        assert draft.items[0].sale_price == 1000
        assert draft.total_value == 3000
        assert draft.stock_changes[product.id].quantity == 3
        assert draft.stock_changes[product.id].remaining == 2

    def test_total_is_sum_of_quantity_times_sale_price(self):
        p1, p2 = _product(price=250, available_quantity=10), _product(price=1999, available_quantity=3)

        draft = build_order(_user(), [_item(p1, 4), _item(p2, 3)], [p2, p1])

        assert draft.total_value == 4 * 250 + 3 * 1999
        assert draft.total_value == sum(i.quantity * i.sale_price for i in draft.items)

    def test_items_keep_request_order(self):
        p1, p2 = _product(), _product()

        draft = build_order(_user(), [_item(p2, 1), _item(p1, 2)], [p1, p2])

        assert [i.product_id for i in draft.items] == [p2.id, p1.id]

    def test_sale_price_is_snapshot_of_product_price(self):
        product = _product(price=700)

        draft = build_order(_user(), [_item(product, 1)], [product])
        product.price = 9999

        assert draft.items[0].sale_price == 700

    def test_resolved_products_are_not_mutated(self):
        product = _product(available_quantity=5)

        build_order(_user(), [_item(product, 3)], [product])

        assert product.available_quantity == 5

    def test_quantity_equal_to_stock_is_accepted(self):
        product = _product(available_quantity=2)

        draft = build_order(_user(), [_item(product, 2)], [product])

        assert draft.stock_changes[product.id].remaining == 0

    def test_accepts_plain_dicts_with_string_ids(self):
        product = _product()

        draft = build_order(
            _user(), [{"product_id": str(product.id), "quantity": 1}], [product]
        )

        assert draft.items[0].product_id == product.id


class TestBuildOrderFailures:
    def test_insufficient_stock(self):
        product = _product(available_quantity=2)

        with pytest.raises(InsufficientStock) as exc_info:
            build_order(_user(), [_item(product, 3)], [product])

        assert exc_info.value.product_id == product.id
        assert exc_info.value.requested == 3
        assert exc_info.value.available == 2

    def test_missing_product(self):
        product = _product()
        missing_id = uuid.uuid4()

        with pytest.raises(ProductNotFound) as exc_info:
            build_order(
                _user(),
                [_item(product, 1), OrderItemCreate(product_id=missing_id, quantity=1)],
                [product],
            )

        assert exc_info.value.product_id == missing_id

    def test_first_failing_item_is_reported(self):
        short = _product(available_quantity=1)
        missing_id = uuid.uuid4()

        with pytest.raises(ProductNotFound):
            build_order(
                _user(),
                [OrderItemCreate(product_id=missing_id, quantity=1), _item(short, 5)],
                [short],
            )

    def test_repeated_product_is_checked_against_remaining_stock(self):
        product = _product(available_quantity=5)

        with pytest.raises(InsufficientStock) as exc_info:
            build_order(_user(), [_item(product, 3), _item(product, 3)], [product])

        assert exc_info.value.available == 2

    def test_repeated_product_accumulates_stock_change(self):
        product = _product(available_quantity=5)

        draft = build_order(_user(), [_item(product, 2), _item(product, 3)], [product])

        assert len(draft.items) == 2
        assert draft.stock_changes[product.id].quantity == 5
        assert draft.stock_changes[product.id].remaining == 0

    def test_empty_item_list(self):
        with pytest.raises(InvalidOrderRequest):
            build_order(_user(), [], [])

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity(self, quantity):
        product = _product()

        with pytest.raises(InvalidOrderRequest) as exc_info:
            build_order(_user(), [{"product_id": product.id, "quantity": quantity}], [product])

        assert "items[0].quantity must be greater than zero" in exc_info.value.errors

    def test_malformed_product_id(self):
        with pytest.raises(InvalidOrderRequest) as exc_info:
            build_order(_user(), [{"product_id": "not-a-uuid", "quantity": 1}], [])

        assert "items[0].product_id is not a valid identifier" in exc_info.value.errors
