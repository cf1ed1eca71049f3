import uuid

from app.services.validation import is_well_formed_id, validate_new_user, validate_order_items


class TestValidateOrderItems:
    def test_valid_items(self):
        result = validate_order_items([{"product_id": uuid.uuid4(), "quantity": 2}])

        assert result.ok
        assert result.errors == []

    def test_collects_every_error(self):
        result = validate_order_items(
            [
                {"product_id": "bad", "quantity": 1},
                {"product_id": str(uuid.uuid4()), "quantity": 0},
                {"product_id": uuid.uuid4(), "quantity": "2"},
            ]
        )

        assert not result.ok
        assert result.errors == [
            "items[0].product_id is not a valid identifier",
            "items[1].quantity must be greater than zero",
            "items[2].quantity must be an integer",
        ]

    def test_boolean_quantity_is_rejected(self):
        result = validate_order_items([{"product_id": uuid.uuid4(), "quantity": True}])

        assert result.errors == ["items[0].quantity must be an integer"]

    def test_empty_list(self):
        assert validate_order_items([]).errors == ["items must contain at least one element"]


def test_is_well_formed_id():
    assert is_well_formed_id(uuid.uuid4())
    assert is_well_formed_id(str(uuid.uuid4()))
    assert not is_well_formed_id("123")
    assert not is_well_formed_id(123)


class TestValidateNewUser:
    def test_valid(self):
        assert validate_new_user("Ana", "ana@example.com", "secret1").ok

    def test_short_password_and_blank_name(self):
        result = validate_new_user("  ", "ana@example.com", "123")

        assert result.errors == ["name is required", "password must be at least 6 characters"]
