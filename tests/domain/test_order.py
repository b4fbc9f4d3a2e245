"""Unit tests for the Order aggregate and its invariants."""

import dataclasses
from datetime import datetime, timezone

import pytest

from orderflow.domain.exceptions import ValidationError
from orderflow.domain.model.order import Order, OrderStatus
from orderflow.domain.model.value_objects import Money, OrderId


class TestOrderCreation:

    def test_happy_path(self):
        order = Order.create(amount_cents=1999, currency="usd")
        assert order.amount_cents == 1999
        assert order.currency == "USD"
        assert order.status == OrderStatus.CREATED
        assert order.created_at.tzinfo is not None

    def test_each_order_gets_a_fresh_id(self):
        assert Order.create(100, "USD").id != Order.create(100, "USD").id

    def test_amount_property(self):
        assert Order.create(250, "EUR").amount == Money(250, "EUR")

    @pytest.mark.parametrize("amount", [0, -5])
    def test_non_positive_amount_rejected(self, amount):
        with pytest.raises(ValidationError, match="must be positive"):
            Order.create(amount, "USD")

    def test_empty_currency_rejected(self):
        with pytest.raises(ValidationError, match="Currency cannot be empty"):
            Order.create(100, "")


class TestOrderReconstitution:

    def test_keeps_given_identity_and_time(self):
        created_at = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        order = Order(
            id=OrderId("existing"),
            amount_cents=500,
            currency="uah",
            status=OrderStatus.CREATED,
            created_at=created_at,
        )
        assert order.id == OrderId("existing")
        assert order.created_at == created_at
        assert order.currency == "UAH"

    def test_invariants_still_enforced(self):
        with pytest.raises(ValidationError):
            Order(id=OrderId("x"), amount_cents=0, currency="USD")


class TestOrderImmutability:

    def test_fields_cannot_be_reassigned(self):
        order = Order.create(100, "USD")
        with pytest.raises(dataclasses.FrozenInstanceError):
            order.amount_cents = 200

    def test_with_status_returns_new_order_with_same_identity(self):
        order = Order.create(100, "USD")
        copy = order.with_status(OrderStatus.CREATED)
        assert copy is not order
        assert copy == order
        assert copy.id == order.id
        assert copy.created_at == order.created_at
