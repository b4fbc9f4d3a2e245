"""Order aggregate.

An Order is the record of a customer's request to pay a given amount in
a given currency.  It is immutable: a change of status produces a new
Order with the same identity and creation time.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum

from orderflow.domain.exceptions import ValidationError
from orderflow.domain.model.value_objects import Money, OrderId, normalize_currency


class OrderStatus(Enum):
    CREATED = "created"


@dataclass(frozen=True)
class Order:
    """Aggregate root for orders.

    Use the ``Order.create()`` factory for new orders; it assigns a fresh
    id and the current time.  The repository reconstitutes persisted
    orders through the plain constructor, which still enforces the
    amount and currency invariants.
    """

    id: OrderId
    amount_cents: int
    currency: str
    status: OrderStatus = OrderStatus.CREATED
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if (
            not isinstance(self.amount_cents, int)
            or isinstance(self.amount_cents, bool)
            or self.amount_cents <= 0
        ):
            raise ValidationError("Amount must be positive in cents")
        object.__setattr__(self, "currency", normalize_currency(self.currency))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(amount_cents: int, currency: str) -> Order:
        return Order(
            id=OrderId.generate(),
            amount_cents=amount_cents,
            currency=currency,
        )

    # --- State transitions ----------------------------------------------------

    def with_status(self, status: OrderStatus) -> Order:
        """Return a copy of this order in *status*; identity is preserved."""
        return replace(self, status=status)

    # --- Computed properties --------------------------------------------------

    @property
    def amount(self) -> Money:
        return Money(self.amount_cents, self.currency)
