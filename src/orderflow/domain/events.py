"""Domain events: immutable facts about what happened."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from orderflow.domain.model.value_objects import OrderId


@dataclass(frozen=True)
class OrderCreated:
    """An order was paid for (or settled free of charge) and persisted.

    ``amount_cents``/``currency`` are what the customer asked for;
    ``charged_amount_cents``/``charged_currency`` are what was actually
    settled after the discount and FX conversion.
    """

    order_id: OrderId
    amount_cents: int
    currency: str
    occurred_at: datetime
    charged_amount_cents: int
    charged_currency: str
    applied_discount_percent: int
    transaction_id: str
