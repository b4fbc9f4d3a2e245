"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderflow.domain.exceptions import ValidationError


@dataclass(frozen=True)
class CreateOrderCommand:
    """Input: a request to create and pay for an order.

    Validated on construction so a handler never sees a malformed command.
    The currency is accepted in any case; the handler normalizes it.
    """

    amount_cents: int
    currency: str
    promo_code: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.amount_cents, int) or isinstance(self.amount_cents, bool):
            raise ValidationError("amount_cents must be an integer")
        if self.amount_cents <= 0:
            raise ValidationError("amount_cents must be > 0")
        if not isinstance(self.currency, str) or not self.currency.strip():
            raise ValidationError("currency cannot be empty")
        if self.promo_code is not None and not isinstance(self.promo_code, str):
            raise ValidationError("promo_code must be a string if provided")


@dataclass(frozen=True)
class OrderDTO:
    """Output: a stored order as displayed to the user."""

    id: str
    amount_cents: int
    currency: str
    status: str
    created_at: str  # ISO-8601
