"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from orderflow.domain.exceptions import ValidationError


def normalize_currency(code: str) -> str:
    """Return the canonical (trimmed, upper-case) form of a currency code."""
    if not isinstance(code, str) or not code.strip():
        raise ValidationError("Currency cannot be empty")
    return code.strip().upper()


def round_half_up(value: Decimal) -> int:
    """Round to a whole number of minor units, ties away from zero."""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class Money:
    """Monetary amount in integer minor units (e.g. cents).

    Amounts are never floats.  Any arithmetic that can produce a fraction
    of a minor unit goes through ``Decimal`` and ``round_half_up``.
    """

    cents: int
    currency: str

    def __post_init__(self) -> None:
        if not isinstance(self.cents, int) or isinstance(self.cents, bool):
            raise ValidationError(
                f"Money amount must be an integer, got {type(self.cents).__name__}"
            )
        if self.cents < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.cents}"
            )
        object.__setattr__(self, "currency", normalize_currency(self.currency))

    @property
    def is_zero(self) -> bool:
        return self.cents == 0

    # --- Arithmetic helpers ---------------------------------------------------

    def discounted(self, percent: int) -> Money:
        """Apply a percentage discount (0..100), rounding half up."""
        if not 0 <= percent <= 100:
            raise ValidationError(f"Discount must be within 0..100, got {percent}")
        remaining = Decimal(self.cents) * (100 - percent) / 100
        return Money(round_half_up(remaining), self.currency)

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.cents <= other.cents

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.cents // 100}.{self.cents % 100:02d} {self.currency}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot compare {self.currency} with {other.currency}"
            )


@dataclass(frozen=True)
class OrderId:
    """Opaque order identity.

    New ids are random v4 UUIDs rendered as 8-4-4-4-12 hex groups.  Ids
    read back from storage are accepted as any non-empty string.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError("OrderId cannot be empty")

    @staticmethod
    def generate() -> OrderId:
        # uuid4 draws from os.urandom
        return OrderId(str(uuid.uuid4()))

    @staticmethod
    def parse(raw: str) -> OrderId:
        if not isinstance(raw, str):
            raise ValidationError("OrderId cannot be empty")
        return OrderId(raw.strip())

    def __str__(self) -> str:
        return self.value
