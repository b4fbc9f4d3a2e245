"""Risk screening by per-currency charge limits."""

from __future__ import annotations

from orderflow.application.ports import RiskChecker
from orderflow.domain.model.order import Order
from orderflow.domain.model.value_objects import Money, normalize_currency

# Largest charge (in minor units) accepted per settlement currency.
DEFAULT_LIMITS: dict[str, int] = {
    "USD": 100_000,    # $1,000.00
    "UAH": 1_500_000,  # 15,000.00 UAH
}


class ThresholdRiskChecker(RiskChecker):
    """Allows charges at or below the limit for their currency.

    Currencies without a configured limit are always allowed.
    """

    def __init__(self, limits: dict[str, int] | None = None) -> None:
        table = DEFAULT_LIMITS if limits is None else limits
        self._limits = {
            normalize_currency(code): Money(cents, code) for code, cents in table.items()
        }

    def is_allowed(
        self, order: Order, charged_amount_cents: int, charged_currency: str
    ) -> bool:
        charge = Money(charged_amount_cents, charged_currency)
        limit = self._limits.get(charge.currency)
        if limit is None:
            return True
        return charge <= limit
