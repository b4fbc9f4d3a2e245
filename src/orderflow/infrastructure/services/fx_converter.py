"""Currency conversion using fixed rates against a USD pivot."""

from __future__ import annotations

from decimal import Decimal

from orderflow.application.ports import FxConverter
from orderflow.domain.exceptions import UnsupportedCurrencyError
from orderflow.domain.model.value_objects import normalize_currency, round_half_up

# Value of one unit of each currency in USD.
DEFAULT_RATES_TO_USD: dict[str, Decimal] = {
    "USD": Decimal("1.0"),
    "EUR": Decimal("1.10"),
    "UAH": Decimal("0.027"),
}


class FixedRateFxConverter(FxConverter):

    def __init__(self, rates_to_usd: dict[str, Decimal] | None = None) -> None:
        table = DEFAULT_RATES_TO_USD if rates_to_usd is None else rates_to_usd
        self._rates = {normalize_currency(code): Decimal(rate) for code, rate in table.items()}

    def convert(self, amount_cents: int, from_currency: str, to_currency: str) -> int:
        source = normalize_currency(from_currency)
        target = normalize_currency(to_currency)
        for code in (source, target):
            if code not in self._rates:
                raise UnsupportedCurrencyError(
                    f"Unsupported currency for FX conversion: {code}"
                )
        if source == target:
            return amount_cents

        # minor units are cents in every supported currency
        converted = Decimal(amount_cents) * self._rates[source] / self._rates[target]
        return round_half_up(converted)
