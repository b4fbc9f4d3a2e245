"""Promo code lookup backed by a fixed table."""

from __future__ import annotations

from orderflow.application.ports import PromoService

DEFAULT_PROMO_CODES: dict[str, int] = {
    "PROMO10": 10,
    "PROMO25": 25,
    "FREE100": 100,
}


class StaticPromoService(PromoService):
    """Codes are matched case-insensitively; unknown or missing codes give 0%.

    The same discount applies in every currency.
    """

    def __init__(self, codes: dict[str, int] | None = None) -> None:
        table = DEFAULT_PROMO_CODES if codes is None else codes
        self._codes = {code.strip().upper(): percent for code, percent in table.items()}

    def discount_percent(self, promo_code: str | None, currency: str) -> int:
        if not promo_code:
            return 0
        return self._codes.get(promo_code.strip().upper(), 0)
