"""Capabilities the application layer consumes but does not implement.

Each port is a small abstract interface; concrete adapters live in
``orderflow.infrastructure`` and are wired in by the composition root.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderflow.domain.model.order import Order


class PromoService(ABC):

    @abstractmethod
    def discount_percent(self, promo_code: str | None, currency: str) -> int:
        """Return the discount for *promo_code* as a percentage in 0..100."""


class FxConverter(ABC):

    @abstractmethod
    def convert(self, amount_cents: int, from_currency: str, to_currency: str) -> int:
        """Convert minor units between currencies.

        Raises UnsupportedCurrencyError if either code is unknown.
        Identical codes return *amount_cents* unchanged.
        """


class RiskChecker(ABC):

    @abstractmethod
    def is_allowed(
        self, order: Order, charged_amount_cents: int, charged_currency: str
    ) -> bool:
        """Decide whether the charge may go ahead.  Must not have side effects."""


class PaymentGateway(ABC):

    @abstractmethod
    def charge(self, amount_cents: int, currency: str) -> str:
        """Capture a payment and return the gateway's transaction ID.

        Raises TransientPaymentError when a retry may succeed, and
        NonTransientPaymentError (or any other exception) otherwise.
        """
