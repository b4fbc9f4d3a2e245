"""Application service: Create Order use case.

Orchestrates one order through discount, currency conversion, risk
screening, payment capture and persistence.  Every step depends on the
result of the previous one, so they run strictly in sequence.  Nothing
irreversible (payment, persistence) happens before the validation and
screening steps have passed.
"""

from __future__ import annotations

import secrets
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from orderflow.application.dto import CreateOrderCommand
from orderflow.application.ports import FxConverter, PaymentGateway, PromoService, RiskChecker
from orderflow.domain.events import OrderCreated
from orderflow.domain.exceptions import (
    OrderRejectedError,
    TransientPaymentError,
    UnsupportedCurrencyError,
)
from orderflow.domain.model.order import Order
from orderflow.domain.model.value_objects import Money, normalize_currency
from orderflow.domain.repository.order_repository import OrderRepository
from orderflow.logging import get_logger

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
SUPPORTED_CURRENCIES = frozenset({"USD", "EUR", "UAH"})
SETTLEMENT_CURRENCY = "USD"
FREE_TRANSACTION_PREFIX = "free_"


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded retry with exponential backoff for transient payment failures."""

    max_attempts: int = 3
    base_delay: float = 0.05  # seconds

    def delay_for(self, attempt: int) -> float:
        """Delay to wait after failed *attempt* (1-based)."""
        return self.base_delay * 2 ** (attempt - 1)


class CreateOrderHandler:
    """Creates, charges and persists a single order.

    The handler keeps no per-request state, so one instance can serve
    many threads concurrently.  ``sleep`` is injectable so tests can
    observe the backoff schedule without waiting.
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        payment_gateway: PaymentGateway,
        fx_converter: FxConverter,
        promo_service: PromoService,
        risk_checker: RiskChecker,
        *,
        supported_currencies: frozenset[str] = SUPPORTED_CURRENCIES,
        settlement_currency: str = SETTLEMENT_CURRENCY,
        retry_policy: RetryPolicy = RetryPolicy(),
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._order_repo = order_repo
        self._payment_gateway = payment_gateway
        self._fx_converter = fx_converter
        self._promo_service = promo_service
        self._risk_checker = risk_checker
        self._supported_currencies = frozenset(normalize_currency(c) for c in supported_currencies)
        self._settlement_currency = normalize_currency(settlement_currency)
        self._retry_policy = retry_policy
        self._sleep = sleep

    def handle(self, command: CreateOrderCommand) -> OrderCreated:
        """Create a new order.

        Steps:
        1. Reject unsupported currencies before touching any collaborator.
        2. Build the Order (fresh id, current time).
        3. Apply the promo discount, clamped to 0..100%.
        4. Convert the discounted amount into the settlement currency.
        5. Screen the converted charge against the risk policy.
        6. Capture payment with retries (skipped for free orders).
        7. Persist and return the OrderCreated event.
        """
        currency = normalize_currency(command.currency)
        if currency not in self._supported_currencies:
            raise UnsupportedCurrencyError(f"Unsupported currency: {currency}")

        order = Order.create(amount_cents=command.amount_cents, currency=currency)
        logger.info("Processing order %s: %s", order.id, order.amount)

        percent = self._discount_percent(command.promo_code, currency)
        discounted = order.amount.discounted(percent)
        logger.debug("Order %s discount %d%% -> %s", order.id, percent, discounted)

        charged = Money(
            self._fx_converter.convert(
                discounted.cents, discounted.currency, self._settlement_currency
            ),
            self._settlement_currency,
        )
        logger.debug("Order %s converted to %s", order.id, charged)

        if not self._risk_checker.is_allowed(order, charged.cents, charged.currency):
            logger.warning("Order %s rejected by risk policy (%s)", order.id, charged)
            raise OrderRejectedError("Order rejected by risk engine")

        transaction_id = self._capture_payment(order, charged)

        self._order_repo.save(order)
        logger.info("Order %s created (transaction %s)", order.id, transaction_id)

        return OrderCreated(
            order_id=order.id,
            amount_cents=order.amount_cents,
            currency=order.currency,
            occurred_at=datetime.now(timezone.utc),
            charged_amount_cents=charged.cents,
            charged_currency=charged.currency,
            applied_discount_percent=percent,
            transaction_id=transaction_id,
        )

    # --- Steps ----------------------------------------------------------------

    def _discount_percent(self, promo_code: str | None, currency: str) -> int:
        raw = self._promo_service.discount_percent(promo_code, currency)
        return max(0, min(100, int(raw)))

    def _capture_payment(self, order: Order, charged: Money) -> str:
        """Charge the gateway, retrying transient failures.

        A zero charge never reaches the gateway; it gets a locally
        generated ``free_`` transaction id instead.
        """
        if charged.is_zero:
            return FREE_TRANSACTION_PREFIX + secrets.token_hex(4)

        policy = self._retry_policy
        attempt = 0
        while True:
            attempt += 1
            try:
                return self._payment_gateway.charge(charged.cents, charged.currency)
            except TransientPaymentError as exc:
                if attempt >= policy.max_attempts:
                    logger.error(
                        "Order %s: payment failed after %d attempts: %s",
                        order.id, attempt, exc,
                    )
                    raise
                delay = policy.delay_for(attempt)
                logger.warning(
                    "Order %s: transient payment failure on attempt %d/%d (%s), "
                    "retrying in %.3fs",
                    order.id, attempt, policy.max_attempts, exc, delay,
                )
                self._sleep(delay)
