"""HTTP adapter to the payment service.

Without a base URL the gateway simulates a successful capture locally,
which keeps the CLI usable without a running payment service.
"""

from __future__ import annotations

import secrets
import time

import httpx

from orderflow.application.ports import PaymentGateway
from orderflow.domain.exceptions import (
    NonTransientPaymentError,
    TransientPaymentError,
    ValidationError,
)
from orderflow.logging import get_logger

logger = get_logger(__name__)

CHARGE_PATH = "/payments/charge"
# Statuses worth retrying besides 5xx.
RETRYABLE_STATUSES = frozenset({408, 429})


class HttpPaymentGateway(PaymentGateway):
    """Charges through one pooled ``httpx.Client`` shared by every attempt.

    A client built from *base_url* is owned by the gateway and released by
    ``close()``; an injected *client* stays the caller's to close.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 2.0,
        simulated_latency: float = 0.02,
        client: httpx.Client | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._simulated_latency = simulated_latency
        self._owns_client = client is None and bool(base_url)
        if self._owns_client:
            client = httpx.Client(
                base_url=base_url.rstrip("/"), timeout=timeout, transport=transport
            )
        self._client = client

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def charge(self, amount_cents: int, currency: str) -> str:
        if amount_cents <= 0:
            raise ValidationError("charge amount must be > 0")

        if self._client is None:
            return self._simulate()

        payload = {"amountCents": amount_cents, "currency": currency.upper()}
        logger.debug("POST %s %s", CHARGE_PATH, payload)
        try:
            response = self._client.post(CHARGE_PATH, json=payload)
        except httpx.HTTPError as exc:
            raise TransientPaymentError(f"Payment service unreachable: {exc}") from exc

        if response.status_code != 201:
            message = f"Payment service responded with status {response.status_code}"
            if response.status_code >= 500 or response.status_code in RETRYABLE_STATUSES:
                raise TransientPaymentError(message)
            raise NonTransientPaymentError(message)

        return self._transaction_id(response)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _transaction_id(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError as exc:
            raise TransientPaymentError("Invalid response from payment service") from exc
        if not isinstance(data, dict) or not isinstance(data.get("transactionId"), str):
            raise TransientPaymentError("Invalid response from payment service")
        return data["transactionId"]

    def _simulate(self) -> str:
        time.sleep(self._simulated_latency)
        return "tx_" + secrets.token_hex(6)
