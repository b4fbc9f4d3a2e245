"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from orderflow.application.create_order import CreateOrderHandler
from orderflow.application.show_order import ShowOrderHandler
from orderflow.infrastructure.config import Settings
from orderflow.infrastructure.http.payment_gateway import HttpPaymentGateway
from orderflow.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from orderflow.infrastructure.services.fx_converter import FixedRateFxConverter
from orderflow.infrastructure.services.promo_service import StaticPromoService
from orderflow.infrastructure.services.risk_checker import ThresholdRiskChecker


def order_repository(settings: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(settings.orders_file)


def payment_gateway(settings: Settings) -> HttpPaymentGateway:
    return HttpPaymentGateway(
        base_url=settings.payment_base_url,
        timeout=settings.payment_timeout,
    )


@contextmanager
def create_order_handler(settings: Settings) -> Iterator[CreateOrderHandler]:
    """Yield a wired handler; its payment client is closed on exit."""
    gateway = payment_gateway(settings)
    try:
        yield CreateOrderHandler(
            order_repo=order_repository(settings),
            payment_gateway=gateway,
            fx_converter=FixedRateFxConverter(),
            promo_service=StaticPromoService(),
            risk_checker=ThresholdRiskChecker(),
        )
    finally:
        gateway.close()


def show_order_handler(settings: Settings) -> ShowOrderHandler:
    return ShowOrderHandler(order_repo=order_repository(settings))
