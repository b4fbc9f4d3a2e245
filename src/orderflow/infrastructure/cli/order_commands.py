"""CLI commands for the Order aggregate."""

from __future__ import annotations

import json
from typing import Callable, TypeVar

import click

from orderflow.application.dto import CreateOrderCommand
from orderflow.domain.exceptions import DomainException
from orderflow.infrastructure.bootstrap import create_order_handler, show_order_handler
from orderflow.infrastructure.cli.responses import (
    UNEXPECTED_STATUS,
    created_body,
    error_message,
    order_body,
    status_for,
)
from orderflow.infrastructure.config import Settings
from orderflow.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def _run(action: Callable[[], T]) -> T:
    """Run a use case, turning failures into ``[status] message`` errors."""
    try:
        return action()
    except DomainException as exc:
        raise click.ClickException(f"[{status_for(exc)}] {error_message(exc)}")
    except Exception:
        logger.exception("Unexpected failure")
        raise click.ClickException(f"[{UNEXPECTED_STATUS}] Internal error")


def _echo_json(body: dict) -> None:
    click.echo(json.dumps(body, indent=2))


@click.command("create")
@click.option("--amount-cents", required=True, type=int, help="Amount in minor units.")
@click.option("--currency", required=True, help="Currency code, e.g. EUR.")
@click.option("--promo", "promo_code", default=None, help="Optional promo code.")
@click.pass_obj
def order_create(
    settings: Settings, amount_cents: int, currency: str, promo_code: str | None
) -> None:
    """Create, charge and persist a new order."""
    with create_order_handler(settings) as handler:
        event = _run(
            lambda: handler.handle(CreateOrderCommand(amount_cents, currency, promo_code))
        )

    _echo_json(created_body(event))


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: str) -> None:
    """Show details of an existing order."""
    handler = show_order_handler(settings)

    dto = _run(lambda: handler.handle(order_id))

    _echo_json(order_body(dto))
