from __future__ import annotations

from pathlib import Path

import click

from orderflow.infrastructure.cli.order_commands import order_create, order_show
from orderflow.infrastructure.config import DEFAULT_DATA_DIR, Settings
from orderflow.logging import set_verbose


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar="ORDERFLOW_DATA_DIR",
    show_default=True,
    help="Directory holding orders.json.",
)
@click.option(
    "--payment-url",
    default=None,
    envvar="ORDERFLOW_PAYMENT_URL",
    help="Payment service base URL. Payments are simulated when unset.",
)
@click.option(
    "--payment-timeout",
    type=float,
    default=2.0,
    envvar="ORDERFLOW_PAYMENT_TIMEOUT",
    show_default=True,
    help="Payment request timeout in seconds.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Debug logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    data_dir: Path,
    payment_url: str | None,
    payment_timeout: float,
    verbose: bool,
) -> None:
    """orderflow — order creation with discounts, FX and payment capture"""
    set_verbose(verbose)
    ctx.obj = Settings(
        data_dir=data_dir,
        payment_base_url=payment_url,
        payment_timeout=payment_timeout,
    )


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_show)
