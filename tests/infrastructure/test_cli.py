"""End-to-end tests for the click CLI against a temporary data directory."""

import json
from contextlib import contextmanager

import httpx
import pytest
from click.testing import CliRunner

from orderflow.application.create_order import CreateOrderHandler
from orderflow.infrastructure import bootstrap
from orderflow.infrastructure.cli import order_commands
from orderflow.infrastructure.cli.main import cli
from orderflow.infrastructure.http.payment_gateway import HttpPaymentGateway
from orderflow.infrastructure.services.fx_converter import FixedRateFxConverter
from orderflow.infrastructure.services.promo_service import StaticPromoService
from orderflow.infrastructure.services.risk_checker import ThresholdRiskChecker
from tests.fakes import RecordingSleep


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args])

    return _run


class TestOrderCreateCommand:

    def test_creates_and_prints_event(self, run):
        result = run("order", "create", "--amount-cents", "10000", "--currency", "eur",
                     "--promo", "PROMO10")
        assert result.exit_code == 0, result.output
        body = json.loads(result.output)
        assert body["amountCents"] == 10000
        assert body["currency"] == "EUR"
        assert body["chargedAmountCents"] == 9900
        assert body["chargedCurrency"] == "USD"
        assert body["appliedDiscountPercent"] == 10
        assert body["transactionId"].startswith("tx_")

    def test_free_order(self, run):
        result = run("order", "create", "--amount-cents", "5000", "--currency", "USD",
                     "--promo", "FREE100")
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["transactionId"].startswith("free_")

    @pytest.mark.parametrize(
        "amount, currency, status",
        [("1000", "GBP", "[400]"), ("100001", "USD", "[403]"), ("0", "USD", "[422]")],
    )
    def test_errors_map_to_status(self, run, amount, currency, status):
        result = run("order", "create", "--amount-cents", amount, "--currency", currency)
        assert result.exit_code == 1
        assert status in result.output

    def test_payment_outage_reports_503(self, run, tmp_path, monkeypatch):
        attempts = []
        sleep = RecordingSleep()

        def unavailable(request: httpx.Request) -> httpx.Response:
            attempts.append(request)
            return httpx.Response(503)

        @contextmanager
        def handler_with_outage(settings):
            gateway = HttpPaymentGateway(
                base_url="http://payments.test", transport=httpx.MockTransport(unavailable)
            )
            try:
                yield CreateOrderHandler(
                    order_repo=bootstrap.order_repository(settings),
                    payment_gateway=gateway,
                    fx_converter=FixedRateFxConverter(),
                    promo_service=StaticPromoService(),
                    risk_checker=ThresholdRiskChecker(),
                    sleep=sleep,
                )
            finally:
                gateway.close()

        monkeypatch.setattr(order_commands, "create_order_handler", handler_with_outage)

        result = run("order", "create", "--amount-cents", "1000", "--currency", "USD")

        assert result.exit_code == 1
        assert "[503] Payment temporarily unavailable" in result.output
        assert len(attempts) == 3
        assert sleep.delays == [0.05, 0.1]
        assert json.loads((tmp_path / "orders.json").read_text()) == {}


class TestOrderShowCommand:

    def test_shows_created_order(self, run):
        created = json.loads(
            run("order", "create", "--amount-cents", "2500", "--currency", "UAH").output
        )
        result = run("order", "show", "--id", created["orderId"])
        assert result.exit_code == 0, result.output
        body = json.loads(result.output)
        assert body["orderId"] == created["orderId"]
        assert body["amountCents"] == 2500
        assert body["currency"] == "UAH"
        assert body["status"] == "created"

    def test_unknown_order(self, run):
        result = run("order", "show", "--id", "nope")
        assert result.exit_code == 1
        assert "[404]" in result.output

    def test_data_dir_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ORDERFLOW_DATA_DIR", str(tmp_path / "env"))
        result = CliRunner().invoke(
            cli, ["order", "create", "--amount-cents", "100", "--currency", "USD"]
        )
        assert result.exit_code == 0, result.output
        assert (tmp_path / "env" / "orders.json").exists()
