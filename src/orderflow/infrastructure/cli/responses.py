"""Maps use-case outcomes to response statuses and JSON bodies."""

from __future__ import annotations

from orderflow.application.dto import OrderDTO
from orderflow.domain.events import OrderCreated
from orderflow.domain.exceptions import DomainException, ErrorKind

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 422,
    ErrorKind.UNSUPPORTED_CURRENCY: 400,
    ErrorKind.ORDER_REJECTED: 403,
    ErrorKind.TRANSIENT_PAYMENT: 503,
    ErrorKind.NON_TRANSIENT_PAYMENT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.REPOSITORY: 500,
    ErrorKind.UNCLASSIFIED: 400,
}

UNEXPECTED_STATUS = 500


def status_for(exc: DomainException) -> int:
    return STATUS_BY_KIND[exc.kind]


def error_message(exc: DomainException) -> str:
    # Gateway details are not for the caller.
    if exc.kind is ErrorKind.TRANSIENT_PAYMENT:
        return "Payment temporarily unavailable"
    return str(exc)


def created_body(event: OrderCreated) -> dict:
    return {
        "orderId": str(event.order_id),
        "amountCents": event.amount_cents,
        "currency": event.currency,
        "occurredAt": event.occurred_at.isoformat(),
        "chargedAmountCents": event.charged_amount_cents,
        "chargedCurrency": event.charged_currency,
        "appliedDiscountPercent": event.applied_discount_percent,
        "transactionId": event.transaction_id,
    }


def order_body(dto: OrderDTO) -> dict:
    return {
        "orderId": dto.id,
        "amountCents": dto.amount_cents,
        "currency": dto.currency,
        "status": dto.status,
        "createdAt": dto.created_at,
    }
