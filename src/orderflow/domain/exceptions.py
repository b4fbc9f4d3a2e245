"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the CLI
layer can catch them uniformly.  Each class also carries an ``ErrorKind``
so callers can branch on an explicit enumeration rather than on the
exception hierarchy.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    VALIDATION = "validation"
    UNSUPPORTED_CURRENCY = "unsupported_currency"
    ORDER_REJECTED = "order_rejected"
    TRANSIENT_PAYMENT = "transient_payment"
    NON_TRANSIENT_PAYMENT = "non_transient_payment"
    NOT_FOUND = "not_found"
    REPOSITORY = "repository"
    UNCLASSIFIED = "unclassified"


class DomainException(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind = ErrorKind.UNCLASSIFIED


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    kind = ErrorKind.VALIDATION


class UnsupportedCurrencyError(ValidationError):
    """A currency code is outside the set a component can handle."""

    kind = ErrorKind.UNSUPPORTED_CURRENCY


class OrderRejectedError(DomainException):
    """The risk policy refused the charge."""

    kind = ErrorKind.ORDER_REJECTED


class PaymentError(DomainException):
    """Base class for payment capture failures."""


class TransientPaymentError(PaymentError):
    """Payment failed in a way that is likely to succeed on retry."""

    kind = ErrorKind.TRANSIENT_PAYMENT


class NonTransientPaymentError(PaymentError):
    """Payment was definitively refused; retrying will not help."""

    kind = ErrorKind.NON_TRANSIENT_PAYMENT


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class RepositoryError(DomainException):
    """The backing store could not read or write a record."""

    kind = ErrorKind.REPOSITORY
