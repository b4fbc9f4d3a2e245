"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderflow.domain.model.order import Order
from orderflow.domain.model.value_objects import OrderId


class OrderRepository(ABC):
    """Implementations must be safe to call from several threads at once."""

    @abstractmethod
    def get_by_id(self, order_id: OrderId) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Insert the order, or replace the stored order with the same ID."""
