"""Dict-backed implementation of OrderRepository.

Orders are immutable, so storing the instance itself is safe: a reader
can never observe a half-written record.
"""

from __future__ import annotations

import threading

from orderflow.domain.model.order import Order
from orderflow.domain.model.value_objects import OrderId
from orderflow.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[str, Order] = {}
        self._lock = threading.Lock()

    def get_by_id(self, order_id: OrderId) -> Order | None:
        with self._lock:
            return self._store.get(str(order_id))

    def save(self, order: Order) -> None:
        with self._lock:
            self._store[str(order.id)] = order

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
