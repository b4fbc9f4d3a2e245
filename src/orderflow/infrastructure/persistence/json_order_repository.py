"""JSON-file-backed implementation of OrderRepository.

The file holds one object keyed by order id.  Every write replaces the
file atomically from a uniquely named temporary file, and the whole
read-modify-write cycle runs under an exclusive ``flock`` on a sibling
``.lock`` file, so separate repository instances and separate processes
sharing one file never lose or tear each other's records.
"""

from __future__ import annotations

import fcntl
import json
import os
import tempfile
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

from orderflow.domain.exceptions import RepositoryError, ValidationError
from orderflow.domain.model.order import Order, OrderStatus
from orderflow.domain.model.value_objects import OrderId
from orderflow.domain.repository.order_repository import OrderRepository
from orderflow.logging import get_logger

logger = get_logger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock_path = file_path.with_name(file_path.name + ".lock")
        self._lock = threading.Lock()
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: OrderId) -> Order | None:
        # os.replace is atomic, so readers see either the old or the new file
        raw = self._load_raw().get(str(order_id))
        if raw is None:
            return None
        return self._to_domain(str(order_id), raw)

    def save(self, order: Order) -> None:
        with self._exclusive():
            orders = self._load_raw()
            orders[str(order.id)] = self._to_raw(order)
            self._persist_raw(orders)
        logger.debug("Saved order %s to %s", order.id, self._file_path)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "amount_cents": order.amount_cents,
            "currency": order.currency,
            "status": order.status.value,
            "created_at": order.created_at.astimezone(timezone.utc).isoformat(),
        }

    @staticmethod
    def _to_domain(order_id: str, raw: dict) -> Order:
        try:
            return Order(
                id=OrderId(order_id),
                amount_cents=raw["amount_cents"],
                currency=raw["currency"],
                status=OrderStatus(raw["status"]),
                created_at=datetime.fromisoformat(raw["created_at"]),
            )
        except (KeyError, ValueError, ValidationError) as exc:
            raise RepositoryError(f"Corrupt record for order {order_id}") from exc

    # --- File helpers ---------------------------------------------------------

    @contextmanager
    def _exclusive(self) -> Iterator[None]:
        """Hold the in-process lock and the cross-process file lock."""
        with self._lock:
            try:
                fh = open(self._lock_path, "a")
            except OSError as exc:
                raise RepositoryError(f"Cannot lock {self._file_path}: {exc}") from exc
            with fh:
                fcntl.flock(fh.fileno(), fcntl.LOCK_EX)
                try:
                    yield
                finally:
                    fcntl.flock(fh.fileno(), fcntl.LOCK_UN)

    def _load_raw(self) -> dict[str, dict]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise RepositoryError(f"Cannot read {self._file_path}: {exc}") from exc

    def _persist_raw(self, orders: dict[str, dict]) -> None:
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self._file_path.parent, prefix=self._file_path.name + ".", suffix=".tmp"
            )
        except OSError as exc:
            raise RepositoryError(f"Cannot write {self._file_path}: {exc}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(json.dumps(orders, indent=2, sort_keys=True) + "\n")
            os.replace(tmp_name, self._file_path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise RepositoryError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise RepositoryError(f"Cannot create {self._file_path.parent}: {exc}") from exc
        with self._exclusive():
            if not self._file_path.exists():
                self._persist_raw({})
