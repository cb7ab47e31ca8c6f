"""
Adapter: in-memory order storage.

Implements OrderRepository port.
Orders are kept in one append-only list; per-user queries filter it
in insertion order.
"""

import threading

from app.domain.ledger.entities import Order
from app.domain.ledger.ports import OrderRepository


class InMemoryOrderStore(OrderRepository):
    """Process-local, append-only order store."""

    def __init__(self) -> None:
        self._orders: list[Order] = []
        self._lock = threading.Lock()

    def add(self, order: Order) -> None:
        with self._lock:
            self._orders.append(order)

    def get_by_user(self, user_id: str) -> list[Order]:
        # Order is frozen, so sharing instances with callers is safe.
        with self._lock:
            return [o for o in self._orders if o.user_id == user_id]

    def count(self) -> int:
        with self._lock:
            return len(self._orders)
