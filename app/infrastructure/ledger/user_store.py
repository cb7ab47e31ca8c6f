"""
Adapter: in-memory user storage.

Implements UserRepository port.
Users are keyed by user_id. A single lock guards every access
because FastAPI runs sync endpoints on a thread pool.
"""

import copy
import threading
from typing import Optional

from app.domain.ledger.entities import User
from app.domain.ledger.ports import UserRepository


class InMemoryUserStore(UserRepository):
    """Process-local user store.

    Returned users are copies; mutating them does not touch the store.
    Use ``update`` to write changes back.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._lock = threading.Lock()

    def add(self, user: User) -> None:
        with self._lock:
            self._users[user.user_id] = copy.deepcopy(user)

    def get(self, user_id: str) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return copy.deepcopy(user) if user is not None else None

    def list_all(self) -> dict[str, User]:
        with self._lock:
            return copy.deepcopy(self._users)

    def exists(self, user_id: str) -> bool:
        with self._lock:
            return user_id in self._users

    def update(self, user: User) -> bool:
        with self._lock:
            if user.user_id not in self._users:
                return False
            self._users[user.user_id] = copy.deepcopy(user)
            return True
