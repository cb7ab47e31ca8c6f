"""
Port interfaces (ABCs) for the ledger bounded context.

Ports define the contracts that the application layer requires from
storage. Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.ledger.entities import Order, User


class UserRepository(ABC):
    """Port for registering and looking up users by identifier."""

    @abstractmethod
    def add(self, user: User) -> None:
        """Insert the user, replacing any entry with the same user_id."""
        raise NotImplementedError

    @abstractmethod
    def get(self, user_id: str) -> Optional[User]:
        """Return the stored user, or None if absent."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> dict[str, User]:
        """Return a snapshot of every stored user keyed by user_id."""
        raise NotImplementedError

    @abstractmethod
    def exists(self, user_id: str) -> bool:
        """Return True iff a user with this identifier is stored."""
        raise NotImplementedError

    @abstractmethod
    def update(self, user: User) -> bool:
        """Replace an existing user.

        Returns:
            False, storing nothing, when the user_id is not registered.
        """
        raise NotImplementedError


class OrderRepository(ABC):
    """Port for recording orders and querying them per user."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Append the order. No validation happens at this layer."""
        raise NotImplementedError

    @abstractmethod
    def get_by_user(self, user_id: str) -> list[Order]:
        """Return the user's orders in insertion order (possibly empty)."""
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        """Return the total number of stored orders."""
        raise NotImplementedError
