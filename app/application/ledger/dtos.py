"""
Data Transfer Objects for the ledger application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RegisterUserCommand:
    """Input DTO for registering (or re-registering) a user."""

    user_id: str


@dataclass(frozen=True)
class PlaceOrderCommand:
    """Input DTO for submitting an exchange order.

    Attributes:
        user_id: Identifier of an already registered user.
        source: Currency being sold.
        target: Currency being bought.
        value: Amount of ``source`` to exchange. Not range-checked.
        price: Requested price. Not range-checked.
    """

    user_id: str
    source: str
    target: str
    value: float
    price: float


@dataclass(frozen=True)
class GetOrdersQuery:
    """Input DTO for listing a user's orders."""

    user_id: str


@dataclass(frozen=True)
class GetUserDetailQuery:
    """Input DTO for fetching a user's balance detail."""

    user_id: str


@dataclass(frozen=True)
class OrderResult:
    """Output DTO for a single recorded order."""

    user_id: str
    source: str
    target: str
    value: float
    price: float


@dataclass(frozen=True)
class UserDetailResult:
    """Output DTO for a user's balance detail.

    Attributes:
        user_id: The user's identifier.
        balance: ``(currency, amount)`` pairs, in storage order.
    """

    user_id: str
    balance: list[tuple[str, float]]
