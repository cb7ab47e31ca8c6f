"""
Domain entities for the ledger bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CurrencyPair:
    """Direction of an exchange: sell ``source`` to obtain ``target``."""

    source: str
    target: str


@dataclass
class User:
    """A registered ledger participant.

    Attributes:
        user_id: Unique, non-empty identifier. Doubles as the only credential.
        balances: Holdings keyed by currency code. Empty on registration.
    """

    user_id: str
    balances: dict[str, float] = field(default_factory=dict)

    def balance_pairs(self) -> list[tuple[str, float]]:
        """Return the balances as ``(currency, amount)`` pairs."""
        return list(self.balances.items())


@dataclass(frozen=True)
class Order:
    """A one-sided request to exchange ``value`` units at ``price``.

    ``user_id`` references a User by identifier only.
    """

    user_id: str
    currency_pair: CurrencyPair
    value: float
    price: float
