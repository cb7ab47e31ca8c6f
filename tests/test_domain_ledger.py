"""
Tests for the ledger domain layer.

Tests domain entities and error classes in isolation.
No external dependencies or IO required.
"""

import dataclasses

import pytest

from app.domain.ledger.entities import CurrencyPair, Order, User
from app.domain.ledger.errors import LedgerDomainError, UnknownUserError


class TestUserEntity:
    """Tests for the User entity."""

    def test_new_user_has_empty_balances(self) -> None:
        """A user created with only an id holds no balances."""
        user = User(user_id="u1")
        assert user.balances == {}
        assert user.balance_pairs() == []

    def test_balances_are_not_shared_between_users(self) -> None:
        """Each user gets its own balance mapping."""
        first = User(user_id="a")
        second = User(user_id="b")
        first.balances["USD"] = 10.0
        assert second.balances == {}

    def test_balance_pairs_keep_storage_order(self) -> None:
        """balance_pairs lists (currency, amount) in insertion order."""
        user = User(user_id="u1", balances={"RUB": 100.0, "USD": 2.5})
        assert user.balance_pairs() == [("RUB", 100.0), ("USD", 2.5)]


class TestOrderEntity:
    """Tests for the Order entity."""

    def test_order_is_immutable(self) -> None:
        """Orders cannot be changed after creation."""
        order = Order(
            user_id="u1",
            currency_pair=CurrencyPair(source="RUB", target="USD"),
            value=20.0,
            price=61.0,
        )
        with pytest.raises(dataclasses.FrozenInstanceError):
            order.value = 30.0  # type: ignore[misc]

    def test_currency_pair_equality(self) -> None:
        """Pairs compare by value and direction matters."""
        assert CurrencyPair("RUB", "USD") == CurrencyPair("RUB", "USD")
        assert CurrencyPair("RUB", "USD") != CurrencyPair("USD", "RUB")


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_unknown_user_error_message(self) -> None:
        """UnknownUserError contains the user_id in its message."""
        error = UnknownUserError("ghost")
        assert error.user_id == "ghost"
        assert "ghost" in str(error)

    def test_unknown_user_is_domain_error(self) -> None:
        """UnknownUserError derives from the ledger base error."""
        assert isinstance(UnknownUserError("x"), LedgerDomainError)
