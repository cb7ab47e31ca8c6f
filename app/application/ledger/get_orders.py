"""
Use case: List a user's orders.

Input: GetOrdersQuery (user_id)
Output: list[OrderResult]
Side effects: None (read-only query).
Failure cases: UnknownUserError.
"""

import logging

from app.application.ledger.dtos import GetOrdersQuery, OrderResult
from app.domain.ledger.errors import UnknownUserError
from app.domain.ledger.ports import OrderRepository, UserRepository

logger = logging.getLogger(__name__)


class GetOrdersUseCase:
    """Orchestrates retrieving every order a user has placed."""

    def __init__(
        self,
        user_repo: UserRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._user_repo = user_repo
        self._order_repo = order_repo

    def execute(self, query: GetOrdersQuery) -> list[OrderResult]:
        """Run the get-orders use case.

        Args:
            query: The query holding the user_id.

        Returns:
            The user's orders in insertion order. Empty if none were placed.

        Raises:
            UnknownUserError: If the user_id is not registered.
        """
        if not self._user_repo.exists(query.user_id):
            raise UnknownUserError(query.user_id)

        orders = self._order_repo.get_by_user(query.user_id)
        logger.info("Retrieved %d orders for user=%s", len(orders), query.user_id)

        return [
            OrderResult(
                user_id=order.user_id,
                source=order.currency_pair.source,
                target=order.currency_pair.target,
                value=order.value,
                price=order.price,
            )
            for order in orders
        ]
