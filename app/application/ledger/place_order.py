"""
Use case: Place an exchange order.

Input: PlaceOrderCommand (user_id, source, target, value, price)
Output: None
Side effects: Appends one order to the order store.
Failure cases: UnknownUserError.
"""

import logging

from app.application.ledger.dtos import PlaceOrderCommand
from app.domain.ledger.entities import CurrencyPair, Order
from app.domain.ledger.errors import UnknownUserError
from app.domain.ledger.ports import OrderRepository, UserRepository

logger = logging.getLogger(__name__)


class PlaceOrderUseCase:
    """Orchestrates recording an order for a registered user.

    The order is stored as submitted. It is never matched against
    other orders and never changes any balance.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._user_repo = user_repo
        self._order_repo = order_repo

    def execute(self, command: PlaceOrderCommand) -> None:
        """Run the place-order use case.

        Args:
            command: The order request.

        Raises:
            UnknownUserError: If the user_id is not registered.
        """
        if not self._user_repo.exists(command.user_id):
            raise UnknownUserError(command.user_id)

        order = Order(
            user_id=command.user_id,
            currency_pair=CurrencyPair(source=command.source, target=command.target),
            value=command.value,
            price=command.price,
        )
        self._order_repo.add(order)

        logger.info(
            "Order recorded: user=%s, pair=%s/%s, value=%s, price=%s, total_orders=%d",
            command.user_id,
            command.source,
            command.target,
            command.value,
            command.price,
            self._order_repo.count(),
        )
