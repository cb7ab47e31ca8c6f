"""
Use case: Fetch a user's balance detail.

Input: GetUserDetailQuery (user_id)
Output: UserDetailResult
Side effects: None (read-only query).
Failure cases: UnknownUserError.
"""

import logging

from app.application.ledger.dtos import GetUserDetailQuery, UserDetailResult
from app.domain.ledger.errors import UnknownUserError
from app.domain.ledger.ports import UserRepository

logger = logging.getLogger(__name__)


class GetUserDetailUseCase:
    """Orchestrates reading one user's balances."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, query: GetUserDetailQuery) -> UserDetailResult:
        """Run the user-detail use case.

        Raises:
            UnknownUserError: If the user_id is not registered.
        """
        user = self._user_repo.get(query.user_id)
        if user is None:
            raise UnknownUserError(query.user_id)

        logger.info("Retrieved detail for user=%s", query.user_id)
        return UserDetailResult(user_id=user.user_id, balance=user.balance_pairs())
