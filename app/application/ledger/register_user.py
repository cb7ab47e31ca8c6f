"""
Use case: Register a user.

Input: RegisterUserCommand (user_id)
Output: None
Side effects: Creates or overwrites one user with an empty balance.
Failure cases: None.
"""

import logging

from app.application.ledger.dtos import RegisterUserCommand
from app.domain.ledger.entities import User
from app.domain.ledger.ports import UserRepository

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Orchestrates user registration.

    Re-registering an existing user_id is not an error; the
    previous entry, balances included, is replaced.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: RegisterUserCommand) -> None:
        """Run the registration use case.

        Args:
            command: The registration request.
        """
        if self._user_repo.exists(command.user_id):
            logger.info("Re-registering user=%s, balances reset", command.user_id)
        else:
            logger.info("Registering user=%s", command.user_id)

        self._user_repo.add(User(user_id=command.user_id))
