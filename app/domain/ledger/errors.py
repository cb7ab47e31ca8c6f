"""
Domain-specific errors for the ledger bounded context.

All errors raised from the domain and application layers are defined here.
They are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class LedgerDomainError(Exception):
    """Base error for all ledger domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UnknownUserError(LedgerDomainError):
    """Raised when a request references a user_id that was never registered."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"Unknown user: {user_id}")
        self.user_id = user_id
