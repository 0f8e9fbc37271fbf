"""
Domain errors raised by the account service.
The API layer maps both not-found errors to 404 responses.
"""

from typing import Optional


class AccountServiceError(Exception):
    """Base class for account service errors."""


class OwnerNotFoundError(AccountServiceError):
    """The user service does not know the owner (or could not be reached)."""

    def __init__(self, owner_id: int):
        self.owner_id = owner_id
        super().__init__(f"User with ID {owner_id} not found.")


class AccountNotFoundError(AccountServiceError):
    """No account matches the requested key(s)."""

    def __init__(self, account_id: int, owner_id: Optional[int] = None):
        self.account_id = account_id
        self.owner_id = owner_id
        if owner_id is None:
            message = f"Account with ID {account_id} not found."
        else:
            message = f"Account not found for User ID {owner_id} and Account ID {account_id}."
        super().__init__(message)
