"""
Business logic package.
"""

from app.services.owner_validator import OwnerExistenceChecker, HttpOwnerValidator
from app.services.account_service import AccountService, TRANSACTION_LIMIT

__all__ = [
    "OwnerExistenceChecker",
    "HttpOwnerValidator",
    "AccountService",
    "TRANSACTION_LIMIT"
]
