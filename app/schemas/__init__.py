"""
Pydantic schemas package.
"""

from app.schemas.account import (
    AccountCreate,
    AccountUpdate,
    AccountResponse,
    AccountBalance,
    TransactionLimit
)

__all__ = [
    "AccountCreate",
    "AccountUpdate",
    "AccountResponse",
    "AccountBalance",
    "TransactionLimit"
]
