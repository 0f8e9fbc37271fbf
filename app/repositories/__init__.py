"""
Record store package.
"""

from app.repositories.account_repository import AccountRepository

__all__ = ["AccountRepository"]
