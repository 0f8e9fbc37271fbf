"""
Account record store.
Key-based access to Account rows: by account id, by owner id, or by both.
"""

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.account import Account


class AccountRepository:
    """
    Reads and writes Account rows through a SQLAlchemy session.
    Every write commits immediately; a failed commit is rolled back and re-raised.
    """

    def __init__(self, db: Session):
        self.db = db

    def add(self, account: Account) -> Account:
        """Insert a new account. The database assigns account_id."""
        self.db.add(account)
        self._commit()
        self.db.refresh(account)
        return account

    def find_all(self) -> List[Account]:
        return self.db.query(Account).order_by(Account.account_id).all()

    def find_by_owner_id(self, owner_id: int) -> List[Account]:
        return self.db.query(Account).filter(
            Account.owner_id == owner_id
        ).order_by(Account.account_id).all()

    def find_by_account_id(self, account_id: int) -> Optional[Account]:
        return self.db.get(Account, account_id)

    def find_by_owner_id_and_account_id(self, owner_id: int, account_id: int) -> Optional[Account]:
        return self.db.query(Account).filter(
            Account.owner_id == owner_id,
            Account.account_id == account_id
        ).first()

    def save(self, account: Account) -> Account:
        """Persist changes made to an account loaded from this session."""
        self._commit()
        self.db.refresh(account)
        return account

    def delete(self, account: Account) -> None:
        self.db.delete(account)
        self._commit()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
