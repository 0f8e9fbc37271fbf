"""
Account database model.
Represents bank accounts held by users of the user service.
"""

from sqlalchemy import Column, String, Numeric, Integer
from app.database import Base


class Account(Base):
    """
    Account table - stores bank account information.
    """
    __tablename__ = "accounts"
    # Never hand out the id of a deleted row again (SQLite only; sequences already behave)
    __table_args__ = {"sqlite_autoincrement": True}
    
    account_id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    owner_id = Column(Integer, index=True, nullable=False)
    account_number = Column(String(50), nullable=False)
    account_type = Column(String(30), nullable=False)
    balance = Column(Numeric(precision=15, scale=2), nullable=False, default=0.00)
    currency = Column(String(3), nullable=False)
    
    def __repr__(self):
        return (
            f"<Account(account_id={self.account_id}, owner_id={self.owner_id}, "
            f"number={self.account_number}, balance={self.balance} {self.currency})>"
        )
