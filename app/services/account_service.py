"""
Account service.

Implements account CRUD plus balance and transaction-limit lookups.
Owner-scoped operations ask the owner checker first and only touch the
record store when the owner is known.  Lookups by account id alone skip
the owner check.  Missing records always raise, never return None.
"""

import logging
from decimal import Decimal
from typing import List

from app.core.exceptions import AccountNotFoundError, OwnerNotFoundError
from app.models.account import Account
from app.repositories.account_repository import AccountRepository
from app.schemas.account import AccountCreate, AccountUpdate
from app.services.owner_validator import OwnerExistenceChecker

logger = logging.getLogger(__name__)

# Flat per-account limit until real limit rules exist
TRANSACTION_LIMIT = Decimal("10000.00")


class AccountService:
    """
    Account operations over a record store and an owner checker.

    Holds no state between calls; build one per request.
    """

    def __init__(self, repository: AccountRepository, owner_checker: OwnerExistenceChecker):
        self.repository = repository
        self.owner_checker = owner_checker

    def create_account(self, account_data: AccountCreate) -> Account:
        self._require_owner(account_data.owner_id, "Account creation failed.")
        logger.info("Creating new account for User ID: %s", account_data.owner_id)
        account = Account(
            owner_id=account_data.owner_id,
            account_number=account_data.account_number,
            account_type=account_data.account_type,
            balance=account_data.balance,
            currency=account_data.currency
        )
        return self.repository.add(account)

    def get_all_accounts(self) -> List[Account]:
        logger.info("Retrieving all accounts.")
        return self.repository.find_all()

    def get_accounts_by_owner_id(self, owner_id: int) -> List[Account]:
        self._require_owner(owner_id, "Unable to retrieve accounts.")
        logger.info("Fetching accounts for User ID: %s", owner_id)
        return self.repository.find_by_owner_id(owner_id)

    def get_account(self, account_id: int) -> Account:
        logger.info("Fetching account with Account ID: %s", account_id)
        return self._load(account_id)

    def update_account(self, account_id: int, update: AccountUpdate) -> Account:
        """
        Replace the mutable fields of an account found by id alone.
        No owner check happens here, unlike update_account_by_owner_id_and_account_id.
        """
        logger.info("Updating account with ID: %s", account_id)
        account = self._load(account_id)
        self._apply_update(account, update)
        return self.repository.save(account)

    def update_account_by_owner_id_and_account_id(
        self,
        owner_id: int,
        account_id: int,
        update: AccountUpdate
    ) -> Account:
        self._require_owner(owner_id, "Update operation failed.")
        logger.info("Updating account with ID %s for User ID %s", account_id, owner_id)
        account = self.repository.find_by_owner_id_and_account_id(owner_id, account_id)
        if account is None:
            raise AccountNotFoundError(account_id, owner_id=owner_id)
        self._apply_update(account, update)
        return self.repository.save(account)

    def delete_account(self, account_id: int) -> bool:
        logger.info("Deleting account with ID: %s", account_id)
        account = self._load(account_id)
        self.repository.delete(account)
        return True

    def get_balances_by_owner_id(self, owner_id: int) -> List[Account]:
        self._require_owner(owner_id, "Unable to retrieve balances.")
        logger.info("Fetching balances for User ID: %s", owner_id)
        return self.repository.find_by_owner_id(owner_id)

    def get_balance(self, account_id: int) -> Decimal:
        logger.info("Fetching balance for Account ID: %s", account_id)
        return self._load(account_id).balance

    def get_transaction_limit(self, account_id: int) -> Decimal:
        # Same for every id, existing or not
        return TRANSACTION_LIMIT

    def _require_owner(self, owner_id: int, failure: str) -> None:
        if not self.owner_checker.exists(owner_id):
            logger.error("User with ID %s not found. %s", owner_id, failure)
            raise OwnerNotFoundError(owner_id)

    def _load(self, account_id: int) -> Account:
        account = self.repository.find_by_account_id(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    @staticmethod
    def _apply_update(account: Account, update: AccountUpdate) -> None:
        account.account_number = update.account_number
        account.account_type = update.account_type
        account.balance = update.balance
        account.currency = update.currency
