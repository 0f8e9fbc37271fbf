"""
Account API endpoints.
Handles account creation, retrieval, updates, deletion and balance queries.

OwnerNotFoundError and AccountNotFoundError raised by the service are turned
into 404 responses by the handlers registered in app.main.
"""

from fastapi import APIRouter, Depends, Response, status
from typing import List

from app.api.dependencies import get_account_service
from app.schemas.account import (
    AccountCreate,
    AccountUpdate,
    AccountResponse,
    AccountBalance,
    TransactionLimit
)
from app.services.account_service import AccountService

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.post("/", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def create_account(
    account_data: AccountCreate,
    service: AccountService = Depends(get_account_service)
):
    """
    Create a new account for an existing user.
    
    - **owner_id**: User the account belongs to (checked against the user service)
    - **account_number**: Account number shown to the customer
    - **account_type**: Account category
    - **balance**: Opening balance (default: 0.00)
    - **currency**: Currency code
    """
    return service.create_account(account_data)


@router.get("/", response_model=List[AccountResponse])
def list_accounts(service: AccountService = Depends(get_account_service)):
    """
    List all accounts.
    """
    return service.get_all_accounts()


@router.get(
    "/users/{owner_id}",
    response_model=List[AccountResponse],
    responses={204: {"description": "User has no accounts"}}
)
def get_accounts_by_owner(
    owner_id: int,
    service: AccountService = Depends(get_account_service)
):
    """
    List the accounts of one user. Returns 204 when the user has none.
    """
    accounts = service.get_accounts_by_owner_id(owner_id)
    if not accounts:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return accounts


@router.get("/users/{owner_id}/balances", response_model=List[AccountBalance])
def get_balances_by_owner(
    owner_id: int,
    service: AccountService = Depends(get_account_service)
):
    """
    Get the balance of every account of one user.
    """
    return service.get_balances_by_owner_id(owner_id)


@router.get("/balance", response_model=AccountBalance)
def get_balance_by_query(
    account_id: int,
    service: AccountService = Depends(get_account_service)
):
    """
    Get account balance, with the account ID passed as a query parameter.
    """
    return AccountBalance(
        account_id=account_id,
        balance=service.get_balance(account_id)
    )


@router.put("/update", response_model=AccountResponse)
def update_account_by_owner(
    owner_id: int,
    account_id: int,
    update_data: AccountUpdate,
    service: AccountService = Depends(get_account_service)
):
    """
    Replace account details, matching the account on both user ID and account ID.
    
    - **owner_id**: User the account must belong to
    - **account_id**: Account to update
    """
    return service.update_account_by_owner_id_and_account_id(owner_id, account_id, update_data)


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    service: AccountService = Depends(get_account_service)
):
    """
    Get account details by account ID.
    """
    return service.get_account(account_id)


@router.put("/{account_id}", response_model=AccountResponse)
def update_account(
    account_id: int,
    update_data: AccountUpdate,
    service: AccountService = Depends(get_account_service)
):
    """
    Replace account number, type, balance and currency.
    """
    return service.update_account(account_id, update_data)


@router.get("/{account_id}/balance", response_model=AccountBalance)
def get_account_balance(
    account_id: int,
    service: AccountService = Depends(get_account_service)
):
    """
    Get account balance.
    """
    return AccountBalance(
        account_id=account_id,
        balance=service.get_balance(account_id)
    )


@router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_account(
    account_id: int,
    service: AccountService = Depends(get_account_service)
):
    """
    Delete an account.
    """
    service.delete_account(account_id)
    return None


@router.get("/{account_id}/transaction-limit", response_model=TransactionLimit)
def get_transaction_limit(
    account_id: int,
    service: AccountService = Depends(get_account_service)
):
    """
    Get the per-transaction limit of an account.
    """
    return TransactionLimit(
        account_id=account_id,
        transaction_limit=service.get_transaction_limit(account_id)
    )
