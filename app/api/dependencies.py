"""
FastAPI dependency providers for the account endpoints.
The HTTP client is shared for the app's lifetime; the service is built per request.
"""

import httpx
from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.database import get_db
from app.repositories.account_repository import AccountRepository
from app.services.account_service import AccountService
from app.services.owner_validator import HttpOwnerValidator, OwnerExistenceChecker

# Shared client for user service calls (closed on app shutdown)
http_client = httpx.Client(timeout=settings.USER_SERVICE_TIMEOUT)


def get_http_client() -> httpx.Client:
    return http_client


def get_owner_validator(client: httpx.Client = Depends(get_http_client)) -> OwnerExistenceChecker:
    return HttpOwnerValidator(client, settings.USER_SERVICE_URL)


def get_account_service(
    db: Session = Depends(get_db),
    owner_validator: OwnerExistenceChecker = Depends(get_owner_validator)
) -> AccountService:
    return AccountService(AccountRepository(db), owner_validator)
