"""
Pydantic schemas for Account API requests and responses.
"""

from pydantic import BaseModel, Field, ConfigDict
from decimal import Decimal


class AccountCreate(BaseModel):
    """Schema for creating a new account."""
    owner_id: int = Field(..., description="ID of the owning user in the user service")
    account_number: str = Field(..., min_length=1, max_length=50, description="Externally visible account number")
    account_type: str = Field(..., min_length=1, max_length=30, description="Account category, e.g. SAVINGS or CHECKING")
    balance: Decimal = Field(default=Decimal("0.00"), max_digits=15, decimal_places=2, description="Opening balance")
    currency: str = Field(..., min_length=1, max_length=3, description="Currency code")
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "owner_id": 1,
                "account_number": "AC100",
                "account_type": "SAVINGS",
                "balance": 500.00,
                "currency": "USD"
            }
        }
    )


class AccountUpdate(BaseModel):
    """
    Schema for replacing the mutable fields of an account.
    All four fields are required; account_id and owner_id are never changed.
    """
    account_number: str = Field(..., min_length=1, max_length=50)
    account_type: str = Field(..., min_length=1, max_length=30)
    balance: Decimal = Field(..., max_digits=15, decimal_places=2)
    currency: str = Field(..., min_length=1, max_length=3)
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "account_number": "AC100",
                "account_type": "SAVINGS",
                "balance": 750.00,
                "currency": "USD"
            }
        }
    )


class AccountResponse(BaseModel):
    """Schema for account response."""
    account_id: int
    owner_id: int
    account_number: str
    account_type: str
    balance: Decimal
    currency: str
    
    model_config = ConfigDict(from_attributes=True)


class AccountBalance(BaseModel):
    """Schema for account balance response."""
    account_id: int
    balance: Decimal
    
    model_config = ConfigDict(from_attributes=True)


class TransactionLimit(BaseModel):
    """Schema for transaction limit response."""
    account_id: int
    transaction_limit: Decimal
