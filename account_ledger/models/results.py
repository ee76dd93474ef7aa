"""
Result Models for the Account Ledger

These are the values handed to the presentation layer. Failures are
reported as data (an error code plus message), never as exceptions.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from account_ledger.models.transaction import Transaction


class ErrorCode(str, Enum):
    """Reasons an operation can be rejected."""
    INVALID_ARGUMENT = "invalid_argument"
    DUPLICATE_ACCOUNT = "duplicate_account"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    NOTHING_TO_UNDO = "nothing_to_undo"
    NOT_FOUND = "not_found"


class AccountSummary(BaseModel):
    """
    Point-in-time snapshot of an account, used for listings.

    It does not observe later changes to the account.
    """
    account_number: int
    name: str
    balance: Decimal
    transaction_count: int = Field(
        ...,
        ge=1,
        description="Number of history entries, including the initial deposit"
    )


class AccountStatement(BaseModel):
    """An account summary and its history, read together in one snapshot."""
    summary: AccountSummary
    transactions: tuple[Transaction, ...] = Field(
        ...,
        description="History entries, most recent first"
    )


class OperationResult(BaseModel):
    """
    Outcome of a single ledger operation.

    On success `balance` holds the account's new balance. On failure
    `error_code` and `error_message` say why, and the account is unchanged.
    """
    success: bool
    operation: str = Field(
        ...,
        description="Operation name, e.g. 'deposit'"
    )
    account_number: Optional[int] = None
    balance: Optional[Decimal] = None
    transaction: Optional[Transaction] = Field(
        default=None,
        description="Transaction recorded (or undone) by the operation"
    )
    error_code: Optional[ErrorCode] = None
    error_message: Optional[str] = None

    @property
    def failed(self) -> bool:
        return not self.success
