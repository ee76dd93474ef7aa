"""
Ledger Exceptions

Every rejection the core can produce has its own exception type carrying
an ErrorCode. The service layer converts these into OperationResult values;
nothing else should need to catch them.

A raised LedgerError always means the operation was a no-op.
"""

from decimal import Decimal

from account_ledger.models.results import ErrorCode


class LedgerError(Exception):
    """Base exception for ledger operations."""

    code: ErrorCode = ErrorCode.INVALID_ARGUMENT

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(LedgerError):
    """Malformed or out-of-range input."""

    code = ErrorCode.INVALID_ARGUMENT

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class DuplicateAccountError(LedgerError):
    """An account with this number already exists."""

    code = ErrorCode.DUPLICATE_ACCOUNT

    def __init__(self, account_number: int):
        super().__init__(f"Account {account_number} already exists")
        self.account_number = account_number


class InsufficientFundsError(LedgerError):
    """Withdrawal exceeds the available balance."""

    code = ErrorCode.INSUFFICIENT_FUNDS

    def __init__(self, requested: Decimal, available: Decimal):
        super().__init__(
            f"Insufficient funds: requested {requested}, available {available}"
        )
        self.requested = requested
        self.available = available


class NothingToUndoError(LedgerError):
    """Only the initial deposit is left in the history."""

    code = ErrorCode.NOTHING_TO_UNDO

    def __init__(self, account_number: int):
        super().__init__(
            f"Nothing to undo on account {account_number} "
            "(initial deposit cannot be undone)"
        )
        self.account_number = account_number


class AccountNotFoundError(LedgerError):
    """No account with this number."""

    code = ErrorCode.NOT_FOUND

    def __init__(self, account_number: int):
        super().__init__(f"Account {account_number} not found")
        self.account_number = account_number
