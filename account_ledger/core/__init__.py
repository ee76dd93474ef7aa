"""
Ledger Core Package

Accounts, the ledger registry, and the exceptions they raise.
"""

from account_ledger.core.account import (
    MAX_NAME_LENGTH,
    Account,
    AmountLike,
    to_decimal,
)
from account_ledger.core.errors import (
    AccountNotFoundError,
    DuplicateAccountError,
    InsufficientFundsError,
    InvalidArgumentError,
    LedgerError,
    NothingToUndoError,
)
from account_ledger.core.ledger import Ledger

__all__ = [
    # Core types
    "Account",
    "AmountLike",
    "Ledger",
    "MAX_NAME_LENGTH",
    "to_decimal",
    # Exceptions
    "AccountNotFoundError",
    "DuplicateAccountError",
    "InsufficientFundsError",
    "InvalidArgumentError",
    "LedgerError",
    "NothingToUndoError",
]
