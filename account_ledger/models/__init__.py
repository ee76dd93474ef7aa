"""
Data Models Package

This package contains the Pydantic models shared by the ledger core,
the service layer and the presentation layer.
"""

from account_ledger.models.transaction import (
    Transaction,
    TransactionKind,
)
from account_ledger.models.results import (
    AccountStatement,
    AccountSummary,
    ErrorCode,
    OperationResult,
)

__all__ = [
    # Transaction models
    "Transaction",
    "TransactionKind",
    # Result models
    "AccountStatement",
    "AccountSummary",
    "ErrorCode",
    "OperationResult",
]
