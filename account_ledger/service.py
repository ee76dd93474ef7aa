"""
Ledger Service

This module is the boundary between the ledger core and whatever
presents it (the Streamlit page, a test, a script).

DESIGN DECISION: The core raises typed LedgerError exceptions.
The service catches exactly those and hands back OperationResult values,
so a caller never needs a try/except to handle an expected outcome such
as insufficient funds. Anything else is a bug and propagates.

Every operation is logged here; the core itself never logs.
Nothing is retried: a rejected operation is deterministic for the same
input and state.
"""

from decimal import Decimal
from typing import Callable, Optional

from account_ledger.config import Settings, get_settings
from account_ledger.core import (
    Account,
    AccountNotFoundError,
    AmountLike,
    Ledger,
    LedgerError,
)
from account_ledger.logging_config import configure_logging, get_logger
from account_ledger.models import (
    AccountStatement,
    AccountSummary,
    OperationResult,
    Transaction,
)


class LedgerService:
    """
    Result-returning facade over one caller-owned Ledger.

    Account numbers are resolved on every call; the service never keeps
    references to accounts between operations.
    """

    def __init__(self, ledger: Optional[Ledger] = None):
        # An empty Ledger is falsy, so test for None explicitly.
        self._ledger = ledger if ledger is not None else Ledger()
        self._logger = get_logger(__name__)

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    # -------------------------------------------------------------------------
    # Mutating operations
    # -------------------------------------------------------------------------

    def open_account(
        self,
        account_number: int,
        name: str,
        initial_deposit: AmountLike,
    ) -> OperationResult:
        """Create an account with its initial deposit."""
        operation = "open_account"
        try:
            account = self._ledger.create_account(account_number, name, initial_deposit)
        except LedgerError as e:
            return self._rejected(operation, account_number, e)

        with account.lock:
            balance = account.balance
            entry = account.last_transaction
        return self._succeeded(operation, account_number, balance, entry)

    def deposit(self, account_number: int, amount: AmountLike) -> OperationResult:
        """Deposit into an existing account."""
        return self._apply(
            "deposit",
            account_number,
            lambda account: account.deposit(amount),
        )

    def withdraw(self, account_number: int, amount: AmountLike) -> OperationResult:
        """Withdraw from an existing account."""
        return self._apply(
            "withdraw",
            account_number,
            lambda account: account.withdraw(amount),
        )

    def undo_last(self, account_number: int) -> OperationResult:
        """
        Reverse the most recent transaction on an account.

        The result's `transaction` is the entry that was undone.
        """
        operation = "undo_last"
        try:
            account = self._ledger.get(account_number)
            with account.lock:
                undone = account.last_transaction
                balance = account.undo_last()
        except LedgerError as e:
            return self._rejected(operation, account_number, e)

        return self._succeeded(operation, account_number, balance, undone)

    def close_account(self, account_number: int) -> OperationResult:
        """Delete an account and its history."""
        operation = "close_account"
        if not self._ledger.delete(account_number):
            return self._rejected(
                operation,
                account_number,
                AccountNotFoundError(account_number),
            )
        return self._succeeded(operation, account_number, None, None)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_accounts(self) -> list[AccountSummary]:
        return self._ledger.list_all()

    def get_account(self, account_number: int) -> Optional[AccountSummary]:
        account = self._ledger.find(account_number)
        return account.summary() if account is not None else None

    def history(self, account_number: int) -> Optional[tuple[Transaction, ...]]:
        """Most-recent-first history, or None if there is no such account."""
        account = self._ledger.find(account_number)
        return account.history_view() if account is not None else None

    def statement(self, account_number: int) -> Optional[AccountStatement]:
        """Summary plus history from one consistent read, or None if absent."""
        account = self._ledger.find(account_number)
        return account.statement() if account is not None else None

    def total_balance(self) -> Decimal:
        return self._ledger.total_balance()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _apply(
        self,
        operation: str,
        account_number: int,
        action: Callable[[Account], Decimal],
    ) -> OperationResult:
        try:
            account = self._ledger.get(account_number)
            with account.lock:
                balance = action(account)
                entry = account.last_transaction
        except LedgerError as e:
            return self._rejected(operation, account_number, e)

        return self._succeeded(operation, account_number, balance, entry)

    def _succeeded(
        self,
        operation: str,
        account_number: int,
        balance: Optional[Decimal],
        entry: Optional[Transaction],
    ) -> OperationResult:
        self._logger.info(
            "operation_succeeded",
            operation=operation,
            account_number=account_number,
            balance=str(balance) if balance is not None else None,
            transaction_kind=entry.kind.value if entry else None,
            amount=str(entry.amount) if entry else None,
        )
        return OperationResult(
            success=True,
            operation=operation,
            account_number=account_number,
            balance=balance,
            transaction=entry,
        )

    def _rejected(
        self,
        operation: str,
        account_number: int,
        error: LedgerError,
    ) -> OperationResult:
        self._logger.warning(
            "operation_rejected",
            operation=operation,
            account_number=account_number,
            error_code=error.code.value,
            error=error.message,
        )
        return OperationResult(
            success=False,
            operation=operation,
            account_number=account_number if type(account_number) is int else None,
            error_code=error.code,
            error_message=error.message,
        )


def create_service(
    settings: Optional[Settings] = None,
    setup_logging: bool = True,
) -> LedgerService:
    """
    Factory function to create a service over a fresh, empty ledger.

    Args:
        settings: Settings to use; defaults to get_settings().
        setup_logging: Whether to configure structlog as well.
                       Set to False when the host already did.
    """
    settings = settings or get_settings()

    if setup_logging:
        configure_logging(settings.logging)

    ledger = Ledger(max_name_length=settings.ledger.max_name_length)
    return LedgerService(ledger)
