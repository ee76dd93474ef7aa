"""
Account: one balance and its reversible transaction history.

INVARIANTS (hold after every public call, successful or not):
1. The history is never empty; its first entry is the INITIAL deposit.
2. The balance equals the signed sum of the history, in order.
3. A rejected operation leaves balance and history untouched.

The history behaves as a stack: operations append to the tail and
undo removes the tail. There is no redo.
"""

import threading
from decimal import Decimal, Inexact, InvalidOperation, localcontext
from typing import Callable, Union

from account_ledger.core.errors import (
    InsufficientFundsError,
    InvalidArgumentError,
    NothingToUndoError,
)
from account_ledger.models import (
    AccountStatement,
    AccountSummary,
    Transaction,
    TransactionKind,
)

MAX_NAME_LENGTH = 100

AmountLike = Union[Decimal, int, float, str]


def to_decimal(value: AmountLike, field: str = "amount") -> Decimal:
    """
    Convert an amount to a finite Decimal.

    Floats go through str() so 0.1 becomes Decimal("0.1"), not its
    binary approximation. Booleans are rejected even though they are ints.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(field, f"{field} must be a number, got a boolean")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidArgumentError(field, f"{field} is not a number: {value!r}") from None
    else:
        raise InvalidArgumentError(
            field, f"{field} must be a number, got {type(value).__name__}"
        )

    if not amount.is_finite():
        raise InvalidArgumentError(field, f"{field} must be a finite number")
    return exact(lambda: +amount, field)


def exact(operation: Callable[[], Decimal], field: str = "amount") -> Decimal:
    """
    Run Decimal arithmetic that must not round.

    The default context keeps 28 significant digits and silently rounds
    anything longer. Here rounding raises InvalidArgumentError instead, so
    a balance is always the exact sum of its history.
    """
    with localcontext() as ctx:
        ctx.traps[Inexact] = True
        try:
            return operation()
        except Inexact:
            raise InvalidArgumentError(
                field,
                f"{field} needs more than {ctx.prec} significant digits",
            ) from None


def check_account_number(account_number: object) -> None:
    if isinstance(account_number, bool) or not isinstance(account_number, int):
        raise InvalidArgumentError(
            "account_number", "Account number must be an integer"
        )


def _positive_amount(value: AmountLike) -> Decimal:
    amount = to_decimal(value, "amount")
    if amount <= 0:
        raise InvalidArgumentError("amount", "Amount must be greater than zero")
    return amount


class Account:
    """
    A single balance-holding account.

    Accounts are created and owned by a Ledger. Every read or write of
    (balance, history) happens under the account's own re-entrant lock,
    so operations on one account never interleave.
    """

    def __init__(
        self,
        account_number: int,
        name: str,
        initial_deposit: AmountLike,
        max_name_length: int = MAX_NAME_LENGTH,
    ):
        """
        Open an account with its initial deposit.

        Raises:
            InvalidArgumentError: non-integer account number, blank or
                over-long name, or negative/non-numeric initial deposit.
        """
        check_account_number(account_number)
        if not isinstance(name, str):
            raise InvalidArgumentError("name", "Account holder name must be text")

        name = name.strip()
        if not name:
            raise InvalidArgumentError("name", "Account holder name cannot be empty")
        if len(name) > max_name_length:
            raise InvalidArgumentError(
                "name",
                f"Account holder name cannot exceed {max_name_length} characters",
            )

        opening = to_decimal(initial_deposit, "initial_deposit")
        if opening < 0:
            raise InvalidArgumentError(
                "initial_deposit", "Initial deposit cannot be negative"
            )

        self._account_number = account_number
        self._name = name
        self._balance = opening
        self._history: list[Transaction] = [
            Transaction(kind=TransactionKind.INITIAL, amount=opening)
        ]
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return (
            f"Account(account_number={self._account_number!r}, "
            f"name={self._name!r}, balance={self.balance!r})"
        )

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    @property
    def account_number(self) -> int:
        return self._account_number

    @property
    def name(self) -> str:
        return self._name

    @property
    def balance(self) -> Decimal:
        with self._lock:
            return self._balance

    @property
    def lock(self) -> threading.RLock:
        """Hold this to make several calls on the account atomic."""
        return self._lock

    @property
    def transaction_count(self) -> int:
        with self._lock:
            return len(self._history)

    @property
    def last_transaction(self) -> Transaction:
        with self._lock:
            return self._history[-1]

    @property
    def can_undo(self) -> bool:
        with self._lock:
            return len(self._history) > 1

    def history_view(self) -> tuple[Transaction, ...]:
        """All recorded transactions, most recent first (a snapshot)."""
        with self._lock:
            return tuple(reversed(self._history))

    def summary(self) -> AccountSummary:
        with self._lock:
            return AccountSummary(
                account_number=self._account_number,
                name=self._name,
                balance=self._balance,
                transaction_count=len(self._history),
            )

    def statement(self) -> AccountStatement:
        """Summary and history taken under one lock, so they always agree."""
        with self._lock:
            return AccountStatement(
                summary=self.summary(),
                transactions=self.history_view(),
            )

    def computed_balance(self) -> Decimal:
        """Balance rebuilt from the history; always equal to `balance`."""
        with self._lock:
            return exact(
                lambda: sum(
                    (entry.signed_amount for entry in self._history),
                    Decimal(0),
                ),
                "balance",
            )

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def deposit(self, amount: AmountLike) -> Decimal:
        """
        Add money to the account.

        Returns the new balance.

        Raises:
            InvalidArgumentError: amount is not a positive number
        """
        value = _positive_amount(amount)
        with self._lock:
            self._record(TransactionKind.DEPOSIT, value)
            return self._balance

    def withdraw(self, amount: AmountLike) -> Decimal:
        """
        Take money out of the account.

        Withdrawing the full balance is allowed; going below zero is not.
        Returns the new balance.

        Raises:
            InvalidArgumentError: amount is not a positive number
            InsufficientFundsError: amount exceeds the current balance
        """
        value = _positive_amount(amount)
        with self._lock:
            if value > self._balance:
                raise InsufficientFundsError(requested=value, available=self._balance)
            self._record(TransactionKind.WITHDRAW, value)
            return self._balance

    def undo_last(self) -> Decimal:
        """
        Reverse the most recent transaction and drop it from the history.

        Returns the new balance.

        Raises:
            NothingToUndoError: only the initial deposit remains
        """
        with self._lock:
            if len(self._history) <= 1:
                raise NothingToUndoError(self._account_number)

            entry = self._history[-1]
            restored = exact(lambda: self._balance - entry.signed_amount)
            self._history.pop()
            self._balance = restored
            return self._balance

    def _record(self, kind: TransactionKind, amount: Decimal) -> Transaction:
        # Build the entry before touching state so a failure here is a no-op.
        entry = Transaction(kind=kind, amount=amount)
        new_balance = exact(lambda: self._balance + entry.signed_amount)
        self._history.append(entry)
        self._balance = new_balance
        return entry
