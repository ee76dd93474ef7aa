"""
Ledger: the registry of accounts, keyed by account number.

The ledger only knows about identity and existence. Balances and
histories belong to the accounts themselves.

DESIGN DECISION: A Ledger is an ordinary object owned by its caller.
There is no module-level instance, so tests (or several UIs) can each
hold an independent ledger in the same process.
"""

import threading
from decimal import Decimal
from typing import Optional

from account_ledger.core.account import (
    MAX_NAME_LENGTH,
    Account,
    AmountLike,
    check_account_number,
)
from account_ledger.core.errors import AccountNotFoundError, DuplicateAccountError
from account_ledger.models import AccountSummary


class Ledger:
    """
    In-memory collection of accounts.

    Accounts are kept in creation order so listings are stable.
    The mapping is guarded by a re-entrant lock; each account guards
    its own state.
    """

    def __init__(self, max_name_length: int = MAX_NAME_LENGTH):
        self._accounts: dict[int, Account] = {}
        self._lock = threading.RLock()
        self._max_name_length = max_name_length

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)

    def __contains__(self, account_number: object) -> bool:
        with self._lock:
            return account_number in self._accounts

    def create_account(
        self,
        account_number: int,
        name: str,
        initial_deposit: AmountLike,
    ) -> Account:
        """
        Open a new account.

        Raises:
            DuplicateAccountError: the number is already taken (the existing
                account is left as it was)
            InvalidArgumentError: rejected by Account validation
        """
        # A float or bool would otherwise hash equal to an existing int key.
        check_account_number(account_number)
        with self._lock:
            if account_number in self._accounts:
                raise DuplicateAccountError(account_number)

            account = Account(
                account_number,
                name,
                initial_deposit,
                max_name_length=self._max_name_length,
            )
            self._accounts[account.account_number] = account
            return account

    def find(self, account_number: int) -> Optional[Account]:
        """Return the account, or None if there is no such account."""
        with self._lock:
            return self._accounts.get(account_number)

    def get(self, account_number: int) -> Account:
        """
        Like find(), for callers that treat absence as a failure.

        Raises:
            AccountNotFoundError: no such account
        """
        account = self.find(account_number)
        if account is None:
            raise AccountNotFoundError(account_number)
        return account

    def list_all(self) -> list[AccountSummary]:
        """Snapshots of every account, in creation order."""
        with self._lock:
            accounts = list(self._accounts.values())
        return [account.summary() for account in accounts]

    def delete(self, account_number: int) -> bool:
        """
        Remove an account and its history.

        Returns True if an account was removed, False if none existed.
        """
        with self._lock:
            return self._accounts.pop(account_number, None) is not None

    def total_balance(self) -> Decimal:
        """Sum of all account balances."""
        with self._lock:
            accounts = list(self._accounts.values())
        return sum((account.balance for account in accounts), Decimal(0))
