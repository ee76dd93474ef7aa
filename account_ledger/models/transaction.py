"""
Transaction Models for the Account Ledger

A transaction is an immutable record of one balance-affecting event.
Accounts create them; callers only ever read them.

DESIGN DECISION: Every transaction kind maps to a balance sign, and that
mapping is the single source of truth for both applying and reversing a
transaction. A kind without a sign raises instead of being silently ignored.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TransactionKind(str, Enum):
    """
    Kinds of balance-affecting events.

    INITIAL is recorded once, when the account is opened, and can never
    be undone.
    """
    INITIAL = "initial"
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"

    @property
    def sign(self) -> int:
        """+1 if the kind adds to the balance, -1 if it takes from it."""
        try:
            return _BALANCE_SIGNS[self]
        except KeyError:
            raise NotImplementedError(
                f"No balance sign defined for transaction kind {self.value!r}"
            ) from None

    @property
    def label(self) -> str:
        return self.value.capitalize()


_BALANCE_SIGNS: dict[TransactionKind, int] = {
    TransactionKind.INITIAL: 1,
    TransactionKind.DEPOSIT: 1,
    TransactionKind.WITHDRAW: -1,
}


class Transaction(BaseModel):
    """
    One recorded balance-affecting event.

    Amounts are always stored as non-negative values; the direction comes
    from the kind (see `signed_amount`).
    """
    model_config = ConfigDict(frozen=True)

    kind: TransactionKind = Field(
        ...,
        description="What kind of event this was"
    )
    amount: Decimal = Field(
        ...,
        ge=0,
        description="Amount moved, never negative"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event was recorded (UTC, informational only)"
    )

    @property
    def signed_amount(self) -> Decimal:
        """Effect of this transaction on the balance."""
        return self.amount * self.kind.sign

    def __str__(self) -> str:
        return f"{self.kind.label}: {self.amount}"
