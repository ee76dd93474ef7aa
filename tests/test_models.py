"""
Tests for the Account Ledger models

Test strategy:
1. Unit tests for individual components (models, account, ledger, parsing)
2. Service tests for the result-returning facade
3. No UI in tests; the Streamlit page only calls the service
"""

import pytest
from datetime import timezone
from decimal import Decimal

from pydantic import ValidationError

from account_ledger.models import (
    AccountSummary,
    ErrorCode,
    OperationResult,
    Transaction,
    TransactionKind,
)


class TestTransactionKind:
    """Tests for the transaction kind enum."""

    def test_every_kind_has_a_sign(self):
        """Test that no kind is missing from the sign mapping."""
        for kind in TransactionKind:
            assert kind.sign in (1, -1)

    def test_sign_values(self):
        """Test that only withdrawals reduce the balance."""
        assert TransactionKind.INITIAL.sign == 1
        assert TransactionKind.DEPOSIT.sign == 1
        assert TransactionKind.WITHDRAW.sign == -1

    def test_kind_values(self):
        """Test kind string values and labels."""
        assert TransactionKind("deposit") is TransactionKind.DEPOSIT
        assert TransactionKind.WITHDRAW.value == "withdraw"
        assert TransactionKind.INITIAL.label == "Initial"


class TestTransaction:
    """Tests for the Transaction model."""

    def test_transaction_creation(self):
        """Test Transaction model creation."""
        entry = Transaction(kind=TransactionKind.DEPOSIT, amount=Decimal("200.00"))
        assert entry.kind == TransactionKind.DEPOSIT
        assert entry.amount == Decimal("200.00")
        assert entry.timestamp.tzinfo == timezone.utc

    def test_transaction_rejects_negative_amount(self):
        """Test that negative amounts are rejected."""
        with pytest.raises(ValidationError):
            Transaction(kind=TransactionKind.DEPOSIT, amount=Decimal("-1"))

    def test_transaction_allows_zero_initial_amount(self):
        """Test that an account may open with nothing in it."""
        entry = Transaction(kind=TransactionKind.INITIAL, amount=Decimal("0"))
        assert entry.signed_amount == 0

    def test_transaction_is_immutable(self):
        """Test that a recorded transaction cannot be altered."""
        entry = Transaction(kind=TransactionKind.DEPOSIT, amount=Decimal("5"))
        with pytest.raises(ValidationError):
            entry.amount = Decimal("500")

    def test_signed_amount(self):
        """Test that withdrawals carry a negative balance effect."""
        deposit = Transaction(kind=TransactionKind.DEPOSIT, amount=Decimal("10"))
        withdraw = Transaction(kind=TransactionKind.WITHDRAW, amount=Decimal("4"))
        assert deposit.signed_amount == Decimal("10")
        assert withdraw.signed_amount == Decimal("-4")

    def test_str(self):
        """Test the human-readable form."""
        entry = Transaction(kind=TransactionKind.WITHDRAW, amount=Decimal("30.00"))
        assert str(entry) == "Withdraw: 30.00"


class TestResultModels:
    """Tests for AccountSummary and OperationResult."""

    def test_account_summary_requires_history(self):
        """Test that a summary always counts at least the initial entry."""
        with pytest.raises(ValidationError):
            AccountSummary(
                account_number=1,
                name="Alice",
                balance=Decimal("0"),
                transaction_count=0,
            )

    def test_failed_result(self):
        """Test a rejected operation result."""
        result = OperationResult(
            success=False,
            operation="withdraw",
            account_number=1001,
            error_code=ErrorCode.INSUFFICIENT_FUNDS,
            error_message="Insufficient funds",
        )
        assert result.failed is True
        assert result.balance is None
        assert result.error_code.value == "insufficient_funds"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
