"""
Tests for LedgerService

The service must turn every expected failure into an OperationResult
and leave the account untouched.
"""

from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from account_ledger.config import Settings
from account_ledger.core import Ledger
from account_ledger.models import ErrorCode, TransactionKind
from account_ledger.service import LedgerService, create_service


@pytest.fixture
def service() -> LedgerService:
    service = LedgerService(Ledger())
    service.open_account(1001, "Alice", Decimal("500.00"))
    return service


class TestOpenAccount:
    """Tests for opening accounts through the service."""

    def test_open_account(self):
        """Test a successful open."""
        service = LedgerService()
        result = service.open_account(1, "Alice", Decimal("5"))
        assert result.success is True
        assert result.balance == Decimal("5")
        assert result.transaction.kind == TransactionKind.INITIAL

    def test_duplicate(self, service):
        """Test that a duplicate number becomes a result value."""
        result = service.open_account(1001, "Bob", Decimal("1"))
        assert result.success is False
        assert result.error_code == ErrorCode.DUPLICATE_ACCOUNT
        assert service.get_account(1001).name == "Alice"

    @pytest.mark.parametrize("name,deposit", [("", 100), ("Bob", -5)])
    def test_invalid_arguments(self, name, deposit):
        """Test that invalid creations are reported, not raised."""
        service = LedgerService()
        result = service.open_account(2002, name, deposit)
        assert result.error_code == ErrorCode.INVALID_ARGUMENT
        assert service.list_accounts() == []

    @pytest.mark.parametrize("number", [1001.0, True, [1]])
    def test_non_integer_number(self, service, number):
        """Test that a non-integer number is invalid, not a duplicate or a crash."""
        result = service.open_account(number, "Bob", Decimal("1"))
        assert result.success is False
        assert result.error_code == ErrorCode.INVALID_ARGUMENT
        assert len(service.list_accounts()) == 1


class TestMutations:
    """Tests for deposit, withdraw and undo through the service."""

    def test_deposit(self, service):
        """Test a successful deposit result."""
        result = service.deposit(1001, Decimal("200.00"))
        assert result.success is True
        assert result.balance == Decimal("700.00")
        assert result.transaction.kind == TransactionKind.DEPOSIT
        assert result.transaction.amount == Decimal("200.00")

    def test_insufficient_funds(self, service):
        """Test that overdrawing is a result, and the balance is unchanged."""
        result = service.withdraw(1001, Decimal("900.00"))
        assert result.success is False
        assert result.error_code == ErrorCode.INSUFFICIENT_FUNDS
        assert result.balance is None
        assert service.get_account(1001).balance == Decimal("500.00")

    def test_invalid_amount(self, service):
        """Test that a non-positive amount is reported."""
        result = service.deposit(1001, 0)
        assert result.error_code == ErrorCode.INVALID_ARGUMENT

    def test_undo_reports_undone_transaction(self, service):
        """Test that undo returns the entry it reversed."""
        service.withdraw(1001, Decimal("300.00"))
        result = service.undo_last(1001)
        assert result.success is True
        assert result.balance == Decimal("500.00")
        assert result.transaction.kind == TransactionKind.WITHDRAW
        assert result.transaction.amount == Decimal("300.00")

    def test_nothing_to_undo(self, service):
        """Test that undoing the initial deposit is reported."""
        result = service.undo_last(1001)
        assert result.error_code == ErrorCode.NOTHING_TO_UNDO
        assert service.get_account(1001).transaction_count == 1

    @pytest.mark.parametrize("operation", ["deposit", "withdraw"])
    def test_missing_account(self, service, operation):
        """Test that operations on unknown accounts report not_found."""
        result = getattr(service, operation)(9999, Decimal("1"))
        assert result.error_code == ErrorCode.NOT_FOUND
        assert result.account_number == 9999

    def test_undo_missing_account(self, service):
        """Test undo on an unknown account."""
        assert service.undo_last(9999).error_code == ErrorCode.NOT_FOUND


class TestCloseAccount:
    """Tests for closing accounts."""

    def test_close_twice(self, service):
        """Test that the second close reports not_found."""
        assert service.close_account(1001).success is True
        second = service.close_account(1001)
        assert second.success is False
        assert second.error_code == ErrorCode.NOT_FOUND


class TestQueries:
    """Tests for read-only service calls."""

    def test_history(self, service):
        """Test the most-recent-first history."""
        service.deposit(1001, 5)
        history = service.history(1001)
        assert [entry.kind for entry in history] == [
            TransactionKind.DEPOSIT,
            TransactionKind.INITIAL,
        ]

    def test_history_missing_account(self, service):
        """Test history of an unknown account."""
        assert service.history(42) is None
        assert service.get_account(42) is None

    def test_statement(self, service):
        """Test that the statement pairs the summary with its history."""
        service.deposit(1001, 5)
        statement = service.statement(1001)
        assert statement.summary.balance == Decimal("505.00")
        assert statement.summary.transaction_count == len(statement.transactions)
        assert [entry.kind for entry in statement.transactions] == [
            TransactionKind.DEPOSIT,
            TransactionKind.INITIAL,
        ]

    def test_statement_missing_account(self, service):
        """Test the statement of an unknown account."""
        assert service.statement(42) is None

    def test_list_and_total(self, service):
        """Test listing and totals."""
        service.open_account(1002, "Bob", Decimal("20.00"))
        assert [s.account_number for s in service.list_accounts()] == [1001, 1002]
        assert service.total_balance() == Decimal("520.00")


class TestLogging:
    """Tests for operation logging."""

    def test_success_is_logged(self):
        """Test that a successful operation logs at info level."""
        service = LedgerService()
        with capture_logs() as logs:
            service.open_account(1, "Alice", 10)

        assert logs[0]["event"] == "operation_succeeded"
        assert logs[0]["log_level"] == "info"
        assert logs[0]["operation"] == "open_account"
        assert logs[0]["balance"] == "10"

    def test_rejection_is_logged(self):
        """Test that a rejected operation logs a warning with its code."""
        service = LedgerService()
        with capture_logs() as logs:
            service.withdraw(1, 5)

        assert logs[0]["event"] == "operation_rejected"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["error_code"] == "not_found"


class TestCreateService:
    """Tests for the service factory."""

    def test_creates_empty_service(self):
        """Test that each call gets its own empty ledger."""
        first = create_service(setup_logging=False)
        second = create_service(setup_logging=False)
        first.open_account(1, "Alice", 1)
        assert second.list_accounts() == []

    def test_uses_name_limit_from_settings(self, monkeypatch):
        """Test that LEDGER_MAX_NAME_LENGTH reaches the ledger."""
        monkeypatch.setenv("LEDGER_MAX_NAME_LENGTH", "3")
        service = create_service(settings=Settings(), setup_logging=False)
        assert service.open_account(1, "Alice", 1).error_code == ErrorCode.INVALID_ARGUMENT
        assert service.open_account(2, "Bob", 1).success is True
