"""Unit tests for metrics module."""

import time
from decimal import Decimal
from unittest.mock import patch

import pytest

from account_ledger.application import LedgerService
from account_ledger.domain.exceptions import OverdraftError
from account_ledger.infrastructure.metrics import (
    ACCOUNTS_ACTIVE,
    ACCOUNTS_CREATED_TOTAL,
    LEDGER_OPERATION_DURATION,
    LEDGER_OPERATIONS_TOTAL,
    track_operation_duration,
)


class TestMetricDefinitions:
    """Tests for metric definitions."""

    def test_ledger_operations_total_labels(self) -> None:
        """Test LEDGER_OPERATIONS_TOTAL has correct labels."""
        assert "operation" in LEDGER_OPERATIONS_TOTAL._labelnames
        assert "status" in LEDGER_OPERATIONS_TOTAL._labelnames

    def test_ledger_operation_duration_labels(self) -> None:
        """Test LEDGER_OPERATION_DURATION is labelled by operation."""
        assert LEDGER_OPERATION_DURATION._labelnames == ("operation",)

    def test_accounts_active_is_gauge(self) -> None:
        """Test ACCOUNTS_ACTIVE is a gauge."""
        assert hasattr(ACCOUNTS_ACTIVE, "set")

    def test_accounts_created_total_is_counter(self) -> None:
        """Test ACCOUNTS_CREATED_TOTAL is a counter."""
        assert hasattr(ACCOUNTS_CREATED_TOTAL, "inc")


class TestTrackOperationDuration:
    """Tests for track_operation_duration decorator."""

    def test_decorator_returns_result(self) -> None:
        """Test decorator returns function result."""

        @track_operation_duration("sample")
        def sample_function() -> str:
            return "result"

        assert sample_function() == "result"

    def test_decorator_observes_duration(self) -> None:
        """Test decorator observes duration under the operation label."""
        with patch("account_ledger.infrastructure.metrics.LEDGER_OPERATION_DURATION") as mock_histogram:

            @track_operation_duration("sample")
            def sample_function() -> str:
                time.sleep(0.01)
                return "result"

            sample_function()

            mock_histogram.labels.assert_called_once_with(operation="sample")
            observe = mock_histogram.labels.return_value.observe
            observe.assert_called_once()
            assert observe.call_args[0][0] >= 0.01

    def test_decorator_observes_duration_on_exception(self) -> None:
        """Test decorator observes duration even on exception."""
        with patch("account_ledger.infrastructure.metrics.LEDGER_OPERATION_DURATION") as mock_histogram:

            @track_operation_duration("sample")
            def failing_function() -> str:
                raise ValueError("Test error")

            with pytest.raises(ValueError, match="Test error"):
                failing_function()

            mock_histogram.labels.return_value.observe.assert_called_once()

    def test_decorator_preserves_function_name(self) -> None:
        """Test decorator preserves original function name."""

        @track_operation_duration("sample")
        def my_special_function() -> str:
            return "result"

        assert my_special_function.__name__ == "my_special_function"


class TestServiceMetrics:
    """Tests for metrics recorded by LedgerService."""

    def test_committed_deposit_is_counted(self, service: LedgerService, account_id: str) -> None:
        """A deposit increments the committed counter."""
        counter = LEDGER_OPERATIONS_TOTAL.labels(operation="deposit", status="committed")
        before = counter._value.get()

        service.deposit(account_id, Decimal("1"))

        assert counter._value.get() == before + 1

    def test_rejected_withdrawal_is_counted(self, service: LedgerService, account_id: str) -> None:
        """An overdraft increments the rejected counter."""
        counter = LEDGER_OPERATIONS_TOTAL.labels(operation="withdrawal", status="rejected")
        before = counter._value.get()

        with pytest.raises(OverdraftError):
            service.withdrawal(account_id, Decimal("1"))

        assert counter._value.get() == before + 1

    def test_create_account_increments_gauge(self, service: LedgerService) -> None:
        """Each created account adds one to the active gauge."""
        before = ACCOUNTS_ACTIVE._value.get()

        service.create_account()
        service.create_account()

        assert ACCOUNTS_ACTIVE._value.get() == before + 2

    def test_gauge_counts_accounts_across_ledgers(self) -> None:
        """Separate ledgers add to the gauge instead of overwriting it."""
        first = LedgerService()
        second = LedgerService()
        before = ACCOUNTS_ACTIVE._value.get()

        for _ in range(3):
            first.create_account()
        second.create_account()

        assert ACCOUNTS_ACTIVE._value.get() == before + 4
