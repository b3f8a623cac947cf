from collections.abc import Callable
from datetime import UTC, datetime
from decimal import Decimal

import structlog

from account_ledger.domain.exceptions import AccountNotFoundError, OverdraftError
from account_ledger.domain.models import (
    EXACT,
    ZERO,
    Account,
    Operation,
    Transaction,
    magnitude,
)
from account_ledger.infrastructure.metrics import (
    ACCOUNTS_ACTIVE,
    ACCOUNTS_CREATED_TOTAL,
    LEDGER_OPERATIONS_TOTAL,
    track_operation_duration,
)
from account_ledger.infrastructure.repositories import AccountRepository


logger = structlog.get_logger()


def utc_now() -> datetime:
    return datetime.now(UTC)


class LedgerService:
    """
    Owns every account and applies deposits and withdrawals to them.

    Amounts are taken by absolute value: a deposit of -500 credits 500 and a
    withdrawal of -500 debits 500. Each mutation runs under the target
    account's lock, so concurrent calls on one account are serialized while
    calls on different accounts proceed independently.
    """

    def __init__(
        self,
        repository: AccountRepository | None = None,
        overdraft_floor: Decimal = ZERO,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if overdraft_floor < ZERO:
            raise ValueError(f"Overdraft floor cannot be negative: {overdraft_floor}")
        self.repository = repository if repository is not None else AccountRepository()
        self.overdraft_floor = overdraft_floor
        self._clock = clock

    def create_account(self) -> str:
        account = Account.create()
        self.repository.add(account)

        ACCOUNTS_CREATED_TOTAL.inc()
        ACCOUNTS_ACTIVE.inc()
        logger.info("account_created", account_id=account.id)
        return account.id

    @track_operation_duration("deposit")
    def deposit(self, account_id: str, amount: Decimal | int | str) -> Decimal:
        """Credit ``|amount|`` to the account and return the new balance."""
        account = self._get_account(account_id, "deposit")
        value = magnitude(amount)

        with account.lock:
            new_balance = EXACT.add(account.balance, value)
            transaction = Transaction.create(
                operation=Operation.DEPOSIT,
                amount=value,
                balance=new_balance,
                timestamp=self._clock(),
            )
            account.record(transaction)

        LEDGER_OPERATIONS_TOTAL.labels(operation="deposit", status="committed").inc()
        logger.info(
            "deposit_committed",
            account_id=account_id,
            transaction_id=transaction.id,
            amount=str(value),
            balance=str(new_balance),
        )
        return new_balance

    @track_operation_duration("withdrawal")
    def withdrawal(self, account_id: str, amount: Decimal | int | str) -> Decimal:
        """
        Debit ``|amount|`` from the account and return the new balance.

        Raises:
            AccountNotFoundError: the id was never issued by this ledger.
            OverdraftError: the balance would drop below the overdraft floor.
                The account is left exactly as it was.
        """
        account = self._get_account(account_id, "withdrawal")
        value = magnitude(amount)
        log = logger.bind(account_id=account_id, amount=str(value))

        with account.lock:
            candidate = EXACT.subtract(account.balance, value)
            if candidate < self.overdraft_floor:
                LEDGER_OPERATIONS_TOTAL.labels(operation="withdrawal", status="rejected").inc()
                log.warning(
                    "withdrawal_rejected",
                    reason="OVERDRAFT",
                    balance=str(account.balance),
                    candidate_balance=str(candidate),
                )
                raise OverdraftError(candidate)

            transaction = Transaction.create(
                operation=Operation.WITHDRAWAL,
                amount=value,
                balance=candidate,
                timestamp=self._clock(),
            )
            account.record(transaction)

        LEDGER_OPERATIONS_TOTAL.labels(operation="withdrawal", status="committed").inc()
        log.info("withdrawal_committed", transaction_id=transaction.id, balance=str(candidate))
        return candidate

    def history(self, account_id: str) -> tuple[Transaction, ...]:
        """Return the account's transactions in commit order."""
        account = self._get_account(account_id, "history")
        with account.lock:
            return tuple(account.transactions)

    def get_balance(self, account_id: str) -> Decimal:
        account = self._get_account(account_id, "balance")
        with account.lock:
            return account.balance

    def _get_account(self, account_id: str, operation: str) -> Account:
        account = self.repository.get(account_id)
        if account is None:
            LEDGER_OPERATIONS_TOTAL.labels(operation=operation, status="rejected").inc()
            logger.warning("account_not_found", account_id=account_id, operation=operation)
            raise AccountNotFoundError(account_id)
        return account
