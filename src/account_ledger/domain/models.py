import threading
from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal, Inexact, InvalidOperation
from enum import Enum

from ulid import ULID

from account_ledger.domain.exceptions import InvalidAmountError


ZERO = Decimal("0")

# Balances have no size or precision limit, so arithmetic must never round
EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, traps=[Inexact, InvalidOperation])


class Operation(Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"


def to_amount(value: Decimal | int | str) -> Decimal:
    """
    Convert caller input to an exact Decimal.

    Floats are refused because they already carry binary rounding error.
    The sign is left untouched, callers decide what a negative value means.
    """
    if isinstance(value, bool | float):
        raise InvalidAmountError(value, "use Decimal, int or str for exact amounts")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int | str):
        try:
            amount = Decimal(value)
        except InvalidOperation as e:
            raise InvalidAmountError(value, "not a decimal number") from e
    else:
        raise InvalidAmountError(value, f"unsupported type {type(value).__name__}")

    if not amount.is_finite():
        raise InvalidAmountError(value, "amount must be finite")
    return amount


def magnitude(value: Decimal | int | str) -> Decimal:
    """Exact absolute value of caller input; the sign is discarded, never rejected."""
    return EXACT.abs(to_amount(value))


@dataclass(frozen=True)
class Transaction:
    id: str
    operation: Operation
    timestamp: datetime
    amount: Decimal
    balance: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Transaction amount cannot be negative")

    @property
    def signed_amount(self) -> Decimal:
        if self.operation is Operation.WITHDRAWAL:
            return EXACT.minus(self.amount)
        return self.amount

    @classmethod
    def create(
        cls,
        operation: Operation,
        amount: Decimal,
        balance: Decimal,
        timestamp: datetime,
    ) -> "Transaction":
        return cls(
            id=str(ULID()),
            operation=operation,
            timestamp=timestamp,
            amount=amount,
            balance=balance,
        )


@dataclass
class Account:
    id: str
    balance: Decimal = ZERO
    transactions: list[Transaction] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @classmethod
    def create(cls) -> "Account":
        return cls(id=str(ULID()))

    def record(self, transaction: Transaction) -> None:
        """Apply a committed transaction. Caller must hold ``lock``."""
        self.balance = transaction.balance
        self.transactions.append(transaction)
