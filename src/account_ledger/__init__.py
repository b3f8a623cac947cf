"""In-memory account ledger with per-account locking."""

from account_ledger.application import LedgerService
from account_ledger.domain import (
    AccountNotFoundError,
    DomainError,
    InvalidAmountError,
    Operation,
    OverdraftError,
    Transaction,
)


__all__ = [
    "AccountNotFoundError",
    "DomainError",
    "InvalidAmountError",
    "LedgerService",
    "Operation",
    "OverdraftError",
    "Transaction",
]
