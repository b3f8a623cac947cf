"""Domain layer - business entities and rules."""

from account_ledger.domain.exceptions import (
    AccountNotFoundError,
    DomainError,
    InvalidAmountError,
    OverdraftError,
)
from account_ledger.domain.models import (
    EXACT,
    ZERO,
    Account,
    Operation,
    Transaction,
    magnitude,
    to_amount,
)


__all__ = [
    "EXACT",
    "ZERO",
    "Account",
    "AccountNotFoundError",
    "DomainError",
    "InvalidAmountError",
    "Operation",
    "OverdraftError",
    "Transaction",
    "magnitude",
    "to_amount",
]
