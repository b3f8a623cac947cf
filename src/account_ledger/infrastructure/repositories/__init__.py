"""Repository implementations."""

from account_ledger.infrastructure.repositories.account import AccountRepository


__all__ = [
    "AccountRepository",
]
