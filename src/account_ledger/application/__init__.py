"""Application layer - services and use cases."""

from account_ledger.application.services import LedgerService


__all__ = [
    "LedgerService",
]
