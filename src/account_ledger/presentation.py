from collections.abc import Iterable

from account_ledger.domain.models import Transaction


def format_transaction(transaction: Transaction) -> str:
    """Render one history line, e.g. ``2024-01-01T10:00:00+00:00: -1500, balance : 500``."""
    return f"{transaction.timestamp.isoformat()}: {transaction.signed_amount}, balance : {transaction.balance}"


def format_history(transactions: Iterable[Transaction]) -> list[str]:
    return [format_transaction(transaction) for transaction in transactions]
