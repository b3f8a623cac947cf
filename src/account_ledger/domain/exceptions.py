from decimal import Decimal


class DomainError(Exception):
    """Base exception for domain errors."""


class AccountNotFoundError(DomainError):
    """Raised when an account cannot be found."""

    def __init__(self, account_id: str) -> None:
        self.account_id = account_id
        super().__init__(f"Account with id {account_id} not found.")


class OverdraftError(DomainError):
    """Raised when a withdrawal would take the balance below the overdraft floor."""

    def __init__(self, balance: Decimal) -> None:
        self.balance = balance
        super().__init__(
            f"Cannot execute the transaction because the new balance {balance} exceeds the overdraft."
        )


class InvalidAmountError(DomainError):
    """Raised when an amount cannot be represented as an exact decimal."""

    def __init__(self, amount: object, reason: str) -> None:
        self.amount = amount
        self.reason = reason
        super().__init__(f"Invalid amount {amount!r}: {reason}")
