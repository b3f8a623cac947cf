"""Shared pytest fixtures for account ledger tests."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from account_ledger.application import LedgerService
from account_ledger.infrastructure.repositories import AccountRepository


class FrozenClock:
    """Clock returning a fixed instant until advanced."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


@pytest.fixture
def clock() -> FrozenClock:
    """Create a clock pinned to a known UTC instant."""
    return FrozenClock(datetime(2024, 1, 15, 10, 30, tzinfo=UTC))


@pytest.fixture
def repository() -> AccountRepository:
    """Create an empty account repository."""
    return AccountRepository()


@pytest.fixture
def service(repository: AccountRepository, clock: FrozenClock) -> LedgerService:
    """Create a LedgerService over a fresh repository."""
    return LedgerService(repository=repository, clock=clock)


@pytest.fixture
def account_id(service: LedgerService) -> str:
    """Create an account with zero balance."""
    return service.create_account()


@pytest.fixture
def funded_account(service: LedgerService) -> Callable[[Decimal], str]:
    """Factory creating an account pre-funded with the given amount."""

    def _create(amount: Decimal) -> str:
        account_id = service.create_account()
        service.deposit(account_id, amount)
        return account_id

    return _create
