import threading

from account_ledger.domain.models import Account


class AccountRepository:
    """
    In-memory account store keyed by account id.

    The store lock only guards the mapping itself. Balance changes are
    serialized by each account's own lock, so unrelated accounts never wait
    on each other.
    """

    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}
        self._lock = threading.Lock()

    def add(self, account: Account) -> None:
        with self._lock:
            self._accounts[account.id] = account

    def get(self, account_id: str) -> Account | None:
        with self._lock:
            return self._accounts.get(account_id)

    def ids(self) -> list[str]:
        with self._lock:
            return list(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        with self._lock:
            return account_id in self._accounts

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)
