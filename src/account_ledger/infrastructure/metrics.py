import time
from collections.abc import Callable
from functools import wraps

from prometheus_client import Counter, Gauge, Histogram


LEDGER_OPERATIONS_TOTAL = Counter(
    "ledger_operations_total",
    "Total number of ledger operations",
    ["operation", "status"],
)

ACCOUNTS_CREATED_TOTAL = Counter(
    "ledger_accounts_created_total",
    "Total number of accounts created",
)

ACCOUNTS_ACTIVE = Gauge(
    "ledger_accounts_active",
    "Number of accounts held in the store",
)

LEDGER_OPERATION_DURATION = Histogram(
    "ledger_operation_duration_seconds",
    "Ledger operation duration",
    ["operation"],
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)


def track_operation_duration[**P, R](
    operation: str,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                duration = time.perf_counter() - start
                LEDGER_OPERATION_DURATION.labels(operation=operation).observe(duration)

        return wrapper

    return decorator
