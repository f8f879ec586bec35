"""Account id assignment."""

import itertools
import threading

from bank_ledger.core.config import Settings


class AccountIdGenerator:
    """Thread-safe monotonic source of positive account ids."""

    def __init__(self, start: int = 1) -> None:
        if start <= 0:
            msg = f"First account id must be positive, got {start}"
            raise ValueError(msg)
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Return the next unused id."""
        with self._lock:
            return next(self._counter)


_default: AccountIdGenerator | None = None
_default_lock = threading.Lock()


def default_id_generator() -> AccountIdGenerator:
    """Get or create the process-wide id generator."""
    global _default  # noqa: PLW0603
    with _default_lock:
        if _default is None:
            _default = AccountIdGenerator(Settings().first_account_id)
        return _default
