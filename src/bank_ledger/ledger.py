"""In-memory ledger of bank accounts."""

import threading
from collections.abc import Iterable

from loguru import logger

from bank_ledger.account import Account, AccountSnapshot
from bank_ledger.core.config import Settings
from bank_ledger.core.ids import AccountIdGenerator, default_id_generator
from bank_ledger.errors import (
    AccountNotFoundError,
    DuplicateAccountError,
    InvalidAmountError,
)


class Ledger:
    """Owns a set of accounts and dispatches deposits and withdrawals by id.

    Accounts are kept in insertion order and never removed. Lookup and
    mutation of an account happen under a single lock.

    Args:
        accounts: Accounts to seed the ledger with. They are copied in, the
            iterable itself is not retained.
        ids: Generator for accounts opened through this ledger.
        settings: Ledger settings. Read from the environment when omitted.

    Raises:
        DuplicateAccountError: If two seeded accounts share an id.
    """

    def __init__(
        self,
        accounts: Iterable[Account] | None = None,
        *,
        ids: AccountIdGenerator | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._accounts: dict[int, Account] = {}
        self._ids = ids or default_id_generator()
        self._settings = settings or Settings()
        self._lock = threading.RLock()
        for account in accounts or ():
            self.add_account(account)

    def open_new_bank_account(self, initial_balance: float) -> int:
        """Open an account with ``initial_balance`` and return its id.

        Ids already taken by seeded accounts are skipped.
        """
        with self._lock:
            account = Account(initial_balance, ids=self._ids)
            while account.id in self._accounts:
                account = Account(initial_balance, ids=self._ids)
            self._accounts[account.id] = account
        logger.debug("Opened account {} with balance {}", account.id, account.balance)
        return account.id

    def add_account(self, account: Account) -> None:
        """Seed the ledger with an already built account.

        Raises:
            DuplicateAccountError: If an account with the same id is held.
        """
        with self._lock:
            if account.id in self._accounts:
                raise DuplicateAccountError(account.id)
            self._accounts[account.id] = account

    def deposit(self, account_id: int, amount: float) -> None:
        """Deposit ``amount`` into the account with ``account_id``.

        Raises:
            AccountNotFoundError: If no account has this id.
            InvalidAmountError: If amount is negative.
        """
        with self._lock:
            self._find(account_id).deposit(amount)
        logger.debug("Deposited {} into account {}", amount, account_id)

    def withdraw(self, account_id: int, amount: float) -> None:
        """Withdraw ``amount`` from the account with ``account_id``.

        Negative amounts are only rejected when ``strict_withdrawals`` is set.

        Raises:
            AccountNotFoundError: If no account has this id.
            InvalidAmountError: If strict withdrawals are on and amount is
                negative.
        """
        with self._lock:
            account = self._find(account_id)
            if self._settings.strict_withdrawals and amount < 0:
                logger.warning(
                    "Rejected negative withdrawal of {} on account {}",
                    amount,
                    account_id,
                )
                raise InvalidAmountError(amount)
            account.withdraw(amount)
        logger.debug("Withdrew {} from account {}", amount, account_id)

    def get_account(self, account_id: int) -> AccountSnapshot:
        """Get a snapshot of the account with ``account_id``."""
        with self._lock:
            return self._find(account_id).snapshot()

    def balance_of(self, account_id: int) -> float:
        """Get the balance of the account with ``account_id``."""
        with self._lock:
            return self._find(account_id).balance

    def list_accounts(self) -> list[AccountSnapshot]:
        """Get snapshots of all accounts, in the order they were added."""
        with self._lock:
            return [account.snapshot() for account in self._accounts.values()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        with self._lock:
            return account_id in self._accounts

    def _find(self, account_id: int) -> Account:
        account = self._accounts.get(account_id)
        if account is None:
            logger.warning("No account found with id {}", account_id)
            raise AccountNotFoundError(account_id)
        return account
