"""A single balance-holding bank account."""

from loguru import logger
from pydantic import BaseModel, ConfigDict

from bank_ledger.core.ids import AccountIdGenerator, default_id_generator
from bank_ledger.errors import InvalidAmountError


class AccountSnapshot(BaseModel):
    """Read-only view of an account."""

    model_config = ConfigDict(frozen=True)

    id: int
    balance: float


class Account:
    """Bank account with an automatically assigned id.

    Args:
        initial_balance: Starting balance. It is not validated.
        ids: Generator the id is drawn from. Defaults to the process-wide one.
    """

    def __init__(
        self,
        initial_balance: float = 0.0,
        *,
        ids: AccountIdGenerator | None = None,
    ) -> None:
        self._id = (ids or default_id_generator()).next_id()
        self._balance = float(initial_balance)

    @property
    def id(self) -> int:
        return self._id

    @property
    def balance(self) -> float:
        return self._balance

    @balance.setter
    def balance(self, value: float) -> None:
        self._balance = float(value)

    def deposit(self, amount: float) -> None:
        """Add ``amount`` to the balance.

        Raises:
            InvalidAmountError: If amount is negative. The balance is unchanged.
        """
        if amount < 0:
            logger.warning(
                "Rejected negative deposit of {} on account {}", amount, self._id
            )
            raise InvalidAmountError(amount)
        self._balance += float(amount)

    def withdraw(self, amount: float) -> None:
        """Subtract ``amount`` from the balance, without validation."""
        self._balance -= float(amount)

    def snapshot(self) -> AccountSnapshot:
        return AccountSnapshot(id=self._id, balance=self._balance)

    def __repr__(self) -> str:
        return f"Account(id={self._id}, balance={self._balance})"
