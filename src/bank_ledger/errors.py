"""Errors raised by the ledger."""


class LedgerError(Exception):
    """Base class for ledger errors."""


class AccountNotFoundError(LedgerError, LookupError):
    """No account with the requested id is held by the ledger."""

    def __init__(self, account_id: int) -> None:
        self.account_id = account_id
        super().__init__(f"No account found with id: {account_id}")


class InvalidAmountError(LedgerError, ValueError):
    """A negative amount was given to an operation that requires otherwise."""

    def __init__(self, amount: float) -> None:
        self.amount = float(amount)
        super().__init__(f"Negative amount: {self.amount}")


class DuplicateAccountError(LedgerError, ValueError):
    """An account with the same id is already held by the ledger."""

    def __init__(self, account_id: int) -> None:
        self.account_id = account_id
        super().__init__(f"Account with id {account_id} already exists")
