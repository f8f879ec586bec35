"""Console entry point for the bank ledger.

Opens a single account on an empty ledger and deposits into it, logging
the start and end of the run.
"""

from loguru import logger

from bank_ledger.core.config import Settings
from bank_ledger.core.log import configure_logging
from bank_ledger.ledger import Ledger


def main() -> None:
    """Run the ledger demo."""
    settings = Settings()
    configure_logging(settings.log_level)
    logger.info("App started")
    ledger = Ledger(settings=settings)
    account_id = ledger.open_new_bank_account(10)
    ledger.deposit(account_id, 20)
    logger.info("Account {} balance: {}", account_id, ledger.balance_of(account_id))
    logger.info("App terminated")


if __name__ == "__main__":
    main()
