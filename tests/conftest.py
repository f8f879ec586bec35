import sys
from collections.abc import Iterator

import pytest
from loguru import logger

from bank_ledger.core.config import Settings
from bank_ledger.core.ids import AccountIdGenerator
from bank_ledger.ledger import Ledger


@pytest.fixture
def ids() -> AccountIdGenerator:
    return AccountIdGenerator()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def ledger(ids: AccountIdGenerator, settings: Settings) -> Ledger:
    return Ledger(ids=ids, settings=settings)


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    messages: list[str] = []
    sink_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="DEBUG"
    )
    yield messages
    logger.remove(sink_id)


@pytest.fixture(autouse=True)
def restore_log_sinks() -> Iterator[None]:
    yield
    logger.remove()
    _ = logger.add(sys.stderr)
