"""Ledger configuration settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Ledger configuration settings."""

    log_level: str = "INFO"
    first_account_id: int = Field(default=1, gt=0)

    # Deposits always reject negative amounts; withdrawals only when enabled.
    strict_withdrawals: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LEDGER_",
    )
