"""Mini README: Centralised configuration for the groupledger engine.

Structure:
    * GroupLedgerSettings - Pydantic settings model describing runtime options.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Engine functions accept explicit overrides (for example a custom balance
    tolerance) and fall back to ``get_settings()`` otherwise. Values are read
    from ``GROUPLEDGER_*`` environment variables or a local ``.env`` file and
    validated once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GroupLedgerSettings(BaseSettings):
    """Runtime configuration for the ledger engine and its web adapter."""

    model_config = SettingsConfigDict(
        env_prefix="GROUPLEDGER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field(
        "INFO",
        description="Name of the root logging level (DEBUG, INFO, WARNING, ...).",
    )
    balance_tolerance: float = Field(
        0.01,
        ge=0,
        description="Largest allowed gap between total paid and total spent.",
    )
    currency_decimals: int = Field(
        2,
        ge=0,
        le=6,
        description="Decimal places used when rounding transfers and display balances.",
    )
    currency_symbol: str = Field(
        "$",
        description="Symbol prefixed to amounts in human readable summaries.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the web adapter to bind to.",
    )
    interface_port: int = Field(
        8000,
        ge=1,
        le=65535,
        description="Port the web adapter listens on.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        """Accept any casing but reject names the logging module does not know."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> GroupLedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return GroupLedgerSettings()
