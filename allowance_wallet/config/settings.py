"""
Configuration Management for Allowance Wallet

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Nothing in the wallet core reads the environment directly.
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from allowance_wallet.money import quantize_amount


class WalletSettings(BaseSettings):
    """
    Wallet settings.

    Loads configuration from WALLET_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="WALLET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Presentation of amounts
    currency_code: str = Field(
        default="EUR",
        min_length=3,
        max_length=3,
        description="ISO 4217 code shown next to formatted amounts"
    )
    display_decimal_places: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Decimal places used when rendering amounts"
    )

    # History records
    timestamp_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="strftime format for transaction timestamps (must sort lexically)"
    )

    # Auditing
    audit_enabled: bool = Field(
        default=True,
        description="Emit an audit event for every balance operation"
    )
    log_level: str = Field(
        default="INFO",
        description="Level for the wallet's structured logger"
    )

    @field_validator('currency_code')
    @classmethod
    def normalize_currency_code(cls, v: str) -> str:
        return v.upper()

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {allowed}")
        return v.upper()

    def format_amount(self, amount: Decimal) -> str:
        """Render an amount with the configured places, e.g. ``64.50 EUR``."""
        return f"{quantize_amount(amount, self.display_decimal_places)} {self.currency_code}"


@lru_cache()
def get_settings() -> WalletSettings:
    """
    Get wallet settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return WalletSettings()
