"""
Tests for wallet configuration.
"""

from datetime import datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from allowance_wallet.config import WalletSettings, get_settings
from allowance_wallet.models import Transaction, TransactionType


class TestWalletSettings:
    """Tests for WalletSettings defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        for var in (
            "WALLET_CURRENCY_CODE",
            "WALLET_DISPLAY_DECIMAL_PLACES",
            "WALLET_TIMESTAMP_FORMAT",
            "WALLET_AUDIT_ENABLED",
            "WALLET_LOG_LEVEL",
        ):
            monkeypatch.delenv(var, raising=False)

        settings = WalletSettings(_env_file=None)

        assert settings.currency_code == "EUR"
        assert settings.display_decimal_places == 2
        assert settings.timestamp_format == "%Y-%m-%d %H:%M:%S"
        assert settings.audit_enabled is True
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("WALLET_CURRENCY_CODE", "usd")
        monkeypatch.setenv("WALLET_DISPLAY_DECIMAL_PLACES", "3")
        monkeypatch.setenv("WALLET_LOG_LEVEL", "debug")

        settings = get_settings()

        assert settings.currency_code == "USD"
        assert settings.display_decimal_places == 3
        assert settings.log_level == "DEBUG"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_invalid_log_level_is_rejected(self):
        with pytest.raises(ValidationError):
            WalletSettings(log_level="LOUD")

    def test_decimal_places_bounds(self):
        with pytest.raises(ValidationError):
            WalletSettings(display_decimal_places=-1)

    def test_format_amount(self):
        settings = WalletSettings(currency_code="chf", display_decimal_places=2)
        assert settings.format_amount(Decimal("5")) == "5.00 CHF"
        assert settings.format_amount(Decimal("64.5")) == "64.50 CHF"

    def test_format_large_amount(self):
        settings = WalletSettings(currency_code="EUR", display_decimal_places=2)
        assert settings.format_amount(Decimal("12345678901234567890123456789.5")) == (
            "12345678901234567890123456789.50 EUR"
        )

    def test_format_amount_without_decimals(self):
        settings = WalletSettings(currency_code="JPY", display_decimal_places=0)
        assert settings.format_amount(Decimal("1500")) == "1500 JPY"


class TestSettingsAffectRecords:
    """Settings flow through to transaction records."""

    def test_custom_timestamp_format(self, monkeypatch):
        monkeypatch.setenv("WALLET_TIMESTAMP_FORMAT", "%Y%m%dT%H%M%S")
        transaction = Transaction(
            type=TransactionType.ALLOWANCE,
            amount=Decimal("20"),
            timestamp=datetime(2025, 1, 6, 9, 30, 15),
        )
        assert transaction.to_record()["timestamp"] == "20250106T093015"

    def test_custom_display_places(self, monkeypatch):
        monkeypatch.setenv("WALLET_DISPLAY_DECIMAL_PLACES", "0")
        transaction = Transaction(
            type=TransactionType.DEPOSIT,
            amount=Decimal("20.00"),
            timestamp=datetime(2025, 1, 6, 9, 30, 15),
        )
        assert transaction.to_record()["amount"] == "20"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
