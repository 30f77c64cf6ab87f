"""Configuration package."""

from allowance_wallet.config.settings import WalletSettings, get_settings

__all__ = [
    "WalletSettings",
    "get_settings",
]
