"""
Allowance Wallet - Source Package

A small personal ledger for one account holder: a balance, a configurable
weekly allowance and a chronological transaction history.

DESIGN PRINCIPLES:
1. Validate first, mutate second
2. Fail early, fail visibly
3. History is append-only
4. Every balance change is auditable
"""

from allowance_wallet.account import Account
from allowance_wallet.exceptions import (
    InsufficientFundsError,
    InvalidAmountError,
    NegativeAllowanceError,
    NonPositiveAmountError,
    WalletError,
)
from allowance_wallet.models.transaction import Transaction, TransactionType

__version__ = "1.0.0"
__author__ = "Allowance Wallet Team"

__all__ = [
    "Account",
    "InsufficientFundsError",
    "InvalidAmountError",
    "NegativeAllowanceError",
    "NonPositiveAmountError",
    "Transaction",
    "TransactionType",
    "WalletError",
]
