"""
Wallet Exceptions

Every rejected operation raises one of these before any state is written.
They all derive from WalletError, which is a ValueError, so callers that only
care that the argument was rejected can catch a single type.
"""

from decimal import Decimal
from typing import Any


class WalletError(ValueError):
    """Base class for rejected wallet operations."""

    def __init__(self, message: str, amount: Any):
        super().__init__(message)
        self.amount = amount


class InvalidAmountError(WalletError):
    """Amount is not a finite number."""

    def __init__(self, amount: Any):
        super().__init__(f"Amount must be a finite number, got {amount!r}", amount)


class NonPositiveAmountError(WalletError):
    """Deposit or withdrawal amount is zero or negative."""

    def __init__(self, operation: str, amount: Decimal):
        super().__init__(f"The {operation} amount must be positive, got {amount}", amount)
        self.operation = operation


class InsufficientFundsError(WalletError):
    """Withdrawal exceeds the current balance."""

    def __init__(self, amount: Decimal, balance: Decimal):
        super().__init__(
            f"Insufficient funds: cannot withdraw {amount} from a balance of {balance}",
            amount,
        )
        self.balance = balance


class NegativeAllowanceError(WalletError):
    """Weekly allowance is negative."""

    def __init__(self, amount: Decimal):
        super().__init__(f"The weekly allowance cannot be negative, got {amount}", amount)
