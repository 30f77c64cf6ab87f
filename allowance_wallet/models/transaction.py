"""
Transaction Models for Allowance Wallet

A Transaction is the immutable record of one balance-affecting event.
Transactions are only ever created by the Account; once appended to the
history they are never modified or removed.

DESIGN DECISION: Amounts are Decimal, never float.
Floats passed in by callers are converted through str() so that 15.5 is
recorded as Decimal("15.5") and not as its binary approximation.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from allowance_wallet.config import get_settings
from allowance_wallet.exceptions import InvalidAmountError
from allowance_wallet.money import quantize_amount


class TransactionType(str, Enum):
    """
    Kinds of balance-affecting events.

    The sign of a transaction is implied by its type; amounts are stored
    as the magnitude passed to the operation.
    """
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    ALLOWANCE = "allowance"


def coerce_amount(value: Any) -> Decimal:
    """
    Normalize a caller-supplied amount to Decimal.

    Accepts Decimal, int, float and numeric strings. No rounding is applied.

    Raises:
        InvalidAmountError: for booleans, non-numeric input, NaN and infinities
    """
    if isinstance(value, bool):
        raise InvalidAmountError(value)
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, (float, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidAmountError(value) from None
    else:
        raise InvalidAmountError(value)

    if not amount.is_finite():
        raise InvalidAmountError(value)
    return amount


class Transaction(BaseModel):
    """
    One entry of an account's transaction history.

    Frozen: attempts to assign to a field raise a ValidationError.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique transaction identifier"
    )
    type: TransactionType = Field(
        ...,
        description="Kind of event"
    )
    amount: Decimal = Field(
        ...,
        ge=0,
        description="Magnitude applied to the balance"
    )
    timestamp: datetime = Field(
        ...,
        description="Local wall-clock time the transaction was recorded"
    )

    @field_validator('timestamp')
    @classmethod
    def truncate_to_seconds(cls, v: datetime) -> datetime:
        """History timestamps carry whole-second precision."""
        return v.replace(microsecond=0)

    def formatted_timestamp(self, fmt: Optional[str] = None) -> str:
        """Sortable string form of the timestamp."""
        return self.timestamp.strftime(fmt or get_settings().timestamp_format)

    def to_record(self) -> dict[str, str]:
        """
        Convert to a plain record for presentation or persistence layers.

        Returns: {"type": ..., "amount": ..., "timestamp": ...}
        """
        places = get_settings().display_decimal_places
        return {
            "type": self.type.value,
            "amount": str(quantize_amount(self.amount, places)),
            "timestamp": self.formatted_timestamp(),
        }

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "transaction_id": str(self.id),
            "transaction_type": self.type.value,
            "amount": str(self.amount),
            "timestamp": self.timestamp.isoformat(),
        }
