"""
Audit Models for Allowance Wallet

Every balance operation on an account, successful or rejected, produces an
audit event. This provides:
1. Traceability of every balance change
2. A record of rejected attempts, which the history never shows
3. Debugging information when balances look wrong

DESIGN DECISION: Audit logs are append-only. We never delete or modify them.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from allowance_wallet.config import get_settings
from allowance_wallet.models.transaction import Transaction


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """Types of events we audit."""
    DEPOSIT_RECORDED = "deposit_recorded"
    WITHDRAWAL_RECORDED = "withdrawal_recorded"
    ALLOWANCE_CONFIGURED = "allowance_configured"
    ALLOWANCE_RECEIVED = "allowance_received"
    OPERATION_REJECTED = "operation_rejected"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of the audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'account')"
    )
    entity_id: Optional[UUID] = Field(
        default=None,
        description="ID of the entity this event relates to"
    )

    # Unbounded: descriptions embed amounts, which have no upper bound
    description: str = Field(
        ...,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (rejections only)
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": str(self.entity_id) if self.entity_id else None,
            "description": self.description,
            "details": self.details,
            "error_code": self.error_code,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.deposit_recorded(account_id, transaction, balance)
        event = AuditEventBuilder.operation_rejected(account_id, "withdraw", error)
    """

    @staticmethod
    def deposit_recorded(
        account_id: UUID,
        transaction: Transaction,
        balance: Decimal,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DEPOSIT_RECORDED,
            entity_type="account",
            entity_id=account_id,
            description=f"Deposit of {get_settings().format_amount(transaction.amount)}",
            details={
                **transaction.to_log_dict(),
                "balance": str(balance),
            },
        )

    @staticmethod
    def withdrawal_recorded(
        account_id: UUID,
        transaction: Transaction,
        balance: Decimal,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.WITHDRAWAL_RECORDED,
            entity_type="account",
            entity_id=account_id,
            description=f"Withdrawal of {get_settings().format_amount(transaction.amount)}",
            details={
                **transaction.to_log_dict(),
                "balance": str(balance),
            },
        )

    @staticmethod
    def allowance_configured(
        account_id: UUID,
        previous: Decimal,
        current: Decimal,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ALLOWANCE_CONFIGURED,
            entity_type="account",
            entity_id=account_id,
            description=f"Weekly allowance set to {get_settings().format_amount(current)}",
            details={
                "previous_allowance": str(previous),
                "weekly_allowance": str(current),
            },
        )

    @staticmethod
    def allowance_received(
        account_id: UUID,
        transaction: Transaction,
        balance: Decimal,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ALLOWANCE_RECEIVED,
            entity_type="account",
            entity_id=account_id,
            description=f"Weekly allowance of {get_settings().format_amount(transaction.amount)} received",
            details={
                **transaction.to_log_dict(),
                "balance": str(balance),
            },
        )

    @staticmethod
    def operation_rejected(
        account_id: UUID,
        operation: str,
        error: Exception,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.OPERATION_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="account",
            entity_id=account_id,
            description=f"{operation.capitalize()} rejected",
            error_code=type(error).__name__,
            error_message=str(error),
            details={
                "operation": operation,
                "amount": str(getattr(error, "amount", "")),
            },
        )
