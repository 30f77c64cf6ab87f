"""
Data Models Package

Pydantic models for transactions and the audit trail.
"""

from allowance_wallet.models.transaction import (
    Transaction,
    TransactionType,
    coerce_amount,
)
from allowance_wallet.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Transaction models
    "Transaction",
    "TransactionType",
    "coerce_amount",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
