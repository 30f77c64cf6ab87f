"""
Abstract Audit Storage Interface

DESIGN DECISION: Audit events go through an abstract interface so the sink
can be swapped (in-memory for tests and embedding, a real store later)
without touching the account or the audit logger.

Account state itself is never persisted through this interface.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from allowance_wallet.models.audit import AuditEvent


class AuditStorageInterface(ABC):
    """
    Abstract interface for audit log storage.

    Audit logs are append-only.
    """

    @abstractmethod
    def append_event(self, event: AuditEvent) -> bool:
        """
        Append an audit event.

        Args:
            event: The audit event to store

        Returns:
            True if stored successfully

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    def get_events_for_entity(self, entity_id: UUID) -> list[AuditEvent]:
        """
        Get all audit events for a specific entity, oldest first.

        Args:
            entity_id: The entity's ID (e.g., account ID)
        """
        pass

    @abstractmethod
    def get_recent_events(self, limit: int = 100) -> list[AuditEvent]:
        """
        Get the most recent audit events, newest first.

        Args:
            limit: Maximum number of events
        """
        pass


class StorageError(Exception):
    """Base exception for storage errors."""
    pass
