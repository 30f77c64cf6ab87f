"""In-memory audit storage."""

from uuid import UUID

from allowance_wallet.models.audit import AuditEvent
from allowance_wallet.services.storage.interface import AuditStorageInterface


class InMemoryAuditStorage(AuditStorageInterface):
    """List-backed audit sink. Lives as long as the process."""

    def __init__(self):
        self._events: list[AuditEvent] = []

    def __len__(self) -> int:
        return len(self._events)

    def append_event(self, event: AuditEvent) -> bool:
        self._events.append(event)
        return True

    def get_events_for_entity(self, entity_id: UUID) -> list[AuditEvent]:
        return [e for e in self._events if e.entity_id == entity_id]

    def get_recent_events(self, limit: int = 100) -> list[AuditEvent]:
        if limit <= 0:
            return []
        return list(reversed(self._events[-limit:]))
