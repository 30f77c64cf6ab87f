"""
Storage Services Package

Abstract audit storage interface plus the in-memory implementation.
"""

from allowance_wallet.services.storage.interface import (
    AuditStorageInterface,
    StorageError,
)
from allowance_wallet.services.storage.memory import InMemoryAuditStorage

__all__ = [
    # Interfaces
    "AuditStorageInterface",
    # Exceptions
    "StorageError",
    # In-memory implementation
    "InMemoryAuditStorage",
]
