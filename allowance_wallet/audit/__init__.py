"""Audit logging package."""

from allowance_wallet.audit.logger import AuditLogger

__all__ = ["AuditLogger"]
