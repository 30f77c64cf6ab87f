"""Shared fixtures for wallet tests."""

from datetime import datetime

import pytest

from allowance_wallet import Account
from allowance_wallet.audit import AuditLogger
from allowance_wallet.config import get_settings
from allowance_wallet.services.storage import InMemoryAuditStorage


FIXED_NOW = datetime(2025, 1, 6, 9, 30, 15, 123456)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; reload them around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def clock(fixed_now):
    return lambda: fixed_now


@pytest.fixture
def audit_storage():
    return InMemoryAuditStorage()


@pytest.fixture
def account(clock, audit_storage):
    """Alice's empty account with a fixed clock and an in-memory audit sink."""
    return Account(
        "Alice",
        "alice@example.com",
        audit_logger=AuditLogger(storage=audit_storage),
        clock=clock,
    )
