"""
Account - the wallet of one account holder.

Holds the balance, the configured weekly allowance and the transaction
history, and enforces the rules for every balance-affecting operation:
- deposits and withdrawals must be positive
- a withdrawal can never take the balance below zero
- the weekly allowance can be zero but never negative

Every check runs before any state is written, so a rejected call leaves
the account exactly as it was and appends nothing to the history.

The account does not schedule anything. receive_weekly_allowance() pays out
whenever it is called; deciding when a week has passed is the caller's job.

Not thread-safe: callers sharing an account across threads must serialize
access themselves.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Optional
from uuid import UUID, uuid4

from allowance_wallet.audit import AuditLogger
from allowance_wallet.config import get_settings
from allowance_wallet.exceptions import (
    InsufficientFundsError,
    NegativeAllowanceError,
    NonPositiveAmountError,
    WalletError,
)
from allowance_wallet.models.audit import AuditEvent, AuditEventBuilder
from allowance_wallet.models.transaction import (
    Transaction,
    TransactionType,
    coerce_amount,
)
from allowance_wallet.money import add_amounts, subtract_amounts

ZERO = Decimal("0.00")


class Account:
    """
    One person's wallet.

    Usage:
        account = Account("Alice", "alice@example.com")
        account.deposit(Decimal("50.00"))
        account.set_weekly_allowance(Decimal("10.00"))
        account.receive_weekly_allowance()
    """

    def __init__(
        self,
        name: str,
        email: str,
        *,
        audit_logger: Optional[AuditLogger] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Open an empty account.

        Args:
            name: Display name of the account holder (not validated)
            email: Contact address (not validated)
            audit_logger: Where audit events go. Defaults to a local-only
                         AuditLogger, or none if auditing is disabled.
            clock: Returns the current local time; defaults to datetime.now
        """
        self._id = uuid4()
        self._name = name
        self._email = email
        self._balance = ZERO
        self._weekly_allowance = ZERO
        self._transaction_history: list[Transaction] = []

        if audit_logger is None and get_settings().audit_enabled:
            audit_logger = AuditLogger()
        self._audit = audit_logger
        self._clock = clock or datetime.now

    def __repr__(self) -> str:
        return (
            f"Account(name={self._name!r}, email={self._email!r}, "
            f"balance={self._balance})"
        )

    # =========================================================================
    # READ ACCESSORS
    # =========================================================================

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def weekly_allowance(self) -> Decimal:
        return self._weekly_allowance

    @property
    def transaction_history(self) -> tuple[Transaction, ...]:
        """Snapshot of the history, oldest first."""
        return tuple(self._transaction_history)

    # =========================================================================
    # BALANCE OPERATIONS
    # =========================================================================

    def deposit(self, amount: Any) -> None:
        """
        Add money to the account.

        Raises:
            NonPositiveAmountError: if amount <= 0
            InvalidAmountError: if amount is not a finite number
        """
        try:
            value = coerce_amount(amount)
            if value <= 0:
                raise NonPositiveAmountError("deposit", value)
        except WalletError as e:
            self._reject("deposit", e)
            raise

        balance = add_amounts(self._balance, value)
        transaction = self._new_transaction(TransactionType.DEPOSIT, value)
        event = AuditEventBuilder.deposit_recorded(self._id, transaction, balance)
        self._record_transaction(transaction, balance)
        self._emit(event)

    def withdraw(self, amount: Any) -> None:
        """
        Take money out of the account.

        Raises:
            NonPositiveAmountError: if amount <= 0
            InsufficientFundsError: if amount exceeds the current balance
            InvalidAmountError: if amount is not a finite number
        """
        try:
            value = coerce_amount(amount)
            if value <= 0:
                raise NonPositiveAmountError("withdrawal", value)
            if value > self._balance:
                raise InsufficientFundsError(value, self._balance)
        except WalletError as e:
            self._reject("withdrawal", e)
            raise

        balance = subtract_amounts(self._balance, value)
        transaction = self._new_transaction(TransactionType.WITHDRAWAL, value)
        event = AuditEventBuilder.withdrawal_recorded(self._id, transaction, balance)
        self._record_transaction(transaction, balance)
        self._emit(event)

    # =========================================================================
    # WEEKLY ALLOWANCE
    # =========================================================================

    def set_weekly_allowance(self, amount: Any) -> None:
        """
        Configure the weekly allowance. Zero is allowed.

        Has no effect on the balance and adds nothing to the history.

        Raises:
            NegativeAllowanceError: if amount < 0
            InvalidAmountError: if amount is not a finite number
        """
        try:
            value = coerce_amount(amount)
            if value < 0:
                raise NegativeAllowanceError(value)
        except WalletError as e:
            self._reject("set_weekly_allowance", e)
            raise

        # -0 passes the sign check; store it as 0
        if value.is_zero():
            value = value.copy_abs()

        event = AuditEventBuilder.allowance_configured(self._id, self._weekly_allowance, value)
        self._weekly_allowance = value
        self._emit(event)

    def receive_weekly_allowance(self) -> None:
        """
        Pay the configured allowance into the balance.

        Always succeeds and always records an allowance transaction, even
        when the allowance is zero. Calling it several times in a row pays
        the allowance several times.
        """
        value = self._weekly_allowance
        balance = add_amounts(self._balance, value)
        transaction = self._new_transaction(TransactionType.ALLOWANCE, value)
        event = AuditEventBuilder.allowance_received(self._id, transaction, balance)
        self._record_transaction(transaction, balance)
        self._emit(event)

    # =========================================================================
    # INTERNALS
    # =========================================================================
    # Operations build the new balance, the transaction and the audit event
    # first; _record_transaction is the only write and cannot fail.

    def _new_transaction(self, type_: TransactionType, amount: Decimal) -> Transaction:
        return Transaction(type=type_, amount=amount, timestamp=self._clock())

    def _record_transaction(self, transaction: Transaction, balance: Decimal) -> None:
        self._balance = balance
        self._transaction_history.append(transaction)

    def _reject(self, operation: str, error: WalletError) -> None:
        self._emit(AuditEventBuilder.operation_rejected(self._id, operation, error))

    def _emit(self, event: AuditEvent) -> None:
        if self._audit is not None:
            self._audit.log(event)
