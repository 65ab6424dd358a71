"""
Balance Ledger Module

Holds the single account balance and the rules every credit and debit
must pass before the balance changes:

1. The amount must be positive.
2. The amount may have at most two fractional digits.
3. A credit may not push the balance above the maximum.
4. A debit may not exceed the balance (debiting all of it is allowed).

All arithmetic is Decimal; the balance never holds more than two
fractional digits, so repeated operations cannot drift.
"""

from decimal import Decimal
from typing import Optional
import threading

from .errors import (
    LedgerError, InvalidAmountError, PrecisionError, LimitExceededError,
    InsufficientFundsError, OperationResult
)
from .logging_config import get_logger, log_action
from .money import (
    AmountLike, DECIMAL_PLACES, to_decimal, has_valid_precision,
    quantize_cents, format_amount
)


MIN_BALANCE = Decimal('0.00')
MAX_BALANCE = Decimal('999999.99')
INITIAL_BALANCE = Decimal('1000.00')

PRECISION_MESSAGE = "Error: Amount must have at most 2 decimal places."
LIMIT_MESSAGE = "Error: Credit would exceed maximum balance of $999,999.99."
INSUFFICIENT_FUNDS_MESSAGE = "Insufficient funds for this debit."

logger = get_logger(__name__)


def balance_message(formatted_balance: str) -> str:
    return f"Current balance: {formatted_balance}"


class BalanceLedger:
    """
    In-memory ledger for one balance

    Validation and mutation of each credit/debit run under one lock, so a
    ledger shared between API requests never applies half an operation.
    """

    def __init__(self, initial_balance: Optional[AmountLike] = None):
        self._lock = threading.RLock()
        self._balance = self._checked_balance(
            INITIAL_BALANCE if initial_balance is None else initial_balance
        )
        logger.info("Ledger opened with balance %s", format_amount(self._balance))

    @property
    def balance(self) -> Decimal:
        """Current balance"""
        return self._balance

    @property
    def formatted_balance(self) -> str:
        """Current balance with exactly two fractional digits"""
        return format_amount(self._balance)

    def view(self) -> str:
        """Describe the current balance"""
        return balance_message(self.formatted_balance)

    def credit(self, amount: AmountLike) -> OperationResult:
        """
        Add money to the account

        Args:
            amount: Amount to add

        Returns:
            OperationResult with the new balance, or the reason for rejection

        Raises:
            TypeError: If amount is not a number or numeric string
            ValueError: If a string amount cannot be read as a number
        """
        value = to_decimal(amount)
        with self._lock:
            try:
                self._validate_amount(value, "Credit")
                # balance + value can overflow the Decimal context, so test the headroom
                if value > MAX_BALANCE - self._balance:
                    raise LimitExceededError(LIMIT_MESSAGE)
            except LedgerError as e:
                return self._rejected("credit", value, e)

            self._balance = quantize_cents(self._balance + value)
            return self._accepted("credit", value, "Amount credited. New balance: ")

    def debit(self, amount: AmountLike) -> OperationResult:
        """
        Subtract money from the account

        Args:
            amount: Amount to subtract; may equal the whole balance

        Returns:
            OperationResult with the new balance, or the reason for rejection
        """
        value = to_decimal(amount)
        with self._lock:
            try:
                self._validate_amount(value, "Debit")
                if value > self._balance:
                    raise InsufficientFundsError(INSUFFICIENT_FUNDS_MESSAGE)
            except LedgerError as e:
                return self._rejected("debit", value, e)

            self._balance = quantize_cents(self._balance - value)
            return self._accepted("debit", value, "Amount debited. New balance: ")

    def set_balance(self, amount: AmountLike) -> None:
        """
        Replace the balance outright (test setup and administrative resets)

        Raises:
            ValueError: If the amount is outside the allowed range or has
                more than two fractional digits
        """
        value = self._checked_balance(amount)
        with self._lock:
            self._balance = value
        log_action(logger, "info", "Balance set", action="set_balance",
                   extra={"balance": format_amount(value)})

    def _validate_amount(self, value: Decimal, operation: str) -> None:
        """Positive and at most two fractional digits"""
        if not value.is_finite() or value <= 0:
            raise InvalidAmountError(f"Error: {operation} amount must be positive.")
        if not has_valid_precision(value, DECIMAL_PLACES):
            raise PrecisionError(PRECISION_MESSAGE)

    def _checked_balance(self, amount: AmountLike) -> Decimal:
        value = to_decimal(amount)
        if not value.is_finite() or not MIN_BALANCE <= value <= MAX_BALANCE:
            raise ValueError(
                f"Balance must be between {format_amount(MIN_BALANCE)} "
                f"and {format_amount(MAX_BALANCE)}"
            )
        if not has_valid_precision(value, DECIMAL_PLACES):
            raise ValueError(PRECISION_MESSAGE)
        return quantize_cents(value)

    def _accepted(self, operation: str, value: Decimal, prefix: str) -> OperationResult:
        log_action(logger, "debug", f"{operation.capitalize()} applied", action=operation,
                   extra={"amount": str(value), "balance": self.formatted_balance})
        return OperationResult.ok(prefix + self.formatted_balance, self._balance)

    def _rejected(self, operation: str, value: Decimal, error: LedgerError) -> OperationResult:
        log_action(logger, "warning", f"{operation.capitalize()} rejected", action=operation,
                   extra={"amount": str(value), "error": error.kind.value})
        return OperationResult.failed(error, self._balance)
