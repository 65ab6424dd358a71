"""
Ledger Errors and Results

Domain-specific errors raised while validating a credit or debit, and the
structured result the ledger hands back to its callers instead of letting
those errors escape.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional

from .money import format_amount


class ErrorKind(Enum):
    """Reasons a credit or debit can be rejected"""
    INVALID_AMOUNT = "invalid_amount"          # Zero, negative or non-finite
    PRECISION_ERROR = "precision_error"        # More than two fractional digits
    LIMIT_EXCEEDED = "limit_exceeded"          # Credit would pass the maximum balance
    INSUFFICIENT_FUNDS = "insufficient_funds"  # Debit larger than the balance


class LedgerError(ValueError):
    """Base class for rejected ledger operations"""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidAmountError(LedgerError):
    kind = ErrorKind.INVALID_AMOUNT


class PrecisionError(LedgerError):
    kind = ErrorKind.PRECISION_ERROR


class LimitExceededError(LedgerError):
    kind = ErrorKind.LIMIT_EXCEEDED


class InsufficientFundsError(LedgerError):
    kind = ErrorKind.INSUFFICIENT_FUNDS


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of a credit or debit

    `balance` is the balance after the call, which for a rejected
    operation is the untouched balance from before it.
    """
    success: bool
    message: str
    balance: Decimal
    error: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, message: str, balance: Decimal) -> 'OperationResult':
        return cls(success=True, message=message, balance=balance)

    @classmethod
    def failed(cls, error: LedgerError, balance: Decimal) -> 'OperationResult':
        return cls(success=False, message=error.message, balance=balance, error=error.kind)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON responses"""
        return {
            "success": self.success,
            "message": self.message,
            "balance": format_amount(self.balance),
            "error": self.error.value if self.error else None
        }
