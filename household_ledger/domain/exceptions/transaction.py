"""Transaction-related domain exceptions."""

from .base import DomainException


class InvalidTransactionException(DomainException):
    """
    Raised when a transaction violates a business rule.

    ``reason`` names the rule that failed so callers can tell them apart
    without parsing the message.
    """

    def __init__(self, message: str, reason: str = "invalid"):
        super().__init__(
            message=message,
            code="INVALID_TRANSACTION",
        )
        self.reason = reason


class TransactionNotFoundException(DomainException):
    """Raised when a transaction cannot be found."""

    def __init__(self, transaction_id: int):
        super().__init__(
            message=f"Transaction not found: {transaction_id}",
            code="TRANSACTION_NOT_FOUND",
        )
        self.transaction_id = transaction_id
