"""
Receipt service errors.

Validation and not-found are expected, caller-facing conditions.
An identifier collision is an internal failure.
"""

from __future__ import annotations


class ReceiptServiceError(Exception):
    """Base class for receipt service failures."""


class ReceiptValidationError(ReceiptServiceError):
    """Raised when a receipt or line item breaks a format/structural rule."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


class ReceiptNotFoundError(ReceiptServiceError):
    """Raised when no score was stored under the requested identifier."""

    def __init__(self, receipt_id: str):
        self.receipt_id = receipt_id
        super().__init__(f"No receipt found for id {receipt_id!r}")


class IdentifierCollisionError(ReceiptServiceError):
    """Raised when the id generator keeps returning ids already in the store."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"Could not generate a unique receipt id after {attempts} attempts")
