"""
Errors raised by the data-entry helpers that feed the settlement engine.
"""


class SettlementInputError(ValueError):
    """Base class for rejected expense or payment input."""


class SplitValidationError(SettlementInputError):
    """Expense amount or shares failed validation."""


class PaymentValidationError(SettlementInputError):
    """Payment amount or parties failed validation."""


class PaymentNotFoundError(SettlementInputError):
    """Payment id not present in the supplied payment list."""

    def __init__(self, payment_id: str):
        super().__init__(f"Payment not found: {payment_id}")
        self.payment_id = payment_id
