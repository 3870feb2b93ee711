"""
Payment service for recording and undoing settlement payments.
"""
import logging
import uuid
from decimal import Decimal
from typing import List, Optional

from tripsettle.core.constants import normalize_currency
from tripsettle.core.exceptions import PaymentNotFoundError, PaymentValidationError
from tripsettle.schemas.settlement import Payment, SettlementTransfer
from tripsettle.services.settlement_service import round_amount, to_decimal

logger = logging.getLogger(__name__)


def create_payment(
    from_participant_id: str,
    to_participant_id: str,
    amount: Decimal,
    currency: str,
    payment_id: Optional[str] = None,
) -> Payment:
    """
    Record that one participant paid another.
    Amount is stored rounded and the currency code upper-cased.
    """
    amount = to_decimal(amount)
    if amount <= 0:
        logger.warning(f"Rejected payment with non-positive amount {amount}")
        raise PaymentValidationError("Amount must be greater than 0")
    if from_participant_id == to_participant_id:
        logger.warning(f"Rejected payment from {from_participant_id} to themselves")
        raise PaymentValidationError("A participant cannot pay themselves")
    try:
        currency = normalize_currency(currency)
    except ValueError as e:
        logger.warning(f"Rejected payment with currency {currency!r}")
        raise PaymentValidationError(str(e)) from e

    return Payment(
        id=payment_id or uuid.uuid4().hex,
        from_participant_id=from_participant_id,
        to_participant_id=to_participant_id,
        amount=round_amount(amount),
        currency=currency,
    )


def payment_from_transfer(transfer: SettlementTransfer, payment_id: Optional[str] = None) -> Payment:
    """Mark a suggested transfer as paid."""
    return create_payment(
        transfer.from_id,
        transfer.to_id,
        transfer.amount,
        transfer.currency,
        payment_id=payment_id,
    )


def undo_payment(payments: List[Payment], payment_id: str) -> List[Payment]:
    """Return the payment list without the given payment."""
    remaining = [payment for payment in payments if payment.id != payment_id]
    if len(remaining) == len(payments):
        raise PaymentNotFoundError(payment_id)
    logger.info(f"Undid payment {payment_id}")
    return remaining
