"""
Expense service for splitting an expense into per-participant shares.
"""
import logging
import uuid
from decimal import Decimal
from typing import Dict, List, Optional

from tripsettle.core.config import settings
from tripsettle.core.constants import SplitType, normalize_currency
from tripsettle.core.exceptions import SplitValidationError
from tripsettle.schemas.settlement import Expense, ExpenseShare
from tripsettle.services.settlement_service import round_amount, to_decimal

logger = logging.getLogger(__name__)


def build_expense_shares(
    amount: Decimal,
    participant_ids: List[str],
    split_type: SplitType = SplitType.EQUAL,
    custom_amounts: Optional[Dict[str, Decimal]] = None,
) -> List[ExpenseShare]:
    """
    Split an expense amount among participants.

    EQUAL gives everyone amount / n. CUSTOM takes the given amounts, which
    must add up to the total within SPLIT_TOLERANCE; participants without a
    custom amount get 0. Shares are stored rounded to the minor unit.
    """
    amount = to_decimal(amount)
    split_type = SplitType(split_type)

    if not participant_ids:
        logger.warning("Rejected expense split with no participants")
        raise SplitValidationError("At least one participant must be included in the split")

    if amount <= 0:
        logger.warning(f"Rejected expense split with non-positive amount {amount}")
        raise SplitValidationError("Amount must be greater than 0")

    if split_type == SplitType.EQUAL:
        share = amount / len(participant_ids)
        per_person = {participant_id: share for participant_id in participant_ids}
    else:
        per_person = {
            participant_id: to_decimal(value)
            for participant_id, value in (custom_amounts or {}).items()
        }
        total = sum(per_person.values(), Decimal(0))
        if abs(total - amount) > settings.SPLIT_TOLERANCE:
            logger.warning(f"Rejected custom split: shares {total} vs total {amount}")
            raise SplitValidationError(
                f"Custom amounts ({total}) do not add up to the total ({amount})"
            )

    return [
        ExpenseShare(
            participant_id=participant_id,
            amount=round_amount(per_person.get(participant_id, Decimal(0))),
        )
        for participant_id in participant_ids
    ]


def create_expense(
    amount: Decimal,
    currency: str,
    paid_by_participant_id: str,
    participant_ids: List[str],
    split_type: SplitType = SplitType.EQUAL,
    custom_amounts: Optional[Dict[str, Decimal]] = None,
    expense_id: Optional[str] = None,
) -> Expense:
    """Build a validated Expense ready to be fed to the settlement engine."""
    try:
        currency = normalize_currency(currency)
    except ValueError as e:
        logger.warning(f"Rejected expense with currency {currency!r}")
        raise SplitValidationError(str(e)) from e

    shares = build_expense_shares(amount, participant_ids, split_type, custom_amounts)
    return Expense(
        id=expense_id or uuid.uuid4().hex,
        amount=to_decimal(amount),
        currency=currency,
        paid_by_participant_id=paid_by_participant_id,
        shares=shares,
    )
