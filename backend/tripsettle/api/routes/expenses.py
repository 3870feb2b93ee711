"""
Expense split routes.
"""
import logging
from fastapi import APIRouter, HTTPException, status
from typing import List
from tripsettle.core.constants import CURRENCY_NAMES, CURRENCY_SYMBOLS
from tripsettle.core.exceptions import SettlementInputError
from tripsettle.schemas.expense import ExpenseSplitRequest, CurrencyResponse
from tripsettle.schemas.settlement import Expense
from tripsettle.services.expense_service import create_expense

logger = logging.getLogger(__name__)

router = APIRouter(tags=["expenses"])


@router.post("/expenses/split", response_model=Expense)
async def split_expense(split: ExpenseSplitRequest):
    """Preview how an expense is split among participants."""
    logger.info(
        f"Splitting {split.amount} {split.currency} paid by {split.paid_by_participant_id} "
        f"among {len(split.participant_ids)} participants ({split.split_type.value})"
    )
    try:
        return create_expense(
            amount=split.amount,
            currency=split.currency,
            paid_by_participant_id=split.paid_by_participant_id,
            participant_ids=split.participant_ids,
            split_type=split.split_type,
            custom_amounts=split.custom_amounts,
        )
    except SettlementInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


@router.get("/currencies", response_model=List[CurrencyResponse])
async def list_currencies():
    """List supported currencies."""
    return [
        CurrencyResponse(code=code, symbol=symbol, name=CURRENCY_NAMES[code])
        for code, symbol in CURRENCY_SYMBOLS.items()
    ]
