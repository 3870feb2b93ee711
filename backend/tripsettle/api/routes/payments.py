"""
Payment routes.
"""
import logging
from fastapi import APIRouter, HTTPException, status
from tripsettle.core.exceptions import SettlementInputError
from tripsettle.schemas.settlement import Payment, SettlementTransfer
from tripsettle.services.payment_service import payment_from_transfer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("/from-transfer", response_model=Payment, status_code=status.HTTP_201_CREATED)
async def mark_transfer_paid(transfer: SettlementTransfer):
    """Turn a suggested transfer into a payment record."""
    logger.info(
        f"Marking transfer paid: {transfer.from_id} -> {transfer.to_id} {transfer.amount} {transfer.currency}"
    )
    try:
        return payment_from_transfer(transfer)
    except SettlementInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
