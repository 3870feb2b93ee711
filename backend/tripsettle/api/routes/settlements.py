"""
Settlement calculation routes.
"""
import logging
from fastapi import APIRouter
from tripsettle.schemas.settlement import (
    SettlementRequest, SettlementResult, SettlementSummaryResponse
)
from tripsettle.services.settlement_service import compute_settlement, format_settlement_summary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settlement", tags=["settlement"])


@router.post("/compute", response_model=SettlementResult)
async def compute(request: SettlementRequest):
    """Compute per-currency balances and suggested transfers for a trip snapshot."""
    logger.info(
        f"Computing settlement: {len(request.expenses)} expenses, "
        f"{len(request.participants)} participants, {len(request.payments)} payments"
    )
    return compute_settlement(request.expenses, request.participants, request.payments)


@router.post("/summary", response_model=SettlementSummaryResponse)
async def summary(request: SettlementRequest):
    """Get a plain-text settlement summary for a trip snapshot."""
    result = compute_settlement(request.expenses, request.participants, request.payments)
    return SettlementSummaryResponse(summary=format_settlement_summary(result))
