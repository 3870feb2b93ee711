"""
Pydantic schemas for expense splitting.
"""
from pydantic import field_validator, model_validator
from typing import List, Dict, Optional
from decimal import Decimal
from tripsettle.core.config import settings
from tripsettle.core.constants import SplitType, normalize_currency
from tripsettle.schemas.settlement import SettlementModel


class ExpenseSplitRequest(SettlementModel):
    """Schema for previewing how an expense is split."""
    amount: Decimal
    currency: str = settings.DEFAULT_CURRENCY
    paid_by_participant_id: str
    split_type: SplitType = SplitType.EQUAL
    participant_ids: List[str]  # Participants included in the split
    custom_amounts: Optional[Dict[str, Decimal]] = None  # Only for CUSTOM

    @field_validator("currency")
    @classmethod
    def check_currency(cls, v):
        return normalize_currency(v)

    @model_validator(mode="after")
    def check_custom_amounts(self):
        if self.split_type == SplitType.CUSTOM and self.custom_amounts is None:
            raise ValueError("custom_amounts is required for a CUSTOM split")
        return self


class CurrencyResponse(SettlementModel):
    """Schema for a supported currency."""
    code: str
    symbol: str
    name: str
