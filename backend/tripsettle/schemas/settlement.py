"""
Pydantic schemas for settlement input and output.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Dict, Optional
from decimal import Decimal


class SettlementModel(BaseModel):
    """Base schema accepting both camelCase and snake_case field names."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Participant(SettlementModel):
    """Someone who can owe or be owed money within a trip."""
    id: str
    name: str


class ExpenseShare(SettlementModel):
    """How much of one expense a participant is responsible for."""
    participant_id: str
    amount: Decimal


class Expense(SettlementModel):
    """A single shared cost paid by one participant."""
    id: str
    amount: Decimal
    currency: str  # Taken as given; partitions are by exact string
    paid_by_participant_id: str
    shares: List[ExpenseShare] = []


class Payment(SettlementModel):
    """A transfer already made from one participant to another."""
    id: str
    from_participant_id: str
    to_participant_id: str
    amount: Decimal
    currency: str


class Balance(SettlementModel):
    """Derived per-currency position of a participant (positive = is owed)."""
    participant_id: str
    name: Optional[str] = None  # None when the id is not in the participant list
    paid: Decimal
    owes: Decimal
    balance: Decimal


class SettlementTransfer(SettlementModel):
    """Suggested transfer closing part of the outstanding balances."""
    from_id: str
    from_name: Optional[str] = None
    to_id: str
    to_name: Optional[str] = None
    amount: Decimal  # Rounded to the minor unit
    currency: str


class SettlementResult(SettlementModel):
    """Balances and suggested transfers for every active currency."""
    balances_by_currency: Dict[str, List[Balance]] = {}
    transfers: List[SettlementTransfer] = []
    currencies: List[str] = []  # First-seen order among expenses


class SettlementRequest(SettlementModel):
    """Snapshot of a trip's expenses, participants and recorded payments."""
    expenses: List[Expense] = []
    participants: List[Participant] = []
    payments: List[Payment] = []


class SettlementSummaryResponse(BaseModel):
    """Plain-text settlement summary."""
    summary: str
