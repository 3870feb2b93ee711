"""
Settlement service for per-currency balances and debt settlement.

Everything here is a pure function of its arguments: no database, no session,
no network. Callers pass a consistent snapshot of a trip's expenses,
participants and recorded payments and get freshly computed balances and
suggested transfers back. Currencies are never mixed.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, Optional

from tripsettle.core.config import settings
from tripsettle.core.constants import currency_symbol
from tripsettle.schemas.settlement import (
    Balance,
    Expense,
    Participant,
    Payment,
    SettlementResult,
    SettlementTransfer,
)

logger = logging.getLogger(__name__)

ZERO = Decimal(0)


def to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps floats like 33.33 from dragging in binary noise
    return Decimal(str(value))


def round_amount(value: Any, places: Optional[int] = None) -> Decimal:
    """Round half-up to the minor unit. Presentation only."""
    if places is None:
        places = settings.AMOUNT_DECIMALS
    return to_decimal(value).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def _coerce(items: Optional[Iterable[Any]], model) -> list:
    """Accept schema instances or plain mappings (camelCase or snake_case)."""
    if not items:
        return []
    return [item if isinstance(item, model) else model.model_validate(item) for item in items]


def compute_balances(
    expenses: Iterable[Any],
    participants: Iterable[Any],
    payments: Optional[Iterable[Any]] = None,
) -> Dict[str, List[Balance]]:
    """
    Compute each participant's paid / owes / balance per currency.

    balance = paid - owes + (payments sent - payments received)

    Only currencies that appear in at least one expense are returned, in the
    order they are first seen. Within a currency, participants with nothing
    paid and nothing owed are left out; the rest follow participant-list
    order, then any unknown ids in first-seen order with name None.
    """
    expenses = _coerce(expenses, Expense)
    participants = _coerce(participants, Participant)
    payments = _coerce(payments, Payment)

    names = {p.id: p.name for p in participants}

    expenses_by_currency: Dict[str, List[Expense]] = {}
    for expense in expenses:
        expenses_by_currency.setdefault(expense.currency, []).append(expense)

    payments_by_currency: Dict[str, List[Payment]] = {}
    for payment in payments:
        payments_by_currency.setdefault(payment.currency, []).append(payment)

    orphan_currencies = set(payments_by_currency) - set(expenses_by_currency)
    if orphan_currencies:
        logger.debug(f"Ignoring payments in currencies without expenses: {sorted(orphan_currencies)}")

    balances_by_currency: Dict[str, List[Balance]] = {}
    for currency, currency_expenses in expenses_by_currency.items():
        paid: Dict[str, Decimal] = {p.id: ZERO for p in participants}
        owes: Dict[str, Decimal] = dict(paid)

        for expense in currency_expenses:
            payer_id = expense.paid_by_participant_id
            paid[payer_id] = paid.get(payer_id, ZERO) + expense.amount
            owes.setdefault(payer_id, ZERO)
            for share in expense.shares:
                owes[share.participant_id] = owes.get(share.participant_id, ZERO) + share.amount
                paid.setdefault(share.participant_id, ZERO)

        # Payments settle debt; they are not expenses. Sending raises the
        # sender's balance, receiving lowers the receiver's.
        net_from_payments: Dict[str, Decimal] = {}
        for payment in payments_by_currency.get(currency, []):
            net_from_payments[payment.from_participant_id] = (
                net_from_payments.get(payment.from_participant_id, ZERO) + payment.amount
            )
            net_from_payments[payment.to_participant_id] = (
                net_from_payments.get(payment.to_participant_id, ZERO) - payment.amount
            )

        rows = []
        for participant_id in paid:
            if paid[participant_id] == ZERO and owes[participant_id] == ZERO:
                continue
            rows.append(Balance(
                participant_id=participant_id,
                name=names.get(participant_id),
                paid=paid[participant_id],
                owes=owes[participant_id],
                balance=(
                    paid[participant_id]
                    - owes[participant_id]
                    + net_from_payments.get(participant_id, ZERO)
                ),
            ))

        logger.debug(f"{currency}: {len(currency_expenses)} expenses, {len(rows)} balances")
        balances_by_currency[currency] = rows

    return balances_by_currency


def derive_transfers(
    balances: List[Balance],
    currency: str,
    tolerance: Optional[Decimal] = None,
) -> List[SettlementTransfer]:
    """
    Derive suggested transfers for one currency.

    Greedy largest-creditor / largest-debtor matching: not guaranteed to be
    the global minimum, but emits at most N-1 transfers for N parties with a
    nonzero balance. Ties keep balance-table order so output is stable.
    """
    if tolerance is None:
        tolerance = settings.BALANCE_TOLERANCE

    names = {}
    # [remaining magnitude, position, participant_id]
    creditors = []
    debtors = []
    for position, entry in enumerate(balances):
        names[entry.participant_id] = entry.name
        if entry.balance > tolerance:
            creditors.append([entry.balance, position, entry.participant_id])
        elif entry.balance < -tolerance:
            debtors.append([-entry.balance, position, entry.participant_id])

    transfers = []
    while creditors and debtors:
        creditors.sort(key=lambda c: (-c[0], c[1]))
        debtors.sort(key=lambda d: (-d[0], d[1]))
        creditor = creditors[0]
        debtor = debtors[0]

        amount = min(creditor[0], debtor[0])
        rounded = round_amount(amount)
        if rounded > ZERO:
            transfers.append(SettlementTransfer(
                from_id=debtor[2],
                from_name=names.get(debtor[2]),
                to_id=creditor[2],
                to_name=names.get(creditor[2]),
                amount=rounded,
                currency=currency,
            ))

        # Keep full precision for the next round
        creditor[0] -= amount
        debtor[0] -= amount
        if creditor[0] <= tolerance:
            creditors.pop(0)
        if debtor[0] <= tolerance:
            debtors.pop(0)

    logger.debug(f"{currency}: {len(transfers)} transfers suggested")
    return transfers


def compute_settlement(
    expenses: Iterable[Any],
    participants: Iterable[Any],
    payments: Optional[Iterable[Any]] = None,
) -> SettlementResult:
    """
    Compute balances and a settlement plan for every active currency.

    Transfers are listed currency by currency (first-seen order), each
    currency in the order the greedy matcher emitted them.
    """
    balances_by_currency = compute_balances(expenses, participants, payments)

    transfers: List[SettlementTransfer] = []
    for currency, entries in balances_by_currency.items():
        transfers.extend(derive_transfers(entries, currency))

    return SettlementResult(
        balances_by_currency=balances_by_currency,
        transfers=transfers,
        currencies=[currency for currency, entries in balances_by_currency.items() if entries],
    )


def format_amount(amount: Any, currency: str) -> str:
    """Format an amount for display, e.g. '$1,234.50 USD'."""
    return f"{currency_symbol(currency)}{round_amount(amount):,} {currency}"


def format_settlement_summary(result: SettlementResult) -> str:
    """Create a plain-text summary of balances and suggested transfers."""
    if not result.currencies:
        return "No expenses recorded."

    summary_lines = []
    for currency in result.currencies:
        summary_lines.append(currency)
        summary_lines.append("Net balances:")
        for entry in result.balances_by_currency[currency]:
            rounded = round_amount(entry.balance)
            sign = "-" if rounded < ZERO else "+"
            summary_lines.append(
                f"  {entry.name or entry.participant_id}: {sign}{format_amount(abs(rounded), currency)}"
            )

        currency_transfers = [t for t in result.transfers if t.currency == currency]
        if currency_transfers:
            summary_lines.append("Transfers:")
            for transfer in currency_transfers:
                summary_lines.append(
                    f"  {transfer.from_name or transfer.from_id} -> {transfer.to_name or transfer.to_id}: "
                    f"{format_amount(transfer.amount, currency)}"
                )
        else:
            summary_lines.append("All settled.")
        summary_lines.append("")

    return "\n".join(summary_lines).rstrip()
