"""Fold expenses and settlements into netted pairwise balances (who owes whom)."""
import logging
from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from tripsplit.config import get_settings
from tripsplit.money import from_cents, to_cents
from tripsplit.schemas import Balance, Expense, Participant, Settlement

logger = logging.getLogger(__name__)

# (currency, debtor id, creditor id)
DebtKey = tuple[str, str, str]
# (currency, lower id, higher id)
PairKey = tuple[str, str, str]


def _net_pairs(debt: dict[DebtKey, int]) -> dict[PairKey, int]:
    """Fold directed debts into one signed value per sorted pair.

    The value is positive when the lower id owes the higher one.
    """
    net: dict[PairKey, int] = defaultdict(int)
    for (currency, debtor, creditor), units in debt.items():
        if debtor < creditor:
            net[(currency, debtor, creditor)] += units
        else:
            net[(currency, creditor, debtor)] -= units
    return net


def calculate_balances(
    expenses: Iterable[Expense],
    settlements: Iterable[Settlement],
    participants: Optional[Sequence[Participant]] = None,
    *,
    epsilon: Optional[Decimal] = None,
) -> list[Balance]:
    """
    Net every expense share and settlement into at most one Balance per pair.

    Each share holder other than the payer owes the payer their share. A
    settlement only cancels what its sender owes its receiver from expenses:
    it never drops that debt below zero and never creates a debt the other
    way. Pairs whose net is within `epsilon` are left out.

    `participants` does not filter anything; ids outside it are netted like
    any other and only reported in the debug log.
    """
    if epsilon is None:
        epsilon = get_settings().epsilon
    threshold = to_cents(epsilon)

    debt: dict[DebtKey, int] = defaultdict(int)
    for e in expenses:
        for share in e.shares:
            if share.participant_id != e.payer_id:
                debt[(e.currency, share.participant_id, e.payer_id)] += to_cents(share.amount)

    for s in settlements:
        key = (s.currency, s.from_id, s.to_id)
        outstanding = debt.get(key, 0)
        if outstanding:
            debt[key] = outstanding - min(to_cents(s.amount), outstanding)

    net = _net_pairs(debt)

    balances: list[Balance] = []
    for currency, low, high in sorted(net):
        units = net[(currency, low, high)]
        if units > threshold:
            balances.append(Balance(from_id=low, to_id=high, amount=from_cents(units), currency=currency))
        elif units < -threshold:
            balances.append(Balance(from_id=high, to_id=low, amount=from_cents(-units), currency=currency))

    if participants is not None:
        known = {p.id for p in participants}
        strays = {pid for b in balances for pid in (b.from_id, b.to_id)} - known
        if strays:
            logger.debug("Balances reference ids outside the roster: %s", sorted(strays))
    logger.debug("Computed %d balances from %d pairs", len(balances), len(net))
    return balances


def filter_trip(
    expenses: Iterable[Expense],
    settlements: Iterable[Settlement],
    trip_id: str,
) -> tuple[list[Expense], list[Settlement]]:
    """Restrict a snapshot to the expenses and settlements of one trip."""
    return (
        [e for e in expenses if e.trip_id == trip_id],
        [s for s in settlements if s.trip_id == trip_id],
    )


def total_owed_by(balances: Iterable[Balance], participant_id: str) -> Decimal:
    """What `participant_id` owes everyone else."""
    return from_cents(sum(to_cents(b.amount) for b in balances if b.from_id == participant_id))


def total_owed_to(balances: Iterable[Balance], participant_id: str) -> Decimal:
    """What everyone else owes `participant_id`."""
    return from_cents(sum(to_cents(b.amount) for b in balances if b.to_id == participant_id))
