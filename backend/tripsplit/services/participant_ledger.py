"""Per-participant totals (paid, owed, net) and per-category spending."""
import logging
from decimal import Decimal
from typing import Iterable, Sequence

from tripsplit.money import from_cents, money, to_cents
from tripsplit.schemas import CategoryTotal, Expense, Participant, ParticipantLedgerEntry, Settlement

logger = logging.getLogger(__name__)


def get_participant_spending(
    expenses: Iterable[Expense],
    settlements: Iterable[Settlement],
    participants: Sequence[Participant],
) -> list[ParticipantLedgerEntry]:
    """
    Totals for every participant on the roster, in roster order.

    paid: expenses they paid for plus settlements they received.
    owed: their expense shares minus settlements they sent.
    net = paid - owed (positive = the group owes them).
    Ids that appear in the history but not on the roster get an entry after
    the roster entries.
    """
    names = {p.id: p.name for p in participants}
    paid: dict[str, int] = {p.id: 0 for p in participants}
    owed: dict[str, int] = {p.id: 0 for p in participants}

    def touch(pid: str) -> None:
        if pid not in paid:
            paid[pid] = 0
            owed[pid] = 0

    for e in expenses:
        touch(e.payer_id)
        paid[e.payer_id] += to_cents(e.amount)
        for share in e.shares:
            touch(share.participant_id)
            owed[share.participant_id] += to_cents(share.amount)

    for s in settlements:
        touch(s.from_id)
        touch(s.to_id)
        owed[s.from_id] -= to_cents(s.amount)
        paid[s.to_id] += to_cents(s.amount)

    strays = [pid for pid in paid if pid not in names]
    if strays:
        logger.debug("Ledger includes ids outside the roster: %s", strays)

    return [
        ParticipantLedgerEntry(
            participant_id=pid,
            participant_name=names.get(pid, "Unknown"),
            total_paid=from_cents(paid[pid]),
            total_owed=from_cents(owed[pid]),
            net_balance=from_cents(paid[pid] - owed[pid]),
        )
        for pid in paid
    ]


def get_category_breakdown(expenses: Iterable[Expense]) -> list[CategoryTotal]:
    """Spending per category, largest first. Uncategorised expenses count as "other"."""
    totals: dict[str, int] = {}
    counts: dict[str, int] = {}
    for e in expenses:
        cat = e.category or "other"
        totals[cat] = totals.get(cat, 0) + to_cents(e.amount)
        counts[cat] = counts.get(cat, 0) + 1

    grand_total = sum(totals.values())
    out = [
        CategoryTotal(
            category=cat,
            amount=from_cents(units),
            count=counts[cat],
            percentage=money(Decimal(units) * 100 / grand_total) if grand_total else money(0),
        )
        for cat, units in totals.items()
    ]
    # stable: ties keep first-seen order
    out.sort(key=lambda c: c.amount, reverse=True)
    return out
