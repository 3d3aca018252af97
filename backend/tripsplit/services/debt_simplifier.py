"""Minimize number of transfers so everyone is settled (who pays whom)."""
import logging
from decimal import Decimal
from typing import Iterable, Optional

from tripsplit.config import get_settings
from tripsplit.money import from_cents, to_cents
from tripsplit.schemas import Balance

logger = logging.getLogger(__name__)


def _net_positions(balances: list[Balance]) -> dict[str, int]:
    """participant id -> net cents (positive = is owed money), in first-seen order."""
    net: dict[str, int] = {}
    for b in balances:
        units = to_cents(b.amount)
        net[b.from_id] = net.get(b.from_id, 0) - units
        net[b.to_id] = net.get(b.to_id, 0) + units
    return net


def _match(net: dict[str, int], threshold: int, currency: str) -> list[Balance]:
    debtors = [[pid, -units] for pid, units in net.items() if units < -threshold]
    creditors = [[pid, units] for pid, units in net.items() if units > threshold]

    out: list[Balance] = []
    i, j = 0, 0
    while i < len(debtors) and j < len(creditors):
        debtor, creditor = debtors[i], creditors[j]
        transfer = min(debtor[1], creditor[1])
        out.append(Balance(from_id=debtor[0], to_id=creditor[0], amount=from_cents(transfer), currency=currency))
        debtor[1] -= transfer
        creditor[1] -= transfer
        if debtor[1] == 0:
            i += 1
        if creditor[1] == 0:
            j += 1
    return out


def simplify_balances(balances: Iterable[Balance], *, epsilon: Optional[Decimal] = None) -> list[Balance]:
    """
    Replace pairwise balances with direct debtor -> creditor transfers.

    Greedy: debtors and creditors are taken in the order they first appear
    (no sorting by size), and each step settles as much as the current pair
    allows. Everyone ends at zero, but this is not guaranteed to find the
    fewest possible transfers in every case. Currencies are simplified
    separately.

    Only positions smaller than `epsilon` are skipped; with the default of
    one cent every non-zero cent gets settled.
    """
    if epsilon is None:
        epsilon = get_settings().epsilon
    threshold = max(to_cents(epsilon) - 1, 0)

    by_currency: dict[str, list[Balance]] = {}
    for b in balances:
        by_currency.setdefault(b.currency, []).append(b)

    out: list[Balance] = []
    for currency, group in by_currency.items():
        out.extend(_match(_net_positions(group), threshold, currency))

    logger.debug("Simplified %d balances into %d transfers", sum(len(g) for g in by_currency.values()), len(out))
    return out
