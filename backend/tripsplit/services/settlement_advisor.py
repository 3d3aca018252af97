"""Turn simplified balances into payment instructions people can act on."""
from typing import Iterable, Sequence

from tripsplit.schemas import Balance, Participant, SettlementSuggestion
from tripsplit.services.debt_simplifier import simplify_balances


def _label(names: dict[str, str], participant_id: str) -> str:
    return names.get(participant_id) or f"Unknown ({participant_id})"


def suggest_settlements(
    balances: Iterable[Balance],
    participants: Sequence[Participant],
    *,
    simplify: bool = True,
) -> list[SettlementSuggestion]:
    names = {p.id: p.name for p in participants}
    if simplify:
        balances = simplify_balances(balances)

    out: list[SettlementSuggestion] = []
    for b in balances:
        from_name = _label(names, b.from_id)
        to_name = _label(names, b.to_id)
        out.append(SettlementSuggestion(
            from_id=b.from_id,
            from_name=from_name,
            to_id=b.to_id,
            to_name=to_name,
            amount=b.amount,
            currency=b.currency,
            description=f"{from_name} pays {to_name} {b.currency} {b.amount:.2f}",
        ))
    return out
