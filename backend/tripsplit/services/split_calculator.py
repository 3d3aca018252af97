"""Divide one expense among its participants, exact to the cent.

All three strategies work on integer minor units so the shares always add up
to the expense total. `validate_split` runs the same checks without raising,
for forms that want to show every problem at once.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Mapping, Optional, Sequence, Union

from tripsplit.config import get_settings
from tripsplit.exceptions import EmptyParticipantSet, InvalidSplit, SplitError
from tripsplit.money import Numeric, from_cents, money, to_cents, to_decimal
from tripsplit.schemas import SplitShare, SplitType, SplitValidation

logger = logging.getLogger(__name__)

HUNDRED = Decimal(100)


def _parse_split_type(split_type: Union[SplitType, str]) -> SplitType:
    try:
        return SplitType(split_type)
    except ValueError:
        raise InvalidSplit(f"Invalid split type: {split_type}") from None


def _equal_units(units: int, n: int) -> list[int]:
    base, remainder = divmod(units, n)
    # first `remainder` participants absorb the leftover cents
    return [base + 1 if i < remainder else base for i in range(n)]


def _percentage_units(units: int, percentages: list[Decimal]) -> list[int]:
    raw = [
        int((Decimal(units) * pct / HUNDRED).to_integral_value(rounding=ROUND_HALF_UP))
        for pct in percentages
    ]
    drift = units - sum(raw)
    if drift == 0:
        return raw

    # sorted() is stable, so equal percentages keep input order
    order = [i for i in sorted(range(len(raw)), key=lambda i: -percentages[i]) if percentages[i] > 0]
    step = 1 if drift > 0 else -1
    pos = 0
    while drift != 0:
        idx = order[pos % len(order)]
        if step > 0 or raw[idx] > 0:
            raw[idx] += step
            drift -= step
        pos += 1
    return raw


def _custom_units(units: int, values: list[int]) -> list[int]:
    out = list(values)
    diff = units - sum(out)
    if diff:
        largest = max(range(len(out)), key=lambda i: out[i])
        out[largest] += diff
    return out


def _values_for(participant_ids: Sequence[str], custom_values: Optional[Mapping[str, Numeric]]) -> list[Decimal]:
    custom_values = custom_values or {}
    return [to_decimal(custom_values.get(pid, 0)) for pid in participant_ids]


def _strategy_problems(
    amount: Numeric,
    kind: SplitType,
    participant_ids: Sequence[str],
    custom_values: Optional[Mapping[str, Numeric]],
    percentage_tolerance: Decimal,
) -> list[SplitError]:
    """Everything wrong with the percentages or custom amounts of a split."""
    problems: list[SplitError] = []

    if kind is SplitType.PERCENTAGE:
        percentages = _values_for(participant_ids, custom_values)
        for pid, pct in zip(participant_ids, percentages):
            if pct < 0:
                problems.append(InvalidSplit(f"Percentage for {pid} cannot be negative ({pct}%)", participant_id=pid))
        total = sum(percentages, Decimal(0))
        discrepancy = total - HUNDRED
        if abs(discrepancy) > percentage_tolerance:
            problems.append(InvalidSplit(
                f"Percentages must total 100% (currently {total}%)",
                discrepancy=discrepancy,
            ))

    elif kind is SplitType.CUSTOM:
        if custom_values is None:
            problems.append(InvalidSplit("Custom values are required for custom split"))
            return problems
        values = _values_for(participant_ids, custom_values)
        for pid, value in zip(participant_ids, values):
            if value < 0:
                problems.append(InvalidSplit(f"Amount for {pid} cannot be negative ({value})", participant_id=pid))
        units = to_cents(amount)
        total = sum(to_cents(v) for v in values)
        # one cent of slack, absorbed later by the largest share
        if abs(total - units) > 1:
            problems.append(InvalidSplit(
                f"Custom amounts total {from_cents(total)} but the expense is {from_cents(units)}"
                f" (off by {from_cents(total - units)})",
                discrepancy=from_cents(total - units),
            ))

    return problems


def calculate_split(
    amount: Numeric,
    split_type: Union[SplitType, str],
    participant_ids: Sequence[str],
    custom_values: Optional[Mapping[str, Numeric]] = None,
    *,
    percentage_tolerance: Optional[Decimal] = None,
) -> list[SplitShare]:
    """
    Split `amount` among `participant_ids`.

    custom_values: participant id -> percentage for PERCENTAGE splits, or
    participant id -> amount for CUSTOM splits. Missing ids count as zero.

    Raises EmptyParticipantSet for an empty participant list and InvalidSplit
    when the values don't add up. A zero or negative amount gives every
    participant a zero share.
    """
    kind = _parse_split_type(split_type)
    if not participant_ids:
        raise EmptyParticipantSet()
    if percentage_tolerance is None:
        percentage_tolerance = get_settings().percentage_tolerance

    if to_decimal(amount) <= 0:
        return [SplitShare(participant_id=pid, amount=from_cents(0)) for pid in participant_ids]

    problems = _strategy_problems(amount, kind, participant_ids, custom_values, percentage_tolerance)
    if problems:
        logger.info("Rejected %s split of %s: %s", kind.value, amount, problems[0])
        raise problems[0]

    units = to_cents(amount)
    if kind is SplitType.EQUAL:
        return [
            SplitShare(participant_id=pid, amount=from_cents(u))
            for pid, u in zip(participant_ids, _equal_units(units, len(participant_ids)))
        ]

    values = _values_for(participant_ids, custom_values)
    if kind is SplitType.PERCENTAGE:
        return [
            SplitShare(participant_id=pid, amount=from_cents(u), percentage=pct)
            for pid, u, pct in zip(participant_ids, _percentage_units(units, values), values)
        ]

    return [
        SplitShare(participant_id=pid, amount=from_cents(u))
        for pid, u in zip(participant_ids, _custom_units(units, [to_cents(v) for v in values]))
    ]


def validate_split(
    amount: Numeric,
    split_type: Union[SplitType, str],
    participant_ids: Sequence[str],
    custom_values: Optional[Mapping[str, Numeric]] = None,
    *,
    percentage_tolerance: Optional[Decimal] = None,
) -> SplitValidation:
    if percentage_tolerance is None:
        percentage_tolerance = get_settings().percentage_tolerance

    errors: list[str] = []
    if not participant_ids:
        errors.append(str(EmptyParticipantSet()))
    if to_decimal(amount) <= 0:
        errors.append("Amount must be greater than 0")

    try:
        kind = _parse_split_type(split_type)
    except InvalidSplit as exc:
        errors.append(str(exc))
    else:
        if participant_ids:
            errors.extend(
                str(p) for p in _strategy_problems(
                    money(amount), kind, participant_ids, custom_values, percentage_tolerance
                )
            )

    return SplitValidation(is_valid=not errors, errors=errors)
