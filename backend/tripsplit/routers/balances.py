"""Balances: who owes whom for a snapshot of expenses and settlements."""
from typing import Optional

from fastapi import APIRouter, Query

from tripsplit.schemas import (
    Balance, CategoryTotal, LedgerSnapshot, ParticipantLedgerEntry, SettlementSummary,
)
from tripsplit.services.balance_engine import calculate_balances, filter_trip
from tripsplit.services.debt_simplifier import simplify_balances
from tripsplit.services.participant_ledger import get_category_breakdown, get_participant_spending
from tripsplit.services.settlement_advisor import suggest_settlements

router = APIRouter(prefix="/balances", tags=["balances"])


def _history(data: LedgerSnapshot, trip_id: Optional[str]):
    if trip_id is None:
        return data.expenses, data.settlements
    return filter_trip(data.expenses, data.settlements, trip_id)


@router.post("", response_model=list[Balance])
def get_balances(data: LedgerSnapshot, trip_id: Optional[str] = Query(None)):
    expenses, settlements = _history(data, trip_id)
    return calculate_balances(expenses, settlements, data.participants)


@router.post("/simplify", response_model=list[Balance])
def simplify(balances: list[Balance]):
    return simplify_balances(balances)


@router.post("/summary", response_model=SettlementSummary)
def get_summary(data: LedgerSnapshot, trip_id: Optional[str] = Query(None)):
    expenses, settlements = _history(data, trip_id)
    balances = calculate_balances(expenses, settlements, data.participants)
    simplified = simplify_balances(balances)
    return SettlementSummary(
        balances=balances,
        simplified=simplified,
        suggestions=suggest_settlements(simplified, data.participants, simplify=False),
        ledger=get_participant_spending(expenses, settlements, data.participants),
    )


@router.post("/ledger", response_model=list[ParticipantLedgerEntry])
def get_ledger(data: LedgerSnapshot, trip_id: Optional[str] = Query(None)):
    expenses, settlements = _history(data, trip_id)
    return get_participant_spending(expenses, settlements, data.participants)


@router.post("/categories", response_model=list[CategoryTotal])
def get_categories(data: LedgerSnapshot, trip_id: Optional[str] = Query(None)):
    expenses, _ = _history(data, trip_id)
    return get_category_breakdown(expenses)
