import pytest
from fastapi.testclient import TestClient

from tripsplit.main import app
from tripsplit.schemas import Expense, Participant, Settlement, SplitShare


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def roster():
    return [
        Participant(id="alice", name="Alice"),
        Participant(id="bob", name="Bob"),
        Participant(id="carol", name="Carol"),
    ]


def make_expense(expense_id, payer_id, amount, shares, currency="USD", **extra):
    """shares: participant id -> amount."""
    return Expense(
        id=expense_id,
        payer_id=payer_id,
        amount=amount,
        shares=[SplitShare(participant_id=pid, amount=amt) for pid, amt in shares.items()],
        currency=currency,
        **extra,
    )


def make_settlement(settlement_id, from_id, to_id, amount, currency="USD", **extra):
    return Settlement(id=settlement_id, from_id=from_id, to_id=to_id, amount=amount, currency=currency, **extra)


@pytest.fixture
def dinner():
    # Alice pays 90.00, split three ways
    return make_expense("e1", "alice", "90.00", {"alice": "30.00", "bob": "30.00", "carol": "30.00"})


@pytest.fixture
def snapshot_json():
    return {
        "participants": [
            {"id": "alice", "name": "Alice"},
            {"id": "bob", "name": "Bob"},
            {"id": "carol", "name": "Carol"},
        ],
        "expenses": [
            {
                "id": "e1", "payer_id": "alice", "amount": "90.00", "currency": "USD",
                "category": "food", "trip_id": "t1",
                "shares": [
                    {"participant_id": "alice", "amount": "30.00"},
                    {"participant_id": "bob", "amount": "30.00"},
                    {"participant_id": "carol", "amount": "30.00"},
                ],
            },
            {
                "id": "e2", "payer_id": "bob", "amount": "30.00", "currency": "USD",
                "category": "transport", "trip_id": "t1",
                "shares": [
                    {"participant_id": "bob", "amount": "15.00"},
                    {"participant_id": "carol", "amount": "15.00"},
                ],
            },
            {
                "id": "e3", "payer_id": "carol", "amount": "12.00", "currency": "USD",
                "trip_id": "t2",
                "shares": [{"participant_id": "alice", "amount": "12.00"}],
            },
        ],
        "settlements": [
            {"id": "s1", "from_id": "carol", "to_id": "alice", "amount": "10.00", "currency": "USD", "trip_id": "t1"},
        ],
    }
