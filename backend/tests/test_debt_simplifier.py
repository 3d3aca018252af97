from decimal import Decimal

from tripsplit.schemas import Balance
from tripsplit.services.debt_simplifier import simplify_balances


def _b(from_id, to_id, amount, currency="USD"):
    return Balance(from_id=from_id, to_id=to_id, amount=Decimal(amount), currency=currency)


def _as_tuples(balances):
    return [(b.from_id, b.to_id, b.amount) for b in balances]


def _positions(balances):
    net = {}
    for b in balances:
        net[b.from_id] = net.get(b.from_id, 0) - b.amount
        net[b.to_id] = net.get(b.to_id, 0) + b.amount
    return {pid: v for pid, v in net.items() if v != 0}


def test_chain_collapses_to_single_transfer():
    simplified = simplify_balances([_b("A", "B", "10"), _b("B", "C", "10")])
    assert _as_tuples(simplified) == [("A", "C", Decimal("10.00"))]


def test_cycle_disappears():
    assert simplify_balances([_b("A", "B", "5"), _b("B", "C", "5"), _b("C", "A", "5")]) == []


def test_empty_input():
    assert simplify_balances([]) == []


def test_single_balance_unchanged():
    assert _as_tuples(simplify_balances([_b("A", "B", "12.34")])) == [("A", "B", Decimal("12.34"))]


def test_greedy_uses_first_seen_order():
    # creditors C then D, debtors A then B, no sorting by size
    balances = [_b("A", "C", "30"), _b("B", "D", "50"), _b("B", "C", "10")]
    assert _as_tuples(simplify_balances(balances)) == [
        ("A", "C", Decimal("30.00")),
        ("B", "C", Decimal("10.00")),
        ("B", "D", Decimal("50.00")),
    ]


def test_net_positions_are_preserved():
    balances = [
        _b("A", "B", "25.50"), _b("B", "C", "10.25"), _b("C", "D", "40.00"),
        _b("D", "A", "5.75"), _b("E", "B", "3.00"),
    ]
    simplified = simplify_balances(balances)
    assert _positions(simplified) == _positions(balances)
    credit = sum(v for v in _positions(balances).values() if v > 0)
    assert sum(b.amount for b in simplified) == credit


def test_transfer_count_bounded_by_participants():
    balances = [_b("A", "B", "10"), _b("C", "B", "10"), _b("B", "D", "5"), _b("D", "E", "20"), _b("A", "E", "1")]
    people = {pid for b in balances for pid in (b.from_id, b.to_id)}
    simplified = simplify_balances(balances)
    assert len(simplified) <= len(people) - 1
    assert all(b.amount > 0 for b in simplified)


def test_currencies_simplified_separately():
    balances = [_b("A", "B", "10", "USD"), _b("B", "C", "10", "EUR")]
    simplified = simplify_balances(balances)
    assert [(b.from_id, b.to_id, b.currency) for b in simplified] == [("A", "B", "USD"), ("B", "C", "EUR")]


def test_single_cent_positions_are_settled():
    balances = [_b("A", "B", "5.01"), _b("B", "C", "5.00")]
    simplified = simplify_balances(balances)
    assert _as_tuples(simplified) == [("A", "B", Decimal("0.01")), ("A", "C", Decimal("5.00"))]
    credit = sum(v for v in _positions(balances).values() if v > 0)
    assert sum(b.amount for b in simplified) == credit == Decimal("5.01")


def test_positions_below_epsilon_ignored():
    balances = [_b("A", "B", "10.00"), _b("B", "C", "9.99")]
    assert _as_tuples(simplify_balances(balances, epsilon=Decimal("0.02"))) == [("A", "C", Decimal("9.99"))]
