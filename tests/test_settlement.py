"""Mini README: Tests for the greedy two-pointer settlement solver.

Structure:
    * Worked scenarios - two-person, one-creditor-many-debtors, all-zero.
    * Invariant checks - seeded random groups must be fully settled with at
      most ``n - 1`` positive transfers and no self transfers.
"""

from __future__ import annotations

import random
from collections import defaultdict

import pytest

from groupledger import Transfer, settle
from groupledger.reconciliation import ParticipantBalance


def test_single_debtor_pays_single_creditor() -> None:
    transfers = settle({"P1": 20.0, "P2": -20.0}, decimals=2)

    assert transfers == [Transfer(source="P2", target="P1", amount=20.0)]


def test_one_creditor_collects_from_two_debtors() -> None:
    transfers = settle({"P1": 50.0, "P2": -25.0, "P3": -25.0}, decimals=2)

    assert len(transfers) == 2
    assert {transfer.target for transfer in transfers} == {"P1"}
    assert [transfer.amount for transfer in transfers] == [25.0, 25.0]
    # Stable sort keeps P2 ahead of P3 when their balances tie.
    assert [transfer.source for transfer in transfers] == ["P2", "P3"]


def test_zero_balances_produce_no_transfers() -> None:
    assert settle({"P1": 0.0, "P2": 0.0}, decimals=2) == []
    assert settle({}, decimals=2) == []


def test_zero_balance_participant_is_never_referenced() -> None:
    transfers = settle({"A": -10.0, "Z": 0.0, "B": 10.0}, decimals=2)

    assert transfers == [Transfer(source="A", target="B", amount=10.0)]


def test_settle_does_not_mutate_caller_balances() -> None:
    balances = {"P1": 30.0, "P2": -10.0, "P3": -20.0}
    snapshot = dict(balances)

    settle(balances, decimals=2)

    assert balances == snapshot


def test_settle_accepts_participant_balances() -> None:
    entries = [
        ParticipantBalance(participant_id="person_0001", name="Alice", spent=0.0, paid=12.0),
        ParticipantBalance(participant_id="person_0002", name="Bob", spent=12.0, paid=0.0),
    ]

    transfers = settle(entries, decimals=2)

    assert [transfer.as_dict() for transfer in transfers] == [
        {"from": "Bob", "to": "Alice", "amount": 12.0}
    ]


def test_amounts_are_rounded_to_cents() -> None:
    transfers = settle({"A": 10.0 / 3, "B": -10.0 / 3}, decimals=2)

    assert transfers[0].amount == 3.33


def test_sub_cent_residue_is_not_emitted() -> None:
    transfers = settle({"A": 0.004, "B": -0.004}, decimals=2)

    assert transfers == []


def test_transfer_describe_uses_currency_symbol() -> None:
    transfer = Transfer(source="Bob", target="Alice", amount=20.0)

    assert transfer.describe("$", 2) == "Bob owes Alice $20.00"
    assert transfer.describe("€", 1) == "Bob owes Alice €20.0"


def _random_balances(seed: int, size: int) -> dict:
    rng = random.Random(seed)
    raw = [round(rng.uniform(-200, 200), 2) for _ in range(size - 1)]
    # Close the group so the balances sum to zero.
    raw.append(round(-sum(raw), 2))
    return {f"person_{index}": value for index, value in enumerate(raw)}


@pytest.mark.parametrize("seed", range(25))
def test_random_groups_are_fully_settled(seed: int) -> None:
    """Applying the transfers zeroes every balance within a cent per transfer."""

    size = 2 + seed % 9
    balances = _random_balances(seed, size)

    transfers = settle(balances, decimals=2)

    assert len(transfers) <= size - 1
    received = defaultdict(float)
    sent = defaultdict(float)
    for transfer in transfers:
        assert transfer.amount > 0
        assert transfer.source != transfer.target
        received[transfer.target] += transfer.amount
        sent[transfer.source] += transfer.amount

    tolerance = 0.01 * (len(transfers) + 1)
    for name, balance in balances.items():
        if balance > 0:
            assert received[name] == pytest.approx(balance, abs=tolerance)
            assert sent[name] == 0
        elif balance < 0:
            assert sent[name] == pytest.approx(-balance, abs=tolerance)
            assert received[name] == 0
