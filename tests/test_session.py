"""Mini README: Tests for the presentation-facing ledger session.

The session keeps the current snapshot, swaps it only after successful
mutations, and serves display balances and settlements computed from the
same balance sheet.
"""

from __future__ import annotations

import pytest

from groupledger import InvalidAmount, LedgerSession, Rejected, Settled, UnknownParticipant


def test_session_tracks_snapshots_across_mutations() -> None:
    session = LedgerSession(tolerance=0.01, decimals=2)
    alice = session.add_participant("Alice")
    before = session.ledger

    session.add_payment(alice, "15")

    assert before.get_participant(alice).payments == ()
    assert session.ledger.get_participant(alice).payments == (15.0,)
    assert session.get_display_balance(alice) == pytest.approx(15.0)


def test_failed_mutation_keeps_previous_snapshot() -> None:
    session = LedgerSession(tolerance=0.01, decimals=2)
    alice = session.add_participant("Alice")
    session.add_expense(alice, "Coffee", "4.20")
    snapshot = session.ledger

    with pytest.raises(InvalidAmount):
        session.add_expense(alice, "Cake", "abc")
    with pytest.raises(InvalidAmount):
        session.add_payment(alice, "abc")
    with pytest.raises(UnknownParticipant):
        session.add_payment("person_0099", "1")

    assert session.ledger is snapshot


def test_display_balance_is_rounded_paid_minus_spent() -> None:
    session = LedgerSession(tolerance=0.01, decimals=2)
    alice = session.add_participant("Alice")
    session.add_payment(alice, "10")
    session.add_expense(alice, "Bread", "3.333")

    assert session.get_display_balance(alice) == 6.67
    with pytest.raises(UnknownParticipant):
        session.get_display_balance("person_0042")


def test_compute_settlement_after_each_change() -> None:
    session = LedgerSession(tolerance=0.01, decimals=2)
    alice = session.add_participant("Alice")
    bob = session.add_participant("Bob")

    session.add_payment(alice, "40")
    assert isinstance(session.compute_settlement(), Rejected)

    session.add_expense(bob, "Concert", "40")
    result = session.compute_settlement()
    assert isinstance(result, Settled)
    assert [transfer.describe("$", 2) for transfer in result.transfers] == [
        "Bob owes Alice $40.00"
    ]

    session.remove_participant(bob)
    session.remove_participant(bob)
    assert isinstance(session.compute_settlement(), Rejected)


def test_summary_lists_participants_in_creation_order() -> None:
    session = LedgerSession(tolerance=0.01, decimals=2)
    alice = session.add_participant("Alice")
    session.add_participant("Bob")
    session.add_payment(alice, "5")

    rows = session.summary()

    assert [row["name"] for row in rows] == ["Alice", "Bob"]
    assert rows[0]["balance"] == pytest.approx(5.0)
    assert rows[1]["balance"] == 0.0
    assert [p.name for p in session.participants()] == ["Alice", "Bob"]
