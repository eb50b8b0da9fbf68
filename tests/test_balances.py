"""Mini README: Tests for balance computation and the consistency check.

These tests confirm balances are ``paid - spent`` per participant, totals
accumulate across the group, and the validator honours the 0.01 tolerance.
"""

from __future__ import annotations

import pytest

from groupledger import ImbalancedLedger, Ledger, UnknownParticipant, compute_balances, validate
from groupledger.reconciliation import is_consistent


def _ledger_with_alice_and_bob() -> tuple:
    ledger, alice = Ledger().add_participant("Alice")
    ledger, bob = ledger.add_participant("Bob")
    ledger = (
        ledger.add_payment(alice, "30")
        .add_expense(alice, "Snacks", "10")
        .add_expense(bob, "Tickets", "20")
    )
    return ledger, alice, bob


def test_compute_balances_returns_signed_balances_and_totals() -> None:
    ledger, alice, bob = _ledger_with_alice_and_bob()

    sheet = compute_balances(ledger)

    assert sheet.balances == {alice: pytest.approx(20.0), bob: pytest.approx(-20.0)}
    assert sheet.total_spent == pytest.approx(30.0)
    assert sheet.total_paid == pytest.approx(30.0)
    assert [entry.name for entry in sheet.entries] == ["Alice", "Bob"]


def test_empty_ledger_yields_empty_sheet() -> None:
    sheet = compute_balances(Ledger())

    assert sheet.balances == {}
    assert sheet.total_spent == 0.0
    assert sheet.total_paid == 0.0


def test_display_balance_matches_settlement_balance() -> None:
    """Display values come from the same sheet, only rounded."""

    ledger, alice = Ledger().add_participant("Alice")
    ledger = ledger.add_payment(alice, "10.005").add_expense(alice, "Tea", "0.001")

    sheet = compute_balances(ledger)

    assert sheet.display_balance(alice, 2) == round(sheet.balance_for(alice), 2)
    with pytest.raises(UnknownParticipant):
        sheet.balance_for("person_0404")


@pytest.mark.parametrize(
    ("spent", "paid", "consistent"),
    [
        (100.0, 100.0, True),
        (100.0, 100.005, True),
        (0.1 + 0.2, 0.3, True),
        (100.0, 90.0, False),
        (100.0, 100.02, False),
    ],
)
def test_is_consistent_uses_tolerance(spent, paid, consistent) -> None:
    assert is_consistent(spent, paid, 0.01) is consistent


def test_validate_raises_imbalanced_ledger_with_totals() -> None:
    with pytest.raises(ImbalancedLedger) as excinfo:
        validate(90.0, 100.0, 0.01)

    assert excinfo.value.total_spent == pytest.approx(90.0)
    assert excinfo.value.total_paid == pytest.approx(100.0)
    assert excinfo.value.difference == pytest.approx(10.0)
    assert str(excinfo.value) == "Total payments do not match total expenses."


def test_validate_rejects_negative_tolerance() -> None:
    with pytest.raises(ValueError):
        validate(1.0, 1.0, -0.5)
