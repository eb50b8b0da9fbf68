"""Mini README: Error types raised by the groupledger engine.

Structure:
    * LedgerError - common base so callers can catch every engine failure.
    * InvalidAmount - amount input that is not a finite, non-negative number.
    * InvalidParticipantName - empty participant names.
    * UnknownParticipant - expense/payment/lookup against an absent id.
    * ImbalancedLedger - totals differ by more than the tolerance.

None of these errors leave the ledger in a modified state; callers may keep
editing after catching any of them.
"""

from __future__ import annotations

IMBALANCED_LEDGER_MESSAGE = "Total payments do not match total expenses."


class LedgerError(Exception):
    """Base class for all recoverable ledger failures."""


class InvalidAmount(LedgerError, ValueError):
    """Raised when an amount does not parse to a finite, non-negative number."""

    def __init__(self, value: object, reason: str = "") -> None:
        self.value = value
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid amount {value!r}{detail}")


class InvalidParticipantName(LedgerError, ValueError):
    """Raised when a participant is added without a usable name."""


class UnknownParticipant(LedgerError, KeyError):
    """Raised when an operation references a participant id that does not exist."""

    def __init__(self, participant_id: str) -> None:
        self.participant_id = participant_id
        super().__init__(f"Participant {participant_id} not found")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message for display.
        return str(self.args[0])


class ImbalancedLedger(LedgerError):
    """Raised when total payments and total expenses do not reconcile."""

    def __init__(self, total_spent: float, total_paid: float) -> None:
        self.total_spent = total_spent
        self.total_paid = total_paid
        self.difference = total_paid - total_spent
        super().__init__(IMBALANCED_LEDGER_MESSAGE)
