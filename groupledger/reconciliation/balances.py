"""Mini README: Reduction of a ledger to per-participant balances.

Structure:
    * ParticipantBalance - spent, paid and net balance for one participant.
    * BalanceSheet - every participant's balance plus the global totals.
    * compute_balances - pure function building a sheet from a ledger.

A positive balance means the group owes the participant money, a negative
balance means the participant owes the group. Display summaries and the
settlement solver both read from the same sheet so they can never disagree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..configuration import get_settings
from ..errors import UnknownParticipant
from ..ledger import Ledger
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ParticipantBalance:
    """Net position of a single participant."""

    participant_id: str
    name: str
    spent: float
    paid: float

    @property
    def balance(self) -> float:
        return self.paid - self.spent


@dataclass(frozen=True, slots=True)
class BalanceSheet:
    """Balances for every participant in ledger order along with totals."""

    entries: Tuple[ParticipantBalance, ...]
    total_spent: float
    total_paid: float

    @property
    def balances(self) -> Dict[str, float]:
        """Mapping of participant id to signed balance."""

        return {entry.participant_id: entry.balance for entry in self.entries}

    def balance_for(self, participant_id: str) -> float:
        """Return the exact balance for ``participant_id``."""

        for entry in self.entries:
            if entry.participant_id == participant_id:
                return entry.balance
        raise UnknownParticipant(participant_id)

    def display_balance(self, participant_id: str, decimals: Optional[int] = None) -> float:
        """Return the balance rounded for UI summaries."""

        if decimals is None:
            decimals = get_settings().currency_decimals
        return round(self.balance_for(participant_id), decimals) + 0.0


def compute_balances(ledger: Ledger) -> BalanceSheet:
    """Compute ``paid - spent`` per participant and accumulate the totals."""

    entries = []
    total_spent = 0.0
    total_paid = 0.0
    for participant in ledger.participants:
        spent = participant.spent
        paid = participant.paid
        total_spent += spent
        total_paid += paid
        entries.append(
            ParticipantBalance(
                participant_id=participant.participant_id,
                name=participant.name,
                spent=spent,
                paid=paid,
            )
        )
    LOGGER.debug(
        "Computed balances for %s participants (spent=%.2f paid=%.2f)",
        len(entries),
        total_spent,
        total_paid,
    )
    return BalanceSheet(entries=tuple(entries), total_spent=total_spent, total_paid=total_paid)
