"""Mini README: Stateful facade consumed by presentation layers.

Structure:
    * LedgerSession - owns the current ``Ledger`` snapshot and exposes the
      add/remove/balance/settlement contract used by forms and dialogs.

The session is the single writer: each mutation builds a new snapshot from
the previous one and swaps it in only when the operation succeeded, so a
rejected amount or an unknown participant leaves the visible state exactly
as it was. Balances and settlements are recomputed from scratch on request.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .ledger import AmountInput, Ledger, Participant
from .logging_utils import get_logger
from .reconciliation import BalanceSheet, SettlementResult, compute_balances, compute_settlement

LOGGER = get_logger(__name__)


class LedgerSession:
    """Hold the in-memory ledger for the lifetime of the process."""

    def __init__(
        self,
        ledger: Optional[Ledger] = None,
        *,
        tolerance: Optional[float] = None,
        decimals: Optional[int] = None,
    ) -> None:
        self._ledger = ledger if ledger is not None else Ledger()
        self.tolerance = tolerance
        self.decimals = decimals
        LOGGER.debug("Ledger session initialised with %s participants", len(self._ledger))

    @property
    def ledger(self) -> Ledger:
        """Current immutable snapshot."""

        return self._ledger

    def participants(self) -> List[Participant]:
        return list(self._ledger.participants)

    def add_participant(self, name: str) -> str:
        self._ledger, participant_id = self._ledger.add_participant(name)
        return participant_id

    def add_expense(self, participant_id: str, name: str, amount_text: AmountInput) -> None:
        self._ledger = self._ledger.add_expense(participant_id, name, amount_text)

    def add_payment(self, participant_id: str, amount_text: AmountInput) -> None:
        self._ledger = self._ledger.add_payment(participant_id, amount_text)

    def remove_participant(self, participant_id: str) -> None:
        self._ledger = self._ledger.remove_participant(participant_id)

    def balance_sheet(self) -> BalanceSheet:
        return compute_balances(self._ledger)

    def get_display_balance(self, participant_id: str) -> float:
        """Paid minus spent for ``participant_id``, rounded for list summaries."""

        return self.balance_sheet().display_balance(participant_id, self.decimals)

    def compute_settlement(self) -> SettlementResult:
        """Run the full reconciliation pipeline on the current snapshot."""

        return compute_settlement(self._ledger, tolerance=self.tolerance, decimals=self.decimals)

    def summary(self) -> List[Dict[str, object]]:
        """Participant rows with display balances for list views."""

        sheet = self.balance_sheet()
        return [
            {
                "participant_id": entry.participant_id,
                "name": entry.name,
                "spent": entry.spent,
                "paid": entry.paid,
                "balance": sheet.display_balance(entry.participant_id, self.decimals),
            }
            for entry in sheet.entries
        ]
