"""Mini README: End-to-end reconciliation of a ledger snapshot.

Structure:
    * Settled - successful outcome carrying the transfer list.
    * Rejected - failed outcome carrying the ``ImbalancedLedger`` error.
    * compute_settlement - balances -> consistency check -> settlement.

Every call runs the whole pipeline synchronously and returns one of the two
terminal results; callers branch on ``result.ok`` (or ``isinstance``) rather
than inspecting an ad hoc payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from ..errors import ImbalancedLedger
from ..ledger import Ledger
from ..logging_utils import get_logger
from .balances import BalanceSheet, compute_balances
from .settlement import Transfer, settle
from .validator import validate

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Settled:
    """The ledger reconciled; ``transfers`` zero every balance."""

    transfers: Tuple[Transfer, ...]
    sheet: BalanceSheet

    @property
    def ok(self) -> bool:
        return True

    def as_dict(self) -> Dict[str, object]:
        return {"transfers": [transfer.as_dict() for transfer in self.transfers]}


@dataclass(frozen=True, slots=True)
class Rejected:
    """The ledger did not reconcile; no transfers were computed."""

    error: ImbalancedLedger
    sheet: BalanceSheet

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return str(self.error)

    def as_dict(self) -> Dict[str, object]:
        return {"error": self.message}


SettlementResult = Union[Settled, Rejected]


def compute_settlement(
    ledger: Ledger,
    *,
    tolerance: Optional[float] = None,
    decimals: Optional[int] = None,
) -> SettlementResult:
    """Reconcile ``ledger`` and return either ``Settled`` or ``Rejected``."""

    sheet = compute_balances(ledger)
    try:
        validate(sheet.total_spent, sheet.total_paid, tolerance)
    except ImbalancedLedger as error:
        return Rejected(error=error, sheet=sheet)
    transfers: List[Transfer] = settle(sheet.entries, decimals=decimals)
    LOGGER.info("Ledger settled with %s transfers", len(transfers))
    return Settled(transfers=tuple(transfers), sheet=sheet)
