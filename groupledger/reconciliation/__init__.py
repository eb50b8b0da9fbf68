"""Mini README: Balance computation, consistency checks and settlement.

The reconciliation package turns a ``Ledger`` snapshot into balances,
verifies the totals agree, and computes the peer-to-peer transfers that
settle the group. All functions are pure with respect to their inputs.
"""

from .balances import BalanceSheet, ParticipantBalance, compute_balances
from .pipeline import Rejected, Settled, SettlementResult, compute_settlement
from .settlement import Transfer, settle
from .validator import is_consistent, validate

__all__ = [
    "BalanceSheet",
    "ParticipantBalance",
    "Rejected",
    "Settled",
    "SettlementResult",
    "Transfer",
    "compute_balances",
    "compute_settlement",
    "is_consistent",
    "settle",
    "validate",
]
