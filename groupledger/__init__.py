"""Mini README: Package initializer for the groupledger expense engine.

The package tracks shared expenses and payments for a group and works out
who owes whom. Convenience imports below expose the session facade used by
presentation layers together with the pure engine functions so callers do
not need to know the exact module structure.
"""

from .errors import (
    ImbalancedLedger,
    InvalidAmount,
    InvalidParticipantName,
    LedgerError,
    UnknownParticipant,
)
from .ledger import Expense, Ledger, Participant, parse_amount
from .logging_utils import get_logger
from .reconciliation import (
    BalanceSheet,
    Rejected,
    Settled,
    Transfer,
    compute_balances,
    compute_settlement,
    settle,
    validate,
)
from .session import LedgerSession

__all__ = [
    "BalanceSheet",
    "Expense",
    "ImbalancedLedger",
    "InvalidAmount",
    "InvalidParticipantName",
    "Ledger",
    "LedgerError",
    "LedgerSession",
    "Participant",
    "Rejected",
    "Settled",
    "Transfer",
    "UnknownParticipant",
    "compute_balances",
    "compute_settlement",
    "get_logger",
    "parse_amount",
    "settle",
    "validate",
]
