"""Mini README: Ledger data model for shared group expenses.

Exports the immutable ``Ledger`` value with its participants, expenses and
payments, plus ``parse_amount`` which validates every amount before it is
stored.
"""

from .amounts import AmountInput, parse_amount
from .models import Expense, Ledger, Participant

__all__ = ["AmountInput", "Expense", "Ledger", "Participant", "parse_amount"]
