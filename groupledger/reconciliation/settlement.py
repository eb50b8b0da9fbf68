"""Mini README: Greedy minimum-transaction debt settlement.

Structure:
    * Transfer - a single payment from a debtor to a creditor.
    * settle - two-pointer matching of the largest debtor with the largest
      creditor until every balance is zero.

The solver sorts a private working copy of the balances ascending (debtors
first, creditors last), then repeatedly moves ``min(debt, credit)`` from the
debtor at the left cursor to the creditor at the right cursor. Each step
zeroes at least one side, so ``n`` participants never need more than
``n - 1`` transfers. Transfers are returned in the order they were made.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Union

from ..configuration import get_settings
from ..logging_utils import get_logger
from .balances import ParticipantBalance

LOGGER = get_logger(__name__)

# Residual floating-point error left after a subtraction is treated as zero.
_NOISE_FLOOR = 1e-9


@dataclass(frozen=True, slots=True)
class Transfer:
    """Payment of ``amount`` from ``source`` to ``target`` (participant names)."""

    source: str
    target: str
    amount: float

    def as_dict(self) -> Dict[str, object]:
        return {"from": self.source, "to": self.target, "amount": self.amount}

    def describe(self, currency_symbol: Optional[str] = None, decimals: Optional[int] = None) -> str:
        """Human readable summary, e.g. ``Bob owes Alice $20.00``."""

        settings = get_settings()
        symbol = settings.currency_symbol if currency_symbol is None else currency_symbol
        places = settings.currency_decimals if decimals is None else decimals
        return f"{self.source} owes {self.target} {symbol}{self.amount:.{places}f}"


@dataclass(slots=True)
class _WorkingBalance:
    name: str
    balance: float


BalanceInput = Union[Mapping[str, float], Iterable[ParticipantBalance]]


def _working_copy(balances: BalanceInput) -> List[_WorkingBalance]:
    """Copy the caller's balances so the solver never mutates them."""

    if isinstance(balances, Mapping):
        entries = [_WorkingBalance(name=name, balance=float(value)) for name, value in balances.items()]
    else:
        entries = [_WorkingBalance(name=entry.name, balance=entry.balance) for entry in balances]
    # sorted() is stable, so equal balances keep their original order.
    return sorted(entries, key=lambda entry: entry.balance)


def _snap(value: float) -> float:
    return 0.0 if abs(value) < _NOISE_FLOOR else value


def settle(balances: BalanceInput, decimals: Optional[int] = None) -> List[Transfer]:
    """Return the transfers that bring every balance to zero."""

    if decimals is None:
        decimals = get_settings().currency_decimals
    entries = _working_copy(balances)
    transfers: List[Transfer] = []
    i, j = 0, len(entries) - 1
    while i < j:
        borrower = entries[i]
        lender = entries[j]
        amount = min(-borrower.balance, lender.balance)
        if amount > 0:
            rounded = round(amount, decimals)
            if rounded > 0:
                transfers.append(Transfer(source=borrower.name, target=lender.name, amount=rounded))
            else:
                LOGGER.debug(
                    "Skipped sub-cent transfer %s -> %s (%.6f)", borrower.name, lender.name, amount
                )
            borrower.balance = _snap(borrower.balance + amount)
            lender.balance = _snap(lender.balance - amount)
        if borrower.balance >= 0:
            i += 1
        if lender.balance <= 0:
            j -= 1
    LOGGER.debug("Settlement produced %s transfers for %s participants", len(transfers), len(entries))
    return transfers
