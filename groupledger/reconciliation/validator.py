"""Mini README: Consistency check run before any settlement.

Settlement only makes sense when everything that was spent has been paid
into the pool. ``validate`` raises ``ImbalancedLedger`` when the totals
differ by more than the tolerance, which defaults to the configured
``balance_tolerance`` (0.01) and absorbs floating-point noise.
"""

from __future__ import annotations

from typing import Optional

from ..configuration import get_settings
from ..errors import ImbalancedLedger
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def _resolve_tolerance(tolerance: Optional[float]) -> float:
    if tolerance is None:
        return get_settings().balance_tolerance
    if tolerance < 0:
        raise ValueError("Tolerance must not be negative.")
    return tolerance


def is_consistent(total_spent: float, total_paid: float, tolerance: Optional[float] = None) -> bool:
    """Return whether the totals reconcile within ``tolerance``."""

    return abs(total_spent - total_paid) <= _resolve_tolerance(tolerance)


def validate(total_spent: float, total_paid: float, tolerance: Optional[float] = None) -> None:
    """Raise ``ImbalancedLedger`` unless the totals reconcile."""

    if not is_consistent(total_spent, total_paid, tolerance):
        LOGGER.warning(
            "Ledger imbalanced: spent=%.2f paid=%.2f", total_spent, total_paid
        )
        raise ImbalancedLedger(total_spent=total_spent, total_paid=total_paid)
