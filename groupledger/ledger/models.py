"""Mini README: Ledger value types and their mutation operations.

Structure:
    * Expense - labelled amount a participant consumed.
    * Participant - a member of the group with owned expenses and payments.
    * Ledger - immutable snapshot of all participants plus the id sequence.

Every ``Ledger`` method that changes state returns a brand new ledger and
leaves the receiver untouched, so presentation code can keep the previous
snapshot, replace it after each call, and hand any snapshot to the
reconciliation functions without worrying about shared mutation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Dict, Iterator, List, Tuple

from ..errors import InvalidParticipantName, UnknownParticipant
from ..logging_utils import get_logger
from .amounts import AmountInput, parse_amount

LOGGER = get_logger(__name__)

PARTICIPANT_ID_PREFIX = "person"
_ID_PATTERN = re.compile(rf"{PARTICIPANT_ID_PREFIX}_(\d+)", re.ASCII)


def _sequence_of(participant_id: str) -> int:
    """Numeric suffix of a minted id, or 0 for ids minted elsewhere."""

    match = _ID_PATTERN.fullmatch(participant_id)
    return int(match.group(1)) if match else 0


def _name_key(name: str) -> str:
    return name.strip().casefold()


@dataclass(frozen=True, slots=True)
class Expense:
    """Item a participant is responsible for."""

    name: str
    amount: float

    def as_dict(self) -> Dict[str, object]:
        return {"name": self.name, "amount": self.amount}


@dataclass(frozen=True, slots=True)
class Participant:
    """Group member owning their expenses and payments."""

    participant_id: str
    name: str
    items: Tuple[Expense, ...] = ()
    payments: Tuple[float, ...] = ()

    @property
    def spent(self) -> float:
        """Sum of the participant's expense amounts."""

        return sum((item.amount for item in self.items), 0.0)

    @property
    def paid(self) -> float:
        """Sum of the participant's payments toward the shared pool."""

        return sum(self.payments, 0.0)

    def as_dict(self) -> Dict[str, object]:
        """Export the participant with serialisable values."""

        return {
            "participant_id": self.participant_id,
            "name": self.name,
            "items": [item.as_dict() for item in self.items],
            "payments": list(self.payments),
        }


@dataclass(frozen=True, slots=True)
class Ledger:
    """Immutable record of every participant and what they spent and paid."""

    participants: Tuple[Participant, ...] = ()
    sequence: int = field(default=0)

    def __post_init__(self) -> None:
        ids = [p.participant_id for p in self.participants]
        if len(set(ids)) != len(ids):
            raise ValueError("Participant ids must be unique.")
        names = [_name_key(p.name) for p in self.participants]
        if len(set(names)) != len(names):
            raise InvalidParticipantName("Participant names must be unique.")
        # Never mint an id at or below one already present.
        highest = max((_sequence_of(participant_id) for participant_id in ids), default=0)
        if self.sequence < highest:
            object.__setattr__(self, "sequence", highest)

    def __len__(self) -> int:
        return len(self.participants)

    def __iter__(self) -> Iterator[Participant]:
        return iter(self.participants)

    def has_participant(self, participant_id: str) -> bool:
        return any(p.participant_id == participant_id for p in self.participants)

    def get_participant(self, participant_id: str) -> Participant:
        """Retrieve a participant, raising ``UnknownParticipant`` when missing."""

        for participant in self.participants:
            if participant.participant_id == participant_id:
                return participant
        raise UnknownParticipant(participant_id)

    def add_participant(self, name: str) -> Tuple["Ledger", str]:
        """Return a ledger with a new, empty participant and the minted id."""

        cleaned = name.strip() if isinstance(name, str) else ""
        if not cleaned:
            LOGGER.warning("Rejected participant with empty name %r", name)
            raise InvalidParticipantName("Participant name must not be empty.")
        if any(_name_key(p.name) == _name_key(cleaned) for p in self.participants):
            LOGGER.warning("Rejected duplicate participant name %r", cleaned)
            raise InvalidParticipantName(f"A participant named '{cleaned}' already exists.")
        sequence = self.sequence + 1
        participant_id = f"{PARTICIPANT_ID_PREFIX}_{sequence:04d}"
        participant = Participant(participant_id=participant_id, name=cleaned)
        LOGGER.info("Added participant %s (%s)", participant_id, cleaned)
        return replace(self, participants=self.participants + (participant,), sequence=sequence), participant_id

    def add_expense(self, participant_id: str, name: str, amount: AmountInput) -> "Ledger":
        """Return a ledger with ``{name, amount}`` appended to the participant's items."""

        participant = self.get_participant(participant_id)
        expense = Expense(name=str(name).strip(), amount=parse_amount(amount))
        updated = replace(participant, items=participant.items + (expense,))
        LOGGER.info(
            "Recorded expense '%s' of %.2f for %s", expense.name, expense.amount, participant_id
        )
        return self._swap(updated)

    def add_payment(self, participant_id: str, amount: AmountInput) -> "Ledger":
        """Return a ledger with ``amount`` appended to the participant's payments."""

        participant = self.get_participant(participant_id)
        value = parse_amount(amount)
        updated = replace(participant, payments=participant.payments + (value,))
        LOGGER.info("Recorded payment of %.2f for %s", value, participant_id)
        return self._swap(updated)

    def remove_participant(self, participant_id: str) -> "Ledger":
        """Return a ledger without the participant; absent ids are a no-op."""

        remaining = tuple(p for p in self.participants if p.participant_id != participant_id)
        if len(remaining) == len(self.participants):
            LOGGER.debug("Removal of absent participant %s ignored", participant_id)
            return self
        LOGGER.info("Removed participant %s", participant_id)
        return replace(self, participants=remaining)

    def _swap(self, updated: Participant) -> "Ledger":
        participants: List[Participant] = [
            updated if p.participant_id == updated.participant_id else p for p in self.participants
        ]
        return replace(self, participants=tuple(participants))

    def as_dict(self) -> Dict[str, object]:
        """Export the snapshot for JSON responses."""

        return {"participants": [participant.as_dict() for participant in self.participants]}
