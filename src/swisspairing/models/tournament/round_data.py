"""Data models for a tournament round and its pairings."""

# Swiss Pairing
# Copyright (C) 2025  Swiss Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from swisspairing.constants import BYE
from swisspairing.models.participant import MatchRecord
from swisspairing.utils import generate_id


@dataclass
class Pairing:
    """Two participants paired in a round, or one participant and a bye.

    Attributes
    ----------
    round_number : int
        Round the pairing belongs to.
    sequence_index : int
        1-based display position within the round.
    participant_a : str
        Id of the first participant.
    participant_b : str or None
        Id of the second participant, ``None`` for a bye.
    result : MatchRecord or None
        Participant A's record once the result is in. Empty while the
        pairing awaits its result.
    pairing_id : str
        Unique pairing identifier.
    """

    round_number: int
    sequence_index: int
    participant_a: str
    participant_b: Optional[str] = None
    result: Optional[MatchRecord] = None
    pairing_id: str = field(default_factory=lambda: generate_id("Pairing"))

    @property
    def is_bye(self) -> bool:
        return self.participant_b is None

    @property
    def awaiting_result(self) -> bool:
        return self.result is None

    @property
    def participant_ids(self) -> Tuple[str, ...]:
        if self.participant_b is None:
            return (self.participant_a,)
        return (self.participant_a, self.participant_b)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        return {
            "pairing_id": self.pairing_id,
            "round_number": self.round_number,
            "sequence_index": self.sequence_index,
            "participant_a": self.participant_a,
            "participant_b": self.participant_b,
            "result": self.result.to_dict() if self.result else None,
        }


@dataclass(frozen=True)
class PairingDescriptor:
    """Collaborator-facing view of a pairing.

    ``participant_b_id`` is ``None`` and ``participant_b_name`` is the
    ``BYE`` marker when the pairing is a bye.
    """

    sequence_index: int
    pairing_id: str
    participant_a_id: str
    participant_a_name: str
    participant_b_id: Optional[str]
    participant_b_name: str

    @property
    def is_bye(self) -> bool:
        return self.participant_b_id is None

    def __str__(self) -> str:
        return (
            f"[{self.sequence_index}] {self.participant_a_name} vs "
            f"{self.participant_b_name}"
        )


@dataclass
class RoundData:
    """Container for all data related to a single tournament round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    pairings : list of Pairing
        Match pairings in presentation order.
    bye : Pairing or None
        The bye pairing, resolved when the round is created.
    forced_repeats : list of tuple of str
        Pairs that had already met and were paired again because no fresh
        opponent remained.
    """

    round_number: int
    pairings: List[Pairing] = field(default_factory=list)
    bye: Optional[Pairing] = None
    forced_repeats: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def bye_participant_id(self) -> Optional[str]:
        return self.bye.participant_a if self.bye else None

    @property
    def pending_pairings(self) -> List[Pairing]:
        return [p for p in self.pairings if p.awaiting_result]

    @property
    def is_completed(self) -> bool:
        """Indicates whether every match pairing has a recorded result."""
        return not self.pending_pairings

    def all_pairings(self) -> List[Pairing]:
        """Match pairings followed by the bye, in presentation order."""
        return self.pairings + ([self.bye] if self.bye else [])

    def get_pairing(self, pairing_id: str) -> Optional[Pairing]:
        for pairing in self.all_pairings():
            if pairing.pairing_id == pairing_id:
                return pairing
        return None

    def get_pairing_at(self, sequence_index: int) -> Optional[Pairing]:
        for pairing in self.all_pairings():
            if pairing.sequence_index == sequence_index:
                return pairing
        return None

    def participant_ids(self) -> List[str]:
        return [pid for p in self.all_pairings() for pid in p.participant_ids]

    def descriptors(self, names: Dict[str, str]) -> List[PairingDescriptor]:
        """Build display rows, resolving names through ``names`` (id -> name)."""
        return [
            PairingDescriptor(
                sequence_index=p.sequence_index,
                pairing_id=p.pairing_id,
                participant_a_id=p.participant_a,
                participant_a_name=names[p.participant_a],
                participant_b_id=p.participant_b,
                participant_b_name=(
                    BYE if p.participant_b is None else names[p.participant_b]
                ),
            )
            for p in self.all_pairings()
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round_number": self.round_number,
            "pairings": [p.to_dict() for p in self.pairings],
            "bye": self.bye.to_dict() if self.bye else None,
            "forced_repeats": [list(pair) for pair in self.forced_repeats],
            "is_completed": self.is_completed,
        }
