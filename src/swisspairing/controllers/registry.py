"""Participant registry: owns participants and their cumulative state."""

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

from typing import Dict, Iterable, Iterator, List, Optional

from swisspairing.exceptions import (
    DuplicateNameError,
    InvalidParticipantNameError,
    UnknownParticipantError,
)
from swisspairing.models.participant import MatchRecord, Participant
from swisspairing.utils import generate_id, setup_logger

logger = setup_logger(__name__)


class ParticipantRegistry:
    """Holds participant identities and per-participant cumulative state.

    This class is responsible for:
    - Assigning stable, unique participant ids
    - Looking participants up by id
    - Applying match records to cumulative totals

    Score legality is not checked here. Validation belongs to the
    ResultRecorder.
    """

    def __init__(self, allow_duplicate_names: bool = False) -> None:
        """Initialize an empty registry.

        Args:
            allow_duplicate_names: Treat names as non-unique display labels
                instead of rejecting repeats
        """
        self.allow_duplicate_names = allow_duplicate_names
        # insertion ordered: registration order
        self._participants: Dict[str, Participant] = {}

    def register(self, name: str) -> str:
        """Register a participant.

        Args:
            name: Display name, surrounding whitespace is stripped

        Returns:
            The new participant's id

        Raises:
            InvalidParticipantNameError: If the name is empty or not a string
            DuplicateNameError: If the name is taken and duplicates are not allowed
        """
        if not isinstance(name, str) or not name.strip():
            logger.warning("Rejected participant name: %r", name)
            raise InvalidParticipantNameError(
                f"Participant name must be a non-empty string, got {name!r}"
            )
        name = name.strip()

        if not self.allow_duplicate_names and self.find_by_name(name) is not None:
            logger.warning("Rejected duplicate participant name: %s", name)
            raise DuplicateNameError(name)

        participant = Participant(id=generate_id(Participant.__name__), name=name)
        self._participants[participant.id] = participant
        logger.info(f"Registered participant: {participant.name} ({participant.id})")
        return participant.id

    def register_all(self, names: Iterable[str]) -> List[str]:
        """Register several participants in order, returning their ids."""
        return [self.register(name) for name in names]

    def get(self, participant_id: str) -> Participant:
        """Look a participant up by id.

        Raises:
            UnknownParticipantError: If the id is not registered
        """
        try:
            return self._participants[participant_id]
        except KeyError:
            raise UnknownParticipantError(participant_id) from None

    def find_by_name(self, name: str) -> Optional[Participant]:
        """Return the first participant registered under ``name``, if any."""
        for participant in self._participants.values():
            if participant.name == name:
                return participant
        return None

    def apply_result(self, participant_id: str, record: MatchRecord) -> None:
        """Append a match record to a participant's history.

        Raises:
            UnknownParticipantError: If the id is not registered
        """
        participant = self.get(participant_id)
        participant.add_match_record(record)
        logger.debug(
            f"Applied round {record.round_number} result to {participant.name}: "
            f"{record.score_display} ({record.match_points} pts, "
            f"total {participant.match_points})"
        )

    def ids(self) -> List[str]:
        """Participant ids in registration order."""
        return list(self._participants)

    def participants(self) -> List[Participant]:
        return list(self._participants.values())

    def names(self) -> Dict[str, str]:
        """Mapping of participant id to display name."""
        return {pid: p.name for pid, p in self._participants.items()}

    def __len__(self) -> int:
        return len(self._participants)

    def __contains__(self, participant_id: object) -> bool:
        return participant_id in self._participants

    def __iter__(self) -> Iterator[Participant]:
        return iter(self._participants.values())
