"""The explicit state value every core tournament operation works on."""

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
from typing import Any, Dict, Iterable, List, Optional, Set

from swisspairing.controllers.registry import ParticipantRegistry
from swisspairing.exceptions import InsufficientParticipantsError, RoundNotFoundError
from swisspairing.models.tournament.pairing_history import PairingHistory
from swisspairing.models.tournament.round_data import RoundData
from swisspairing.models.tournament.tournament_config import TournamentConfig


def required_rounds(participant_count: int) -> int:
    """Number of Swiss rounds for a field: ceil(log2(n)), minimum 1.

    >>> [required_rounds(n) for n in (1, 2, 3, 4, 5, 8, 9)]
    [1, 1, 2, 2, 3, 3, 4]
    """
    if participant_count <= 2:
        return 1
    # (n - 1).bit_length() == ceil(log2(n)) for n >= 2, without float error
    return (participant_count - 1).bit_length()


@dataclass
class TournamentState:
    """All mutable state of one tournament.

    Attributes
    ----------
    config : TournamentConfig
        Tournament configuration.
    registry : ParticipantRegistry
        Participants and their cumulative results.
    total_rounds : int
        Planned number of rounds.
    current_round : int
        Number of the latest created round, 0 before the first round.
    pairing_history : PairingHistory
        Every pairing realised so far.
    bye_recipients : set of str
        Ids of participants who already received a bye.
    rounds : list of RoundData
        Created rounds in order.
    """

    config: TournamentConfig
    registry: ParticipantRegistry
    total_rounds: int
    current_round: int = 0
    pairing_history: PairingHistory = field(default_factory=PairingHistory)
    bye_recipients: Set[str] = field(default_factory=set)
    rounds: List[RoundData] = field(default_factory=list)

    @classmethod
    def create(
        cls, names: Iterable[str], config: Optional[TournamentConfig] = None
    ) -> "TournamentState":
        """Register participants and plan the number of rounds.

        Raises:
            InvalidConfigurationError: If the configuration is unusable
            InvalidParticipantNameError, DuplicateNameError: On bad names
            InsufficientParticipantsError: If fewer than two names are given
        """
        config = config or TournamentConfig()
        config.validate()
        registry = ParticipantRegistry(
            allow_duplicate_names=config.allow_duplicate_names
        )
        registry.register_all(names)
        if len(registry) < 2:
            raise InsufficientParticipantsError(len(registry))

        total_rounds = config.num_rounds or required_rounds(len(registry))
        return cls(config=config, registry=registry, total_rounds=total_rounds)

    @property
    def current_round_data(self) -> Optional[RoundData]:
        return self.rounds[-1] if self.rounds else None

    @property
    def is_complete(self) -> bool:
        """True once the planned rounds exist and the last one has all results."""
        last = self.current_round_data
        return (
            self.current_round >= self.total_rounds
            and last is not None
            and last.is_completed
        )

    def get_round(self, round_number: int) -> RoundData:
        """Get data for a specific round (1-indexed).

        Raises:
            RoundNotFoundError: If the round has not been created
        """
        if 1 <= round_number <= len(self.rounds):
            return self.rounds[round_number - 1]
        raise RoundNotFoundError(f"Round {round_number} does not exist")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the tournament state to dictionary."""
        return {
            "config": self.config.to_dict(),
            "total_rounds": self.total_rounds,
            "current_round": self.current_round,
            "participants": [p.to_dict() for p in self.registry],
            "pairing_history": self.pairing_history.to_dict(),
            "bye_recipients": sorted(self.bye_recipients),
            "rounds": [r.to_dict() for r in self.rounds],
        }
