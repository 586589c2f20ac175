"""Main Tournament class - orchestrates all tournament operations.

This is the primary interface for tournament management, coordinating the
specialized controllers around a single TournamentState.
"""

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

import random
from typing import Any, Dict, Iterable, List, Optional

from swisspairing.controllers.tournament import (
    ResultRecorder,
    RoundManager,
    StandingsRanker,
    StandingsRow,
    TiebreakCalculator,
    Tiebreaks,
)
from swisspairing.models.participant import MatchRecord, Participant
from swisspairing.models.tournament.round_data import PairingDescriptor, RoundData
from swisspairing.models.tournament.tournament_config import TournamentConfig
from swisspairing.models.tournament.tournament_state import TournamentState
from swisspairing.pairing.swiss import nearest_available_opponent
from swisspairing.type_hints import RepeatPolicy
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


class Tournament:
    """Main tournament management class.

    This class coordinates all tournament operations through specialized managers:
    - RoundManager: handles round creation, pairing and the bye
    - ResultRecorder: manages result entry and validation
    - TiebreakCalculator: computes tiebreak scores
    - StandingsRanker: orders participants for pairing and for display

    All randomness (presentation order, full-tie resolution) comes from one
    ``random.Random``, so a seeded tournament replays identically.
    """

    def __init__(
        self,
        names: Iterable[str],
        config: Optional[TournamentConfig] = None,
        rng: Optional[random.Random] = None,
        repeat_policy: RepeatPolicy = nearest_available_opponent,
    ) -> None:
        """Initialize a new tournament.

        Args
        ----
        names: Display names of the participants, in registration order
        config: Tournament configuration, defaults to TournamentConfig()
        rng: Random source, defaults to random.Random(config.seed)
        repeat_policy: Picks an opponent when no never-met opponent remains

        Raises
        ------
        InvalidConfigurationError, InvalidParticipantNameError,
        DuplicateNameError, InsufficientParticipantsError
        """
        self.state = TournamentState.create(names, config)
        self.rng = rng if rng is not None else random.Random(self.config.seed)

        # Specialized managers
        self.tiebreak_calculator = TiebreakCalculator(self.config.scoring)
        self.ranker = StandingsRanker(self.tiebreak_calculator, self.rng)
        self.result_recorder = ResultRecorder()
        self.round_manager = RoundManager(
            ranker=self.ranker,
            result_recorder=self.result_recorder,
            rng=self.rng,
            repeat_policy=repeat_policy,
        )

        logger.info(
            f"Created tournament '{self.config.name}' with "
            f"{len(self.state.registry)} participants, "
            f"{self.num_rounds} rounds"
        )

    # ========== Properties ==========

    @property
    def config(self) -> TournamentConfig:
        return self.state.config

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.config.name

    @property
    def num_rounds(self) -> int:
        """Get the planned number of rounds."""
        return self.state.total_rounds

    @property
    def current_round(self) -> int:
        """Number of the latest created round, 0 before the first one."""
        return self.state.current_round

    @property
    def is_complete(self) -> bool:
        """Is the tournament over?"""
        return self.state.is_complete

    @property
    def participants(self) -> List[Participant]:
        """Participants in registration order."""
        return self.state.registry.participants()

    # ========== Participants ==========

    def get_participant(self, participant_id: str) -> Participant:
        """Look a participant up by id.

        Raises:
            UnknownParticipantError: If the id is not registered
        """
        return self.state.registry.get(participant_id)

    def participant_names(self) -> Dict[str, str]:
        return self.state.registry.names()

    # ========== Round Management ==========

    def next_round(self) -> List[PairingDescriptor]:
        """Generate pairings for the next round.

        Returns:
            Descriptors in presentation order, the bye (if any) last

        Raises:
            RoundInProgressError: If the current round still awaits results
            TournamentCompleteError: If all planned rounds have been created
        """
        round_data = self.round_manager.create_next_round(self.state)
        return round_data.descriptors(self.participant_names())

    def get_round(self, round_number: int) -> RoundData:
        """Get data for a specific round (1-indexed).

        Raises:
            RoundNotFoundError: If the round has not been created
        """
        return self.state.get_round(round_number)

    def get_pairings(
        self, round_number: Optional[int] = None
    ) -> List[PairingDescriptor]:
        """Descriptors of a round's pairings, the current round by default."""
        if round_number is None:
            round_number = self.current_round
        return self.get_round(round_number).descriptors(self.participant_names())

    def pending_pairings(self) -> List[PairingDescriptor]:
        """Pairings of the current round still awaiting a result."""
        round_data = self.state.current_round_data
        if round_data is None:
            return []
        return [
            descriptor
            for descriptor, pairing in zip(
                round_data.descriptors(self.participant_names()),
                round_data.all_pairings(),
            )
            if pairing.awaiting_result
        ]

    # ========== Result Management ==========

    def record_result(
        self, pairing_id: str, self_score: Any, opponent_score: Any
    ) -> MatchRecord:
        """Record a result for a pairing of the current round.

        Args:
            pairing_id: Id from the pairing's descriptor
            self_score: Games won by the descriptor's participant A
            opponent_score: Games won by the descriptor's participant B

        Returns:
            Participant A's MatchRecord

        Raises:
            PairingNotFoundError, DuplicateResultError, InvalidScoreError
        """
        return self.result_recorder.record_result(
            self.state, pairing_id, self_score, opponent_score
        )

    def record_result_at(
        self, sequence_index: int, self_score: Any, opponent_score: Any
    ) -> MatchRecord:
        """Record a result by display position, as shown by next_round()."""
        return self.result_recorder.record_result_at(
            self.state, sequence_index, self_score, opponent_score
        )

    # ========== Standings and Tiebreaks ==========

    def compute_tiebreakers(self) -> Dict[str, Tiebreaks]:
        """Calculate tiebreak scores for all participants (id -> Tiebreaks)."""
        return self.tiebreak_calculator.calculate_all(self.state.registry)

    def get_standings(self) -> List[StandingsRow]:
        """Get current tournament standings.

        Returns:
            Rows sorted by rank (best to worst)
        """
        return self.ranker.standings(self.state)

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the tournament to dictionary."""
        return self.state.to_dict()
