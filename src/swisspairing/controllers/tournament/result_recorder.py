"""Result recording and validation for tournaments.

This module handles recording match results with proper validation and error checking.
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

from typing import Any

from swisspairing.exceptions import (
    DuplicateResultError,
    InvalidScoreError,
    PairingNotFoundError,
)
from swisspairing.models.participant import MatchRecord
from swisspairing.models.tournament.round_data import Pairing
from swisspairing.models.tournament.tournament_state import TournamentState
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating match results.

    This class is responsible for:
    - Validating reported game scores against the scoring system
    - Building mirrored match records for both participants
    - Handling bye results
    - Preventing duplicate result recording

    Every check runs before any state is touched, so a rejected result
    leaves the tournament exactly as it was.
    """

    def record_result(
        self,
        state: TournamentState,
        pairing_id: str,
        self_score: Any,
        opponent_score: Any,
    ) -> MatchRecord:
        """Record the result of a pairing in the current round.

        Args:
            state: The tournament state to update
            pairing_id: Id of the pairing
            self_score: Games won by the pairing's first participant
            opponent_score: Games won by the pairing's second participant

        Returns:
            The first participant's MatchRecord

        Raises:
            PairingNotFoundError: If the pairing is not in the current round
            DuplicateResultError: If the pairing already has a result
            InvalidScoreError: If the score pair is not accepted
        """
        round_data = state.current_round_data
        pairing = round_data.get_pairing(pairing_id) if round_data else None
        if pairing is None:
            logger.error(f"Cannot find pairing {pairing_id} in the current round")
            raise PairingNotFoundError(pairing_id)
        return self._record(state, pairing, self_score, opponent_score)

    def record_result_at(
        self,
        state: TournamentState,
        sequence_index: int,
        self_score: Any,
        opponent_score: Any,
    ) -> MatchRecord:
        """Record a result by the pairing's display position in the current round."""
        round_data = state.current_round_data
        pairing = round_data.get_pairing_at(sequence_index) if round_data else None
        if pairing is None:
            logger.error(
                f"Cannot find pairing #{sequence_index} in the current round"
            )
            raise PairingNotFoundError(sequence_index)
        return self._record(state, pairing, self_score, opponent_score)

    def _record(
        self,
        state: TournamentState,
        pairing: Pairing,
        self_score: Any,
        opponent_score: Any,
    ) -> MatchRecord:
        if not pairing.awaiting_result:
            logger.warning(f"Result for pairing {pairing.pairing_id} already recorded")
            raise DuplicateResultError(pairing.pairing_id)

        scoring = state.config.scoring
        if not scoring.is_valid_score(self_score, opponent_score):
            logger.warning(
                f"Rejected score {self_score}-{opponent_score} "
                f"for pairing {pairing.pairing_id}"
            )
            raise InvalidScoreError(self_score, opponent_score, pairing.pairing_id)

        registry = state.registry
        first = registry.get(pairing.participant_a)
        second = registry.get(pairing.participant_b)

        first_points, second_points = scoring.match_points(self_score, opponent_score)
        drawn = scoring.drawn_games(self_score, opponent_score)

        first_record = MatchRecord(
            round_number=pairing.round_number,
            opponent_id=second.id,
            games_won=self_score,
            games_lost=opponent_score,
            games_drawn=drawn,
            match_points=first_points,
        )
        second_record = MatchRecord(
            round_number=pairing.round_number,
            opponent_id=first.id,
            games_won=opponent_score,
            games_lost=self_score,
            games_drawn=drawn,
            match_points=second_points,
        )

        registry.apply_result(first.id, first_record)
        registry.apply_result(second.id, second_record)
        pairing.result = first_record

        logger.debug(
            f"Recorded: {first.name} ({self_score}) vs {second.name} ({opponent_score})"
        )
        return first_record

    def record_bye(self, state: TournamentState, pairing: Pairing) -> MatchRecord:
        """Award the bye for a bye pairing.

        The bye counts as a match win by the configured number of games,
        with no opponent.

        Raises:
            DuplicateResultError: If the bye was already awarded
        """
        if not pairing.awaiting_result:
            logger.warning(
                f"Bye for pairing {pairing.pairing_id} appears to already be recorded"
            )
            raise DuplicateResultError(pairing.pairing_id)

        scoring = state.config.scoring
        record = MatchRecord(
            round_number=pairing.round_number,
            opponent_id=None,
            games_won=scoring.bye_games_won,
            games_lost=0,
            games_drawn=0,
            match_points=scoring.bye_match_points,
        )
        state.registry.apply_result(pairing.participant_a, record)
        state.bye_recipients.add(pairing.participant_a)
        pairing.result = record

        logger.debug(
            f"Recorded bye for {state.registry.get(pairing.participant_a).name} "
            f"(points: {record.match_points})"
        )
        return record
