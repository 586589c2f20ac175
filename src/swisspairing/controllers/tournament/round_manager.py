"""Round management for tournaments.

This module handles all round-related operations including pairing generation,
bye allocation, presentation order and round progression.
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
from typing import Optional

from swisspairing.controllers.tournament.result_recorder import ResultRecorder
from swisspairing.controllers.tournament.standings import StandingsRanker
from swisspairing.exceptions import (
    InsufficientParticipantsError,
    RoundInProgressError,
    TournamentCompleteError,
)
from swisspairing.models.tournament.round_data import Pairing, RoundData
from swisspairing.models.tournament.tournament_state import TournamentState
from swisspairing.pairing.swiss import create_swiss_pairings, nearest_available_opponent
from swisspairing.type_hints import RepeatPolicy
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Manages round progression and pairing generation for tournaments.

    This class is responsible for:
    - Checking the tournament can move on to another round
    - Ranking participants and handing the ranking to the pairing system
    - Awarding the bye through the ResultRecorder
    - Shuffling pairings into presentation order
    """

    def __init__(
        self,
        ranker: StandingsRanker,
        result_recorder: ResultRecorder,
        rng: Optional[random.Random] = None,
        repeat_policy: RepeatPolicy = nearest_available_opponent,
    ):
        """Initialize the round manager.

        Args:
            ranker: Produces the ranking the pairings are built from
            result_recorder: Awards the bye
            rng: Random source for presentation order
            repeat_policy: Picks an opponent when no never-met opponent remains
        """
        self.ranker = ranker
        self.result_recorder = result_recorder
        self.rng = rng or random.Random()
        self.repeat_policy = repeat_policy

    def create_next_round(self, state: TournamentState) -> RoundData:
        """Generate pairings for the next round.

        Args:
            state: The tournament state, updated in place

        Returns:
            The new round's data, pairings in presentation order

        Raises:
            InsufficientParticipantsError: If fewer than two participants are registered
            RoundInProgressError: If the current round still awaits results
            TournamentCompleteError: If all planned rounds have been created
        """
        if len(state.registry) < 2:
            raise InsufficientParticipantsError(len(state.registry))

        current = state.current_round_data
        if current is not None and not current.is_completed:
            pending = len(current.pending_pairings)
            logger.warning(
                f"Cannot create a new round: round {current.round_number} "
                f"has {pending} pending result(s)"
            )
            raise RoundInProgressError(current.round_number, pending)

        if state.current_round >= state.total_rounds:
            logger.warning(
                f"Cannot create more rounds: already at {state.total_rounds} rounds"
            )
            raise TournamentCompleteError(state.total_rounds)

        round_number = state.current_round + 1
        ranking = self.ranker.ranking(state)

        logger.info(
            f"Creating round {round_number}/{state.total_rounds} "
            f"with {len(ranking)} participants"
        )

        result = create_swiss_pairings(
            ranking,
            state.pairing_history,
            state.bye_recipients,
            round_number,
            repeat_policy=self.repeat_policy,
            max_backtracks=state.config.max_pairing_backtracks,
        )

        # Presentation order only, membership is already fixed
        ordered = list(result.pairings)
        self.rng.shuffle(ordered)

        round_data = RoundData(
            round_number=round_number,
            pairings=[
                Pairing(
                    round_number=round_number,
                    sequence_index=index,
                    participant_a=first,
                    participant_b=second,
                )
                for index, (first, second) in enumerate(ordered, start=1)
            ],
            forced_repeats=list(result.forced_repeats),
        )

        if result.bye_participant_id is not None:
            round_data.bye = Pairing(
                round_number=round_number,
                sequence_index=len(ordered) + 1,
                participant_a=result.bye_participant_id,
            )
            self.result_recorder.record_bye(state, round_data.bye)
            logger.info(
                f"Assigning bye to: "
                f"{state.registry.get(result.bye_participant_id).name}"
            )

        state.rounds.append(round_data)
        state.current_round = round_number

        logger.info(
            f"Created round {round_number}: {len(round_data.pairings)} pairings, "
            f"bye: {round_data.bye_participant_id or 'None'}"
        )
        return round_data
