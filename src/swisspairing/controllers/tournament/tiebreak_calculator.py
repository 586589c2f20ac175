"""Tiebreak calculation for tournaments.

This module computes the tiebreak vector used to order Swiss standings:
match points, opponents' match-win percentage, game-win percentage and
opponents' game-win percentage.
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

from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, List

from swisspairing.constants import TB_GW, TB_MATCH_POINTS, TB_OGW, TB_OMW
from swisspairing.controllers.registry import ParticipantRegistry
from swisspairing.models.participant import Participant
from swisspairing.models.tournament.tournament_config import (
    STANDARD_SCORING,
    ScoringSystem,
)
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)

ZERO = Fraction(0)


@dataclass(frozen=True)
class Tiebreaks:
    """Tiebreak vector for one participant, in ranking priority order."""

    match_points: int
    omw: Fraction
    gw: Fraction
    ogw: Fraction

    def sort_key(self) -> tuple:
        """Descending sort key: negate everything for an ascending sort."""
        return (-self.match_points, -self.omw, -self.gw, -self.ogw)

    def as_dict(self) -> Dict[str, float]:
        return {
            TB_MATCH_POINTS: self.match_points,
            TB_OMW: float(self.omw),
            TB_GW: float(self.gw),
            TB_OGW: float(self.ogw),
        }


class TiebreakCalculator:
    """Calculates tiebreak scores for tournament standings.

    Percentages are exact fractions computed fresh from each participant's
    match records on every call, so two calls on unchanged history always
    agree.

    - MWP: match points / (win points x matches played), floored
    - GWP: game points / (game win points x games played), floored. Byes
      count as games won.
    - OMW%: mean MWP of every opponent faced, byes excluded
    - GW%: the participant's own GWP
    - OGW%: mean GWP of every opponent faced, byes excluded
    """

    def __init__(self, scoring: ScoringSystem = STANDARD_SCORING) -> None:
        self.scoring = scoring

    def match_win_percentage(self, participant: Participant) -> Fraction:
        """Calculate the participant's match win percentage.

        A participant with no matches gets the floor.
        """
        floor = Fraction(self.scoring.match_win_floor)
        if participant.matches_played == 0:
            return floor
        possible = self.scoring.match_win_points * participant.matches_played
        return max(floor, Fraction(participant.match_points, possible))

    def game_win_percentage(self, participant: Participant) -> Fraction:
        """Calculate the participant's game win percentage.

        Game points are awarded per won and drawn game. A participant with
        no games gets the floor.
        """
        floor = Fraction(self.scoring.game_win_floor)
        games_played = participant.games_played
        if games_played == 0:
            return floor
        game_points = (
            self.scoring.game_win_points * participant.games_won
            + self.scoring.game_draw_points * participant.games_drawn
        )
        possible = self.scoring.game_win_points * games_played
        return max(floor, Fraction(game_points, possible))

    def _opponents(
        self, participant: Participant, registry: ParticipantRegistry
    ) -> List[Participant]:
        return [registry.get(opp_id) for opp_id in participant.opponent_ids]

    def opponents_match_win_percentage(
        self, participant: Participant, registry: ParticipantRegistry
    ) -> Fraction:
        """Average match win percentage of all opponents faced, ignoring byes."""
        opponents = self._opponents(participant, registry)
        if not opponents:
            return ZERO
        total = sum((self.match_win_percentage(opp) for opp in opponents), ZERO)
        return total / len(opponents)

    def opponents_game_win_percentage(
        self, participant: Participant, registry: ParticipantRegistry
    ) -> Fraction:
        """Average game win percentage of all opponents faced, ignoring byes."""
        opponents = self._opponents(participant, registry)
        if not opponents:
            return ZERO
        total = sum((self.game_win_percentage(opp) for opp in opponents), ZERO)
        return total / len(opponents)

    def calculate(
        self, participant_id: str, registry: ParticipantRegistry
    ) -> Tiebreaks:
        """Calculate the full tiebreak vector for a single participant.

        Args:
            participant_id: The participant to calculate tiebreaks for
            registry: Registry used for opponent lookups

        Raises:
            UnknownParticipantError: If the participant or an opponent is unknown
        """
        participant = registry.get(participant_id)
        return Tiebreaks(
            match_points=participant.match_points,
            omw=self.opponents_match_win_percentage(participant, registry),
            gw=self.game_win_percentage(participant),
            ogw=self.opponents_game_win_percentage(participant, registry),
        )

    def calculate_all(self, registry: ParticipantRegistry) -> Dict[str, Tiebreaks]:
        """Calculate tiebreaks for all participants (id -> Tiebreaks)."""
        return {pid: self.calculate(pid, registry) for pid in registry.ids()}
