"""Standings ranking for tournaments."""

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
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from swisspairing.controllers.registry import ParticipantRegistry
from swisspairing.controllers.tournament.tiebreak_calculator import (
    TiebreakCalculator,
    Tiebreaks,
)
from swisspairing.models.tournament.tournament_state import (
    TournamentState,
    required_rounds,
)

__all__ = ["StandingsRanker", "StandingsRow", "required_rounds"]


@dataclass(frozen=True)
class StandingsRow:
    """One line of the standings table."""

    rank: int
    participant_id: str
    name: str
    match_points: int
    omw: float
    gw: float
    ogw: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rank": self.rank,
            "participant_id": self.participant_id,
            "name": self.name,
            "match_points": self.match_points,
            "omw": self.omw,
            "gw": self.gw,
            "ogw": self.ogw,
        }


class StandingsRanker:
    """Orders participants by match points, then OMW%, GW% and OGW%.

    Participants still tied on all four are ordered by the injected random
    source. The shuffle happens on every call, so true ties are resolved
    afresh each time rather than inheriting a previous order.
    """

    def __init__(
        self,
        tiebreak_calculator: Optional[TiebreakCalculator] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.tiebreak_calculator = tiebreak_calculator or TiebreakCalculator()
        self.rng = rng or random.Random()

    required_rounds = staticmethod(required_rounds)

    def _ranked(self, registry: ParticipantRegistry) -> List[Tuple[str, Tiebreaks]]:
        tiebreaks = self.tiebreak_calculator.calculate_all(registry)
        ids = registry.ids()
        # Shuffle first, the stable sort keeps the random order among full ties
        self.rng.shuffle(ids)
        ids.sort(key=lambda pid: tiebreaks[pid].sort_key())
        return [(pid, tiebreaks[pid]) for pid in ids]

    def ranking(self, state: TournamentState) -> List[str]:
        """Participant ids, best ranked first."""
        return [pid for pid, _ in self._ranked(state.registry)]

    def standings(self, state: TournamentState) -> List[StandingsRow]:
        """Full standings table, best ranked first."""
        registry = state.registry
        rows = []
        for rank, (pid, tb) in enumerate(self._ranked(registry), start=1):
            rows.append(
                StandingsRow(
                    rank=rank,
                    participant_id=pid,
                    name=registry.get(pid).name,
                    match_points=tb.match_points,
                    omw=float(tb.omw),
                    gw=float(tb.gw),
                    ogw=float(tb.ogw),
                )
            )
        return rows
