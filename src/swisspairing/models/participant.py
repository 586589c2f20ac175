"""A tournament participant and the per-round match records it accumulates."""

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
from enum import Enum
from typing import Any, Dict, List, Optional

from swisspairing.constants import OUTCOME_DRAW, OUTCOME_LOSS, OUTCOME_WIN


class Outcome(Enum):
    """Match outcome from one participant's point of view."""

    WIN = OUTCOME_WIN
    DRAW = OUTCOME_DRAW
    LOSS = OUTCOME_LOSS

    @classmethod
    def from_games(cls, games_won: int, games_lost: int) -> "Outcome":
        """Derive the match outcome from the game score."""
        if games_won > games_lost:
            return cls.WIN
        if games_won < games_lost:
            return cls.LOSS
        return cls.DRAW


@dataclass(frozen=True)
class MatchRecord:
    """The result of one round for one participant.

    Attributes
    ----------
    round_number : int
        Round the match was played in (1-indexed).
    opponent_id : str or None
        Id of the opponent, ``None`` for a bye.
    games_won : int
        Games won by this participant.
    games_lost : int
        Games won by the opponent.
    games_drawn : int
        Drawn games inside the match.
    match_points : int
        Match points awarded for this round.

    Notes
    -----
    Records are write-once. Results are never edited or removed.
    """

    round_number: int
    opponent_id: Optional[str]
    games_won: int
    games_lost: int
    games_drawn: int
    match_points: int

    @property
    def outcome(self) -> Outcome:
        return Outcome.from_games(self.games_won, self.games_lost)

    @property
    def is_bye(self) -> bool:
        return self.opponent_id is None

    @property
    def games_played(self) -> int:
        return self.games_won + self.games_lost + self.games_drawn

    @property
    def score_display(self) -> str:
        """Score as shown to users, e.g. ``2-1``."""
        return f"{self.games_won}-{self.games_lost}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match record to dictionary."""
        return {
            "round_number": self.round_number,
            "opponent_id": self.opponent_id,
            "games_won": self.games_won,
            "games_lost": self.games_lost,
            "games_drawn": self.games_drawn,
            "outcome": self.outcome.value,
            "match_points": self.match_points,
        }


@dataclass
class Participant:
    """A competitor registered in the tournament.

    The ``id`` is assigned by the registry and never changes. The name is a
    display label. Cumulative state only ever grows through
    :meth:`add_match_record`.

    Attributes
    ----------
    id : str
        Stable unique identifier.
    name : str
        Display name.
    matches : list of MatchRecord
        One record per round played, byes included.
    has_bye : bool
        Whether the participant has received a bye.
    match_points : int
        Running match point total.
    """

    id: str
    name: str
    matches: List[MatchRecord] = field(default_factory=list)
    has_bye: bool = False
    match_points: int = 0

    def add_match_record(self, record: MatchRecord) -> None:
        """Append a round result and update the running totals."""
        self.matches.append(record)
        self.match_points += record.match_points
        if record.is_bye:
            self.has_bye = True

    @property
    def opponent_ids(self) -> List[str]:
        """Opponents faced in round order, byes excluded."""
        return [m.opponent_id for m in self.matches if m.opponent_id is not None]

    @property
    def matches_played(self) -> int:
        return len(self.matches)

    @property
    def games_won(self) -> int:
        return sum(m.games_won for m in self.matches)

    @property
    def games_lost(self) -> int:
        return sum(m.games_lost for m in self.matches)

    @property
    def games_drawn(self) -> int:
        return sum(m.games_drawn for m in self.matches)

    @property
    def games_played(self) -> int:
        return sum(m.games_played for m in self.matches)

    @property
    def record_display(self) -> str:
        """Win-loss-draw record, e.g. ``2-1-0``."""
        outcomes = [m.outcome for m in self.matches]
        return (
            f"{outcomes.count(Outcome.WIN)}-"
            f"{outcomes.count(Outcome.LOSS)}-"
            f"{outcomes.count(Outcome.DRAW)}"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "match_points": self.match_points,
            "has_bye": self.has_bye,
            "matches": [m.to_dict() for m in self.matches],
        }

    def __str__(self) -> str:
        return self.name
