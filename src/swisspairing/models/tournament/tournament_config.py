"""TournamentConfig and ScoringSystem data classes."""

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
from fractions import Fraction
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from swisspairing.constants import (
    BYE_GAMES_WON,
    BYE_MATCH_POINTS,
    DEFAULT_MAX_PAIRING_BACKTRACKS,
    DEFAULT_TIEBREAK_ORDER,
    GAME_DRAW_POINTS,
    GAME_WIN_POINTS,
    MATCH_DRAW_POINTS,
    MATCH_LOSS_POINTS,
    MATCH_WIN_POINTS,
    PERCENTAGE_FLOOR,
    VALID_SCORES,
)
from swisspairing.exceptions import InvalidConfigurationError


@dataclass(frozen=True)
class ScoringSystem:
    """Defines how games, matches and byes are scored.

    Attributes
    ----------
    match_win_points, match_draw_points, match_loss_points : int
        Match points awarded per match outcome.
    game_win_points, game_draw_points : int
        Game points per won or drawn game, used for game-win percentages.
    bye_match_points : int
        Match points awarded for a bye.
    bye_games_won : int
        Games counted as won for a bye.
    match_win_floor, game_win_floor : Fraction
        Lower bound applied to match-win and game-win percentages.
    valid_scores : frozenset of tuple of int
        Accepted (self, opponent) game scores.
    """

    match_win_points: int = MATCH_WIN_POINTS
    match_draw_points: int = MATCH_DRAW_POINTS
    match_loss_points: int = MATCH_LOSS_POINTS
    game_win_points: int = GAME_WIN_POINTS
    game_draw_points: int = GAME_DRAW_POINTS
    bye_match_points: int = BYE_MATCH_POINTS
    bye_games_won: int = BYE_GAMES_WON
    match_win_floor: Fraction = PERCENTAGE_FLOOR
    game_win_floor: Fraction = PERCENTAGE_FLOOR
    valid_scores: FrozenSet[Tuple[int, int]] = VALID_SCORES

    def is_valid_score(self, self_score: Any, opponent_score: Any) -> bool:
        """Check a reported game score against the accepted score pairs."""
        for score in (self_score, opponent_score):
            # bool is an int subclass, but True-False is not a score
            if isinstance(score, bool) or not isinstance(score, int):
                return False
        return (self_score, opponent_score) in self.valid_scores

    def match_points(self, games_for: int, games_against: int) -> Tuple[int, int]:
        """Match points for both sides of a game score.

        Returns
        -------
        tuple of int
            (points for the first side, points for the second side)
        """
        if games_for > games_against:
            return (self.match_win_points, self.match_loss_points)
        elif games_for < games_against:
            return (self.match_loss_points, self.match_win_points)
        else:
            return (self.match_draw_points, self.match_draw_points)

    def drawn_games(self, games_for: int, games_against: int) -> int:
        """Drawn games implied by a score: a 1-1 match went to a drawn decider."""
        if games_for == games_against and games_for > 0:
            return 1
        return 0

    def validate(self) -> None:
        """Raise InvalidConfigurationError if the scoring system is unusable."""
        if self.match_win_points <= 0 or self.game_win_points <= 0:
            raise InvalidConfigurationError("Win points must be positive")
        if not (
            self.match_win_points >= self.match_draw_points >= self.match_loss_points
        ):
            raise InvalidConfigurationError(
                "Match points must satisfy win >= draw >= loss"
            )
        if self.bye_games_won < 0 or self.bye_match_points < 0:
            raise InvalidConfigurationError("Bye awards cannot be negative")
        for floor in (self.match_win_floor, self.game_win_floor):
            if not 0 <= floor <= 1:
                raise InvalidConfigurationError(
                    f"Percentage floor {floor} must be between 0 and 1"
                )
        if not self.valid_scores:
            raise InvalidConfigurationError("At least one valid score is required")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize scoring system to dictionary."""
        return {
            "match_win_points": self.match_win_points,
            "match_draw_points": self.match_draw_points,
            "match_loss_points": self.match_loss_points,
            "game_win_points": self.game_win_points,
            "game_draw_points": self.game_draw_points,
            "bye_match_points": self.bye_match_points,
            "bye_games_won": self.bye_games_won,
            "match_win_floor": str(self.match_win_floor),
            "game_win_floor": str(self.game_win_floor),
            "valid_scores": sorted(list(s) for s in self.valid_scores),
        }


STANDARD_SCORING = ScoringSystem()


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    num_rounds : int or None
        Number of rounds in the tournament. ``None`` means the number is
        derived from the participant count.
    scoring : ScoringSystem
        Point values, bye award and percentage floors.
    allow_duplicate_names : bool
        Register repeated names as distinct participants instead of failing.
    seed : int or None
        Seed for the tournament's random source (tie resolution and
        presentation order).
    max_pairing_backtracks : int
        Node budget for the repeat-free pairing search before the greedy
        fallback takes over.
    tiebreak_order : list of str
        Tiebreak criteria applied after match points, in priority order.
    """

    name: str = "Swiss Tournament"
    num_rounds: Optional[int] = None
    scoring: ScoringSystem = STANDARD_SCORING
    allow_duplicate_names: bool = False
    seed: Optional[int] = None
    max_pairing_backtracks: int = DEFAULT_MAX_PAIRING_BACKTRACKS
    tiebreak_order: List[str] = field(
        default_factory=lambda: list(DEFAULT_TIEBREAK_ORDER)
    )

    def validate(self) -> None:
        """Raise InvalidConfigurationError on unusable settings."""
        if self.num_rounds is not None and self.num_rounds < 1:
            raise InvalidConfigurationError(
                f"num_rounds must be at least 1, got {self.num_rounds}"
            )
        if self.max_pairing_backtracks < 0:
            raise InvalidConfigurationError("max_pairing_backtracks cannot be negative")
        if self.tiebreak_order != DEFAULT_TIEBREAK_ORDER:
            raise InvalidConfigurationError(
                f"Unsupported tiebreak order {self.tiebreak_order}; "
                f"only {DEFAULT_TIEBREAK_ORDER} is supported"
            )
        self.scoring.validate()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "num_rounds": self.num_rounds,
            "scoring": self.scoring.to_dict(),
            "allow_duplicate_names": self.allow_duplicate_names,
            "seed": self.seed,
            "max_pairing_backtracks": self.max_pairing_backtracks,
            "tiebreak_order": self.tiebreak_order,
        }
