"""Swiss Pairing System Implementation."""

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
from typing import AbstractSet, Callable, List, Optional, Sequence

from swisspairing.constants import DEFAULT_MAX_PAIRING_BACKTRACKS
from swisspairing.exceptions import InsufficientParticipantsError, PairingError
from swisspairing.models.tournament.pairing_history import PairingHistory
from swisspairing.type_hints import MatchPairing, RepeatPolicy
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class PairingResult:
    """Result of a pairing computation for a single round.

    Pairings are in pairing order (top of the ranking first), not in
    presentation order.
    """

    pairings: List[MatchPairing] = field(default_factory=list)
    bye_participant_id: Optional[str] = None
    forced_repeats: List[MatchPairing] = field(default_factory=list)


def nearest_available_opponent(
    participant_id: str,
    candidates: List[str],
    have_played: Callable[[str, str], bool],
) -> str:
    """Default repeat policy: the nearest-ranked opponent still unpaired.

    Only consulted when every candidate has already met ``participant_id``.
    ``candidates`` are ordered by ranking, nearest first.
    """
    return candidates[0]


def select_bye_recipient(
    ranking: Sequence[str], bye_recipients: AbstractSet[str]
) -> str:
    """Pick the lowest-ranked participant who has not had a bye yet.

    If every participant has had a bye, the lowest-ranked participant gets a
    second one.
    """
    if not ranking:
        raise InsufficientParticipantsError(0)

    for participant_id in reversed(ranking):
        if participant_id not in bye_recipients:
            return participant_id

    logger.warning(
        "All participants have already received a bye. "
        "Assigning second bye to the lowest ranked participant as last resort."
    )
    return ranking[-1]


class RepeatFreeSearch:
    """Depth-first search for a pairing with no repeats, in ranking order.

    The first branch tried at every level is the greedy choice, so the result
    equals the plain top-down walk whenever that walk avoids repeats.
    """

    def __init__(self, have_played: Callable[[str, str], bool], max_nodes: int):
        self.have_played = have_played
        self.max_nodes = max_nodes
        self.nodes = 0
        self.exhausted = False

    def _visit(self) -> bool:
        self.nodes += 1
        if self.nodes > self.max_nodes:
            self.exhausted = True
            return False
        return True

    def solve(self, remaining: List[str]) -> Optional[List[MatchPairing]]:
        """Pair ``remaining`` top-down, or return None if no repeat-free pairing
        is found within the node budget.

        Iterative, so the depth of the search is not bounded by the field size.
        """
        if not remaining:
            return []
        if not self._visit():
            return None

        pairs: List[MatchPairing] = []
        # Each frame is (unpaired ids at this level, index of the next
        # candidate to try for pool[0]); pairs[k] was chosen in frame k.
        stack: List[List] = [[list(remaining), 1]]
        while stack:
            frame = stack[-1]
            pool, cursor = frame
            head = pool[0]
            for i in range(cursor, len(pool)):
                candidate = pool[i]
                if self.have_played(head, candidate):
                    continue
                frame[1] = i + 1
                pairs.append((head, candidate))
                rest = pool[1:i] + pool[i + 1 :]
                if not rest:
                    return pairs
                if not self._visit():
                    return None
                stack.append([rest, 1])
                break
            else:
                stack.pop()
                if pairs:
                    pairs.pop()
        return None


def _greedy_pairings(
    pool: List[str],
    have_played: Callable[[str, str], bool],
    repeat_policy: RepeatPolicy,
) -> PairingResult:
    """Top-down walk, allowing a repeat only when no fresh opponent is left."""
    result = PairingResult()
    remaining = pool.copy()

    while len(remaining) >= 2:
        head = remaining.pop(0)
        fresh_idx = next(
            (i for i, c in enumerate(remaining) if not have_played(head, c)), None
        )

        if fresh_idx is not None:
            opponent = remaining.pop(fresh_idx)
        else:
            opponent = repeat_policy(head, remaining.copy(), have_played)
            if opponent not in remaining:
                raise PairingError(
                    f"Repeat policy chose {opponent!r}, which is not an "
                    f"available opponent for {head!r}"
                )
            remaining.remove(opponent)
            result.forced_repeats.append((head, opponent))

        result.pairings.append((head, opponent))

    return result


def create_swiss_pairings(
    ranking: Sequence[str],
    pairing_history: PairingHistory,
    bye_recipients: AbstractSet[str],
    round_number: int,
    repeat_policy: RepeatPolicy = nearest_available_opponent,
    max_backtracks: int = DEFAULT_MAX_PAIRING_BACKTRACKS,
) -> PairingResult:
    """
    Create pairings for a Swiss-system round.

    - ranking: participant ids, best ranked first
    - pairing_history: realised pairings; every new pairing is added to it
    - bye_recipients: ids of participants who already had a bye
    - round_number: the 1-based round being paired
    - repeat_policy: picks an opponent when no never-met opponent remains
    - max_backtracks: node budget for the repeat-free search
    Returns: PairingResult with pairings in ranking order, the bye recipient
    and any forced repeats.
    """
    if len(ranking) < 2:
        raise InsufficientParticipantsError(len(ranking))
    if len(set(ranking)) != len(ranking):
        raise PairingError("Ranking contains the same participant more than once")

    pool = list(ranking)

    bye_participant_id = None
    if len(pool) % 2 == 1:
        bye_participant_id = select_bye_recipient(pool, bye_recipients)
        pool.remove(bye_participant_id)

    have_played = pairing_history.have_played

    search = RepeatFreeSearch(have_played, max_backtracks)
    repeat_free = search.solve(pool)

    if repeat_free is not None:
        result = PairingResult(pairings=repeat_free)
    else:
        if search.exhausted:
            logger.warning(
                f"Round {round_number}: repeat-free search stopped after "
                f"{max_backtracks} nodes, falling back to greedy pairing"
            )
        else:
            logger.warning(
                f"Round {round_number}: no repeat-free pairing exists, "
                "falling back to greedy pairing"
            )
        result = _greedy_pairings(pool, have_played, repeat_policy)

    result.bye_participant_id = bye_participant_id

    # Record each pairing as it is realised
    for first, second in result.pairings:
        pairing_history.add_pairing(first, second)
    for first, second in result.forced_repeats:
        pairing_history.add_forced_repeat(round_number, first, second)
        logger.warning(
            f"Round {round_number}: forced repeat pairing {first} vs {second}"
        )

    return result
