"""Data model for the pairings realised so far in a tournament."""

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

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Set, Tuple


@dataclass
class PairingHistory:
    """
    Tracks historical pairings to prevent repeat matches.

    Attributes
    ----------
    previous_matches : set of frozenset of str
        Set containing frozensets of participant id pairs that have already
        been paired.
    match_counts : Counter
        Number of times each pair has been paired. Above one only after a
        forced repeat.
    forced_repeats : list of tuple of (int, frozenset)
        Round number and pair for every repeat the engine had to allow.
    """

    previous_matches: Set[frozenset] = field(default_factory=set)
    match_counts: Counter = field(default_factory=Counter)
    forced_repeats: List[Tuple[int, frozenset]] = field(default_factory=list)

    def add_pairing(self, participant1_id: str, participant2_id: str) -> None:
        """Record that two participants have been paired."""
        pair = frozenset({participant1_id, participant2_id})
        self.previous_matches.add(pair)
        self.match_counts[pair] += 1

    def have_played(self, participant1_id: str, participant2_id: str) -> bool:
        """Check if two participants have previously been paired."""
        return frozenset({participant1_id, participant2_id}) in self.previous_matches

    def times_played(self, participant1_id: str, participant2_id: str) -> int:
        return self.match_counts[frozenset({participant1_id, participant2_id})]

    def add_forced_repeat(
        self, round_number: int, participant1_id: str, participant2_id: str
    ) -> None:
        """Log a repeat pairing allowed by the fallback policy."""
        self.forced_repeats.append(
            (round_number, frozenset({participant1_id, participant2_id}))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing history to dictionary."""
        return {
            "previous_matches": [sorted(pair) for pair in self.previous_matches],
            "forced_repeats": [
                {"round_number": rnd, "pair": sorted(pair)}
                for rnd, pair in self.forced_repeats
            ],
        }
