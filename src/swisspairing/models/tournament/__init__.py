"""Tournament data models.

The Tournament facade lives in :mod:`swisspairing.models.tournament.tournament`
and is re-exported from the top level package.
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

from swisspairing.models.tournament.pairing_history import PairingHistory
from swisspairing.models.tournament.round_data import (
    Pairing,
    PairingDescriptor,
    RoundData,
)
from swisspairing.models.tournament.tournament_config import (
    STANDARD_SCORING,
    ScoringSystem,
    TournamentConfig,
)
from swisspairing.models.tournament.tournament_state import (
    TournamentState,
    required_rounds,
)

__all__ = [
    "PairingHistory",
    "Pairing",
    "PairingDescriptor",
    "RoundData",
    "STANDARD_SCORING",
    "ScoringSystem",
    "TournamentConfig",
    "TournamentState",
    "required_rounds",
]
