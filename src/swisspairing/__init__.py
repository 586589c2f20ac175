"""Swiss Pairing: a Swiss-system tournament engine.

Registers participants, pairs rounds without repeats where possible,
records best-of-three match results and ranks the field by match points,
OMW%, GW% and OGW%.
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

from swisspairing.exceptions import (
    DuplicateNameError,
    DuplicateResultError,
    InsufficientParticipantsError,
    InvalidConfigurationError,
    InvalidParticipantNameError,
    InvalidScoreError,
    PairingNotFoundError,
    RoundInProgressError,
    SwissPairingError,
    TournamentCompleteError,
    UnknownParticipantError,
)
from swisspairing.models.tournament.tournament import Tournament
from swisspairing.models.tournament.tournament_config import (
    ScoringSystem,
    TournamentConfig,
)

__version__ = "0.1.0"

__all__ = [
    "DuplicateNameError",
    "DuplicateResultError",
    "InsufficientParticipantsError",
    "InvalidConfigurationError",
    "InvalidParticipantNameError",
    "InvalidScoreError",
    "PairingNotFoundError",
    "RoundInProgressError",
    "ScoringSystem",
    "SwissPairingError",
    "Tournament",
    "TournamentCompleteError",
    "TournamentConfig",
    "UnknownParticipantError",
    "__version__",
]
