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

from fractions import Fraction

# --- Constants ---

# Match outcome points
MATCH_WIN_POINTS = 3
MATCH_DRAW_POINTS = 1
MATCH_LOSS_POINTS = 0

# Game outcome points (a single game inside a match)
GAME_WIN_POINTS = 3
GAME_DRAW_POINTS = 1

# Bye award (configurable per tournament)
BYE_MATCH_POINTS = MATCH_WIN_POINTS
BYE_GAMES_WON = 2

# Minimum match/game win percentage used for opponent tiebreaks
PERCENTAGE_FLOOR = Fraction(1, 3)

# Accepted (self, opponent) game scores for a best-of-three match
VALID_SCORES = frozenset({(2, 0), (0, 2), (2, 1), (1, 2), (1, 1)})

# Display marker for the missing opponent of a bye
BYE = "BYE"

# Outcome type categories
OUTCOME_WIN = "win"
OUTCOME_DRAW = "draw"
OUTCOME_LOSS = "loss"

# Tiebreaker keys
TB_MATCH_POINTS = "match_points"
TB_OMW = "omw"
TB_GW = "gw"
TB_OGW = "ogw"

# Fixed order applied after match points
DEFAULT_TIEBREAK_ORDER = [TB_OMW, TB_GW, TB_OGW]

# Node budget for the repeat-free pairing search
DEFAULT_MAX_PAIRING_BACKTRACKS = 20000

# Logging
LOG_LEVEL_ENV = "SWISSPAIRING_LOG_LEVEL"
LOG_FILE_ENV = "SWISSPAIRING_LOG_FILE"
DEFAULT_LOG_LEVEL = "WARNING"
