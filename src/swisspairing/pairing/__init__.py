"""Swiss pairing algorithms."""

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

from swisspairing.pairing.swiss import (
    PairingResult,
    RepeatFreeSearch,
    create_swiss_pairings,
    nearest_available_opponent,
    select_bye_recipient,
)

__all__ = [
    "PairingResult",
    "RepeatFreeSearch",
    "create_swiss_pairings",
    "nearest_available_opponent",
    "select_bye_recipient",
]
