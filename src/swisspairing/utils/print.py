"""
Plain text rendering of pairings and standings.
This module provides the shared formatting used by the simulator CLI and by
collaborators that drive a tournament from a terminal.
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

from typing import List, Sequence

from swisspairing.controllers.tournament.standings import StandingsRow
from swisspairing.models.tournament.round_data import PairingDescriptor

STANDINGS_HEADERS = ("Rank", "Name", "MP", "OMWP", "GWP", "OGWP")


def format_round_header(round_number: int, total_rounds: int) -> str:
    """Heading printed before a round's pairings, e.g. ``=== ROUND 2/3 ===``."""
    return f"=== ROUND {round_number}/{total_rounds} ==="


def format_pairings(descriptors: Sequence[PairingDescriptor]) -> str:
    """
    Render a round's pairings, one per line, in presentation order.

    Args:
        descriptors: Pairings as returned by ``Tournament.next_round()``

    Returns:
        Lines like ``[1] Alice vs Bob``, the bye shown as ``vs BYE``
    """
    if not descriptors:
        return ""
    width = max(len(d.participant_a_name) for d in descriptors)
    return "\n".join(
        f"[{d.sequence_index}] {d.participant_a_name:<{width}}  vs  "
        f"{d.participant_b_name}"
        for d in descriptors
    )


def format_standings(rows: Sequence[StandingsRow]) -> str:
    """
    Render the standings table.

    Columns are ``Rank Name MP OMWP GWP OGWP``, percentages to two decimals.

    Args:
        rows: Standings rows, best ranked first

    Returns:
        The table as a single string, header and separator included
    """
    table: List[Sequence[str]] = [
        STANDINGS_HEADERS,
        tuple("-" * len(h) for h in STANDINGS_HEADERS),
    ]
    for row in rows:
        table.append(
            (
                f"{row.rank}.",
                row.name,
                str(row.match_points),
                f"{row.omw:.2f}",
                f"{row.gw:.2f}",
                f"{row.ogw:.2f}",
            )
        )

    widths = [max(len(line[col]) for line in table) for col in range(len(table[0]))]
    lines = []
    for line in table:
        # name column left aligned, numbers right aligned
        cells = [
            cell.ljust(widths[col]) if col <= 1 else cell.rjust(widths[col])
            for col, cell in enumerate(line)
        ]
        lines.append("  ".join(cells).rstrip())
    return "\n".join(lines)
