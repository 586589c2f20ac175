"""Tournament invariant checker.

This module validates a played (or partly played) tournament against the
pairing and scoring rules the engine promises: no unlogged repeat pairings,
at most one bye each, full round coverage and consistent match points.
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

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Set

from swisspairing.models.tournament.round_data import RoundData
from swisspairing.models.tournament.tournament_state import TournamentState
from swisspairing.pairing.swiss import RepeatFreeSearch
from swisspairing.type_hints import MatchPairing
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


class CriterionStatus(Enum):
    """Status of criterion validation."""

    COMPLIANT = "COMPLIANT"
    VIOLATION = "VIOLATION"
    NOT_APPLICABLE = "NOT_APPLICABLE"


class ViolationType(Enum):
    """Types of criterion violations."""

    ABSOLUTE = "ABSOLUTE"  # R1-R5: must not happen
    QUALITY = "QUALITY"  # R6 avoidability: should not happen
    WARNING = "WARNING"  # configuration issues


@dataclass
class CriterionResult:
    """Result of validating a single criterion."""

    criterion: str
    status: CriterionStatus
    violation_type: Optional[ViolationType] = None
    description: str = ""
    details: Dict[str, object] = field(default_factory=dict)

    @property
    def message(self) -> str:
        """Get the violation message."""
        return self.description

    def to_dict(self) -> Dict[str, Any]:
        return {
            "criterion": self.criterion,
            "status": self.status.value,
            "violation_type": (
                self.violation_type.value if self.violation_type else None
            ),
            "description": self.description,
            "details": self.details,
        }


@dataclass
class ValidationReport:
    """Complete validation report for a tournament."""

    total_criteria: int
    compliant_count: int
    violations: List[CriterionResult]
    overall_status: CriterionStatus
    summary: str
    quality_warnings: List[CriterionResult] = field(default_factory=list)
    criteria_results: List[CriterionResult] = field(default_factory=list)

    @property
    def compliance_percentage(self) -> float:
        """Calculate compliance percentage."""
        if self.total_criteria == 0:
            return 100.0
        return (self.compliant_count / self.total_criteria) * 100.0

    @property
    def is_valid(self) -> bool:
        return self.overall_status != CriterionStatus.VIOLATION

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overall_status": self.overall_status.value,
            "summary": self.summary,
            "compliance_percentage": self.compliance_percentage,
            "criteria": [r.to_dict() for r in self.criteria_results],
        }


def check_feasibility(
    num_participants: int, num_rounds: int
) -> Optional[CriterionResult]:
    """Check whether a field can play all rounds without repeat pairings.

    With N participants there are at most N*(N-1)/2 unique pairings, while
    R rounds need R * floor(N/2) of them.

    Returns:
        CriterionResult if repeats are unavoidable, None otherwise.
    """
    if num_participants < 2 or num_rounds < 1:
        return None

    max_unique_pairings = num_participants * (num_participants - 1) // 2
    total_pairings_needed = num_rounds * (num_participants // 2)

    if total_pairings_needed > max_unique_pairings:
        min_repeats = total_pairings_needed - max_unique_pairings
        return CriterionResult(
            criterion="FEASIBILITY",
            status=CriterionStatus.VIOLATION,
            violation_type=ViolationType.WARNING,
            description=(
                f"{num_participants} participants over {num_rounds} rounds need "
                f"{total_pairings_needed} pairings, but only {max_unique_pairings} "
                f"unique pairings exist (at least {min_repeats} repeats)"
            ),
            details={
                "num_participants": num_participants,
                "num_rounds": num_rounds,
                "max_unique_pairings": max_unique_pairings,
                "total_pairings_needed": total_pairings_needed,
                "min_repeat_pairings": min_repeats,
            },
        )
    return None


def _compliant(criterion: str, description: str) -> CriterionResult:
    return CriterionResult(
        criterion=criterion,
        status=CriterionStatus.COMPLIANT,
        description=description,
    )


def _violation(
    criterion: str,
    description: str,
    details: Dict[str, object],
    violation_type: ViolationType = ViolationType.ABSOLUTE,
) -> CriterionResult:
    return CriterionResult(
        criterion=criterion,
        status=CriterionStatus.VIOLATION,
        violation_type=violation_type,
        description=description,
        details=details,
    )


class TournamentChecker:
    """Checks a TournamentState against the engine's invariants.

    - R1: no repeat pairings other than logged forced repeats
    - R2: at most one bye per participant, unless everyone already had one
    - R3: every round covers every participant exactly once
    - R4: every round has floor(n/2) match pairings
    - R5: match points equal the sum of each participant's match records
    - R6: forced repeats are real repeats, and no repeat-free pairing of
      the round existed
    """

    def __init__(self, max_search_nodes: Optional[int] = None):
        self.max_search_nodes = max_search_nodes

    def check_r1_no_repeats(self, state: TournamentState) -> CriterionResult:
        """R1: Participants shall not meet twice unless the repeat was logged."""
        seen: Set[frozenset] = set()
        for round_data in state.rounds:
            logged = {frozenset(pair) for pair in round_data.forced_repeats}
            for pairing in round_data.pairings:
                key = frozenset(pairing.participant_ids)
                if key in seen and key not in logged:
                    return _violation(
                        "R1",
                        f"Unlogged repeat pairing in round {round_data.round_number}",
                        {
                            "round": round_data.round_number,
                            "participants": sorted(key),
                        },
                    )
                seen.add(key)
        return _compliant("R1", "No unlogged repeat pairings found")

    def check_r2_single_bye(self, state: TournamentState) -> CriterionResult:
        """R2: No repeat bye while someone is still without a bye."""
        bye_counts: Counter = Counter()
        all_ids = set(state.registry.ids())
        for round_data in state.rounds:
            recipient = round_data.bye_participant_id
            if recipient is None:
                continue
            had_bye = {pid for pid, count in bye_counts.items() if count}
            if bye_counts[recipient] > 0 and had_bye != all_ids:
                return _violation(
                    "R2",
                    f"Repeat bye in round {round_data.round_number}",
                    {
                        "round": round_data.round_number,
                        "participant_id": recipient,
                        "bye_count": bye_counts[recipient] + 1,
                    },
                )
            bye_counts[recipient] += 1
        if not bye_counts:
            return CriterionResult(
                criterion="R2",
                status=CriterionStatus.NOT_APPLICABLE,
                description="No byes assigned",
            )
        return _compliant("R2", f"{sum(bye_counts.values())} bye(s), none repeated")

    def check_r3_round_coverage(self, state: TournamentState) -> CriterionResult:
        """R3: Each round places every participant exactly once."""
        expected = sorted(state.registry.ids())
        for round_data in state.rounds:
            placed = sorted(round_data.participant_ids())
            if placed != expected:
                counts = Counter(placed)
                return _violation(
                    "R3",
                    f"Round {round_data.round_number} does not cover every "
                    "participant exactly once",
                    {
                        "round": round_data.round_number,
                        "missing": sorted(set(expected) - set(placed)),
                        "duplicated": sorted(p for p, c in counts.items() if c > 1),
                    },
                )
        return _compliant("R3", "Every round covers every participant once")

    def check_r4_pairing_count(self, state: TournamentState) -> CriterionResult:
        """R4: Each round has floor(n/2) pairings and a bye only for odd n."""
        n = len(state.registry)
        for round_data in state.rounds:
            has_bye = round_data.bye is not None
            if len(round_data.pairings) != n // 2 or has_bye != (n % 2 == 1):
                return _violation(
                    "R4",
                    f"Round {round_data.round_number} has "
                    f"{len(round_data.pairings)} pairings for {n} participants",
                    {
                        "round": round_data.round_number,
                        "pairings": len(round_data.pairings),
                        "expected": n // 2,
                        "has_bye": has_bye,
                    },
                )
        return _compliant("R4", f"Every round has {n // 2} pairings")

    def check_r5_match_points(self, state: TournamentState) -> CriterionResult:
        """R5: Cumulative match points match the recorded matches."""
        for participant in state.registry:
            expected = sum(m.match_points for m in participant.matches)
            if participant.match_points != expected:
                return _violation(
                    "R5",
                    f"Match points out of sync for {participant.name}",
                    {
                        "participant_id": participant.id,
                        "match_points": participant.match_points,
                        "expected": expected,
                    },
                )
            if participant.has_bye != any(m.is_bye for m in participant.matches):
                return _violation(
                    "R5",
                    f"Bye flag out of sync for {participant.name}",
                    {"participant_id": participant.id},
                )
        return _compliant("R5", "Match points agree with match records")

    def check_r6_forced_repeats(
        self, state: TournamentState
    ) -> List[CriterionResult]:
        """R6: Forced repeats only when no fresh opponent could be found."""
        results: List[CriterionResult] = []
        seen: Set[frozenset] = set()
        max_nodes = self.max_search_nodes or state.config.max_pairing_backtracks
        forced_total = 0

        for round_data in state.rounds:
            round_keys = {frozenset(p.participant_ids) for p in round_data.pairings}
            for pair in round_data.forced_repeats:
                key = frozenset(pair)
                if key not in seen or key not in round_keys:
                    results.append(
                        _violation(
                            "R6",
                            f"Logged forced repeat in round {round_data.round_number} "
                            "is not a repeat pairing of that round",
                            {
                                "round": round_data.round_number,
                                "participants": sorted(key),
                            },
                        )
                    )
                    return results

            if round_data.forced_repeats:
                forced_total += len(round_data.forced_repeats)
                avoidable = self._repeat_free_pairing(round_data, seen, max_nodes)
                if avoidable is not None:
                    results.append(
                        _violation(
                            "R6",
                            f"Round {round_data.round_number} repeated a pairing "
                            "although a repeat-free pairing existed",
                            {
                                "round": round_data.round_number,
                                "alternative": [list(p) for p in avoidable],
                            },
                            ViolationType.QUALITY,
                        )
                    )

            seen.update(round_keys)

        if not results:
            results.append(
                _compliant("R6", f"{forced_total} forced repeat(s), all unavoidable")
            )
        return results

    @staticmethod
    def _repeat_free_pairing(
        round_data: RoundData, seen: Set[frozenset], max_nodes: int
    ) -> Optional[List[MatchPairing]]:
        pool = [pid for p in round_data.pairings for pid in p.participant_ids]
        search = RepeatFreeSearch(lambda a, b: frozenset((a, b)) in seen, max_nodes)
        return search.solve(pool)

    def validate(self, state: TournamentState) -> ValidationReport:
        """Validate a tournament against every criterion."""
        logger.info(
            "Starting tournament validation after round %s/%s",
            state.current_round,
            state.total_rounds,
        )

        all_results: List[CriterionResult] = [
            self.check_r1_no_repeats(state),
            self.check_r2_single_bye(state),
            self.check_r3_round_coverage(state),
            self.check_r4_pairing_count(state),
            self.check_r5_match_points(state),
        ]
        all_results.extend(self.check_r6_forced_repeats(state))

        feasibility = check_feasibility(len(state.registry), state.total_rounds)
        if feasibility is not None:
            all_results.append(feasibility)

        compliant_count = sum(
            1 for r in all_results if r.status == CriterionStatus.COMPLIANT
        )
        absolute_violations = [
            r
            for r in all_results
            if r.status == CriterionStatus.VIOLATION
            and r.violation_type == ViolationType.ABSOLUTE
        ]
        quality_warnings = [
            r
            for r in all_results
            if r.status == CriterionStatus.VIOLATION
            and r.violation_type != ViolationType.ABSOLUTE
        ]

        overall_status = (
            CriterionStatus.VIOLATION
            if absolute_violations
            else CriterionStatus.COMPLIANT
        )

        if overall_status == CriterionStatus.COMPLIANT:
            summary = (
                f"All invariants hold; {len(quality_warnings)} warning(s) flagged"
            )
        else:
            summary = (
                f"Invariant violations detected - {len(absolute_violations)} "
                f"criteria failed; {len(quality_warnings)} warning(s)"
            )

        logger.info("Tournament validation complete: %s", summary)

        return ValidationReport(
            total_criteria=len(all_results),
            compliant_count=compliant_count,
            violations=absolute_violations,
            quality_warnings=quality_warnings,
            overall_status=overall_status,
            summary=summary,
            criteria_results=all_results,
        )
