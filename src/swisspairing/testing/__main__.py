"""Command line entry point for the tournament simulator.

Usage:
    python -m swisspairing.testing simulate --players 9 --seed 42
    python -m swisspairing.testing benchmark --players 64 --iterations 10
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

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from swisspairing.exceptions import SwissPairingError
from swisspairing.testing.simulator import (
    ResultPattern,
    SimulatorConfig,
    TournamentSimulator,
    summarize_warnings,
)
from swisspairing.utils import setup_logger
from swisspairing.utils.print import (
    format_pairings,
    format_round_header,
    format_standings,
)

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


def _build_config(args: argparse.Namespace, validate: bool) -> SimulatorConfig:
    return SimulatorConfig(
        num_participants=args.players,
        num_rounds=args.rounds,
        seed=args.seed,
        draw_rate=args.draw_rate,
        result_pattern=ResultPattern[args.pattern.upper()],
        validate=validate,
    )


def run_simulate_command(args: argparse.Namespace) -> int:
    """Run the simulate command."""
    simulator = TournamentSimulator(_build_config(args, args.validate))
    tournament_data = simulator.run()
    tournament = tournament_data["tournament"]

    for round_data in tournament_data["rounds"]:
        print(
            f"\n{Colors.BOLD}"
            f"{format_round_header(round_data['round_number'], tournament.num_rounds)}"
            f"{Colors.ENDC}\n"
        )
        print(format_pairings(round_data["pairings"]))
        for first, second in round_data["forced_repeats"]:
            names = tournament.participant_names()
            print(
                f"{Colors.WARNING}Repeat pairing: "
                f"{names[first]} vs {names[second]}{Colors.ENDC}"
            )

    print(f"\n{Colors.BOLD}=== RESULTS ==={Colors.ENDC}\n")
    print(format_standings(tournament_data["standings"]))

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(
            simulator.export_json_format(tournament_data), encoding="utf-8"
        )
        print(f"\n{Colors.OKGREEN}Tournament saved to: {output_path}{Colors.ENDC}")

    report = tournament_data.get("validation")
    if report is not None:
        print(f"\n{Colors.BOLD}Validation:{Colors.ENDC}")
        if report.violations:
            print(
                f"  {Colors.FAIL}Violations: {len(report.violations)}{Colors.ENDC}"
            )
            print(f"    Criteria: {' '.join(v.criterion for v in report.violations)}")
        warnings = summarize_warnings(report)
        if warnings:
            print(
                f"  {Colors.WARNING}Warnings: "
                f"{', '.join(f'{k} x{v}' for k, v in warnings.items())}{Colors.ENDC}"
            )
        print(f"  {report.summary}")
        print(f"  Compliance: {report.compliance_percentage:.1f}%")
        if not report.is_valid:
            return 1

    return 0


def run_benchmark_command(args: argparse.Namespace) -> int:
    """Time complete simulated tournaments."""
    print(
        f"\n{Colors.BOLD}Benchmarking {args.iterations} "
        f"tournament(s)...{Colors.ENDC}"
    )

    timings: List[float] = []
    for iteration in range(args.iterations):
        config = _build_config(args, validate=False)
        if args.seed is not None:
            config.seed = args.seed + iteration
        simulator = TournamentSimulator(config)
        start = time.perf_counter()
        simulator.run()
        timings.append(time.perf_counter() - start)

    print(f"  Participants: {args.players}")
    print(f"  Average: {sum(timings) / len(timings) * 1000:.2f} ms")
    print(f"  Fastest: {min(timings) * 1000:.2f} ms")
    print(f"  Slowest: {max(timings) * 1000:.2f} ms")
    return 0


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _add_tournament_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--players", type=int, default=8, help="Number of participants")
    parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="Number of rounds (default: ceil(log2(players)))",
    )
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument(
        "--draw-rate",
        type=float,
        default=0.1,
        help="Probability of a 1-1 result (default: 0.1)",
    )
    parser.add_argument(
        "--pattern",
        choices=[p.value for p in ResultPattern],
        default=ResultPattern.RANDOM.value,
        help="Result pattern",
    )


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="swisspairing-sim",
        description="Swiss tournament simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Simulate a tournament and check it
  swisspairing-sim simulate --players 9 --seed 42 --validate

  # Save the tournament as JSON
  swisspairing-sim simulate --players 16 --output tournament.json

  # Benchmark performance
  swisspairing-sim benchmark --players 64 --iterations 20
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    sim_parser = subparsers.add_parser("simulate", help="Simulate a tournament")
    _add_tournament_arguments(sim_parser)
    sim_parser.add_argument("--output", help="Write a JSON report to this path")
    sim_parser.add_argument(
        "--validate", action="store_true", help="Check the tournament's invariants"
    )
    sim_parser.set_defaults(func=run_simulate_command)

    bench_parser = subparsers.add_parser("benchmark", help="Performance benchmarking")
    _add_tournament_arguments(bench_parser)
    bench_parser.add_argument(
        "--iterations", type=_positive_int, default=10, help="Number of tournaments"
    )
    bench_parser.set_defaults(func=run_benchmark_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for swisspairing-sim CLI."""
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except (ValueError, SwissPairingError) as e:
        parser.error(str(e))
    return 2


if __name__ == "__main__":
    sys.exit(main())
