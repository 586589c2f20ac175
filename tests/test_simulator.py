import json

import pytest

from swisspairing.testing.__main__ import main
from swisspairing.testing.simulator import (
    ResultPattern,
    SimulatorConfig,
    TournamentSimulator,
    simulate_tournament,
    summarize_warnings,
)
from swisspairing.validation.checker import (
    CriterionStatus,
    TournamentChecker,
    check_feasibility,
)


@pytest.mark.parametrize("size", list(range(2, 18)))
@pytest.mark.parametrize("seed", [1, 2, 3])
def test_simulated_tournaments_hold_invariants(size, seed):
    data = simulate_tournament(size, seed=seed)
    report = data["validation"]

    assert report.is_valid, report.summary
    assert not report.violations
    tournament = data["tournament"]
    assert tournament.is_complete
    assert len(data["rounds"]) == tournament.num_rounds
    assert all(not r["forced_repeats"] for r in data["rounds"])


def test_extra_rounds_force_logged_repeats():
    data = simulate_tournament(4, seed=5, num_rounds=5)
    report = data["validation"]

    forced = [pair for r in data["rounds"] for pair in r["forced_repeats"]]
    assert len(forced) == 4
    assert report.is_valid
    assert "FEASIBILITY" in summarize_warnings(report)


def test_everyone_gets_a_bye_before_anyone_gets_two():
    data = simulate_tournament(3, seed=9, num_rounds=4)
    byes = [r["pairings"][-1].participant_a_id for r in data["rounds"]]

    assert len(set(byes[:3])) == 3
    assert data["validation"].is_valid


def test_predictable_pattern_lets_lower_numbers_win():
    data = simulate_tournament(
        8, seed=4, draw_rate=0.0, result_pattern=ResultPattern.PREDICTABLE
    )

    assert data["standings"][0].name == "Player 1"
    assert data["standings"][0].match_points == 9


def test_simulator_config_validation():
    with pytest.raises(ValueError):
        SimulatorConfig(num_participants=1)
    with pytest.raises(ValueError):
        SimulatorConfig(num_participants=4, draw_rate=1.5)


def test_json_export():
    simulator = TournamentSimulator(SimulatorConfig(num_participants=5, seed=3))
    payload = json.loads(simulator.export_json_format(simulator.run()))

    assert payload["simulator_config"]["num_rounds"] == 3
    assert len(payload["participants"]) == 5
    assert len(payload["rounds"]) == 3
    assert [row["rank"] for row in payload["standings"]] == [1, 2, 3, 4, 5]
    assert payload["validation"]["overall_status"] == "COMPLIANT"


@pytest.mark.parametrize(
    "size, rounds, feasible",
    [(4, 3, True), (4, 4, False), (5, 5, True), (5, 6, False), (1, 3, True)],
)
def test_check_feasibility(size, rounds, feasible):
    assert (check_feasibility(size, rounds) is None) == feasible


def test_checker_flags_mismatched_points():
    data = simulate_tournament(6, seed=8)
    tournament = data["tournament"]
    tournament.participants[0].match_points += 1

    report = TournamentChecker().validate(tournament.state)

    assert not report.is_valid
    assert [v.criterion for v in report.violations] == ["R5"]
    assert report.compliance_percentage < 100.0


def test_checker_flags_unlogged_repeat():
    data = simulate_tournament(6, seed=8)
    state = data["tournament"].state
    first = state.rounds[0].pairings[0]
    replay = state.rounds[1].pairings[0]
    replay.participant_a = first.participant_a
    replay.participant_b = first.participant_b

    report = TournamentChecker().validate(state)

    assert "R1" in {v.criterion for v in report.violations}


def test_checker_on_unplayed_tournament(make_tournament):
    report = TournamentChecker().validate(make_tournament(size=4).state)

    statuses = {r.criterion: r.status for r in report.criteria_results}
    assert statuses["R2"] == CriterionStatus.NOT_APPLICABLE
    assert report.is_valid


def test_cli_simulate(tmp_path, capsys):
    output = tmp_path / "tournament.json"

    exit_code = main(
        [
            "simulate",
            "--players",
            "5",
            "--seed",
            "3",
            "--validate",
            "--output",
            str(output),
        ]
    )

    assert exit_code == 0
    printed = capsys.readouterr().out
    assert "ROUND 1/3" in printed
    assert "=== RESULTS ===" in printed
    assert "OMWP" in printed
    assert json.loads(output.read_text(encoding="utf-8"))["participants"]


def test_cli_benchmark(capsys):
    argv = ["benchmark", "--players", "6", "--iterations", "2", "--seed", "1"]
    assert main(argv) == 0
    assert "Average" in capsys.readouterr().out


def test_cli_without_command_prints_help(capsys):
    assert main([]) == 0
    assert "simulate" in capsys.readouterr().out


def test_cli_rejects_bad_arguments():
    with pytest.raises(SystemExit):
        main(["simulate", "--players", "1"])


@pytest.mark.parametrize("iterations", ["0", "-3", "many"])
def test_cli_benchmark_needs_at_least_one_iteration(iterations, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["benchmark", "--players", "4", "--iterations", iterations])
    assert exc_info.value.code == 2
    assert "--iterations" in capsys.readouterr().err
