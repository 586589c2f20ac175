import pytest

from swisspairing.controllers.tournament.result_recorder import ResultRecorder
from swisspairing.exceptions import (
    DuplicateResultError,
    InvalidScoreError,
    PairingNotFoundError,
)
from swisspairing.models.tournament.round_data import Pairing, RoundData
from swisspairing.models.tournament.tournament_state import TournamentState


def _first_match(tournament):
    descriptors = tournament.next_round()
    return next(d for d in descriptors if not d.is_bye)


@pytest.mark.parametrize(
    "score, points",
    [
        ((2, 0), (3, 0)),
        ((0, 2), (0, 3)),
        ((2, 1), (3, 0)),
        ((1, 2), (0, 3)),
        ((1, 1), (1, 1)),
    ],
)
def test_valid_scores_award_match_points(make_tournament, score, points):
    tournament = make_tournament(size=2)
    match = _first_match(tournament)

    record = tournament.record_result(match.pairing_id, *score)

    a = tournament.get_participant(match.participant_a_id)
    b = tournament.get_participant(match.participant_b_id)
    assert (a.match_points, b.match_points) == points
    assert record.match_points == points[0]
    assert record.opponent_id == b.id
    assert b.matches[0].games_won == score[1]
    assert b.matches[0].games_lost == score[0]


def test_one_all_counts_a_drawn_game(make_tournament):
    tournament = make_tournament(size=2)
    match = _first_match(tournament)

    tournament.record_result(match.pairing_id, 1, 1)

    for participant in tournament.participants:
        assert participant.games_drawn == 1
        assert participant.games_played == 3
        assert participant.record_display == "0-0-1"


@pytest.mark.parametrize(
    "score",
    [(3, 0), (0, 0), (2, 2), (1, 0), (-1, 2), ("2", "0"), (2.0, 0), (True, False)],
)
def test_invalid_score_leaves_state_untouched(make_tournament, score):
    tournament = make_tournament(size=4)
    match = _first_match(tournament)

    with pytest.raises(InvalidScoreError) as exc_info:
        tournament.record_result(match.pairing_id, *score)

    assert exc_info.value.pairing_id == match.pairing_id
    assert all(p.matches == [] for p in tournament.participants)
    assert all(p.match_points == 0 for p in tournament.participants)
    assert len(tournament.pending_pairings()) == 2

    # the same pairing can be re-entered
    tournament.record_result(match.pairing_id, 2, 1)
    assert len(tournament.pending_pairings()) == 1


def test_duplicate_result_rejected(make_tournament):
    tournament = make_tournament(size=4)
    match = _first_match(tournament)
    tournament.record_result(match.pairing_id, 2, 0)

    with pytest.raises(DuplicateResultError):
        tournament.record_result(match.pairing_id, 0, 2)

    a = tournament.get_participant(match.participant_a_id)
    assert a.match_points == 3
    assert len(a.matches) == 1


def test_unknown_pairing_rejected(make_tournament):
    tournament = make_tournament(size=4)
    tournament.next_round()

    with pytest.raises(PairingNotFoundError):
        tournament.record_result("pairing-missing", 2, 0)
    with pytest.raises(PairingNotFoundError):
        tournament.record_result_at(99, 2, 0)


def test_result_before_first_round_rejected(make_tournament):
    tournament = make_tournament(size=4)
    with pytest.raises(PairingNotFoundError):
        tournament.record_result_at(1, 2, 0)


def test_previous_round_pairing_is_closed(make_tournament, play_round):
    tournament = make_tournament(size=4)
    first_round = play_round(tournament)
    tournament.next_round()

    with pytest.raises(PairingNotFoundError):
        tournament.record_result(first_round[0].pairing_id, 2, 0)


def test_bye_cannot_take_a_result(make_tournament):
    tournament = make_tournament(size=3)
    descriptors = tournament.next_round()
    bye = descriptors[-1]

    assert bye.is_bye
    with pytest.raises(DuplicateResultError):
        tournament.record_result(bye.pairing_id, 2, 0)


def test_record_by_sequence_index(make_tournament):
    tournament = make_tournament(size=4)
    descriptors = tournament.next_round()

    tournament.record_result_at(2, 0, 2)

    second = descriptors[1]
    assert tournament.get_participant(second.participant_b_id).match_points == 3
    assert [d.sequence_index for d in tournament.pending_pairings()] == [1]


def test_recorder_awards_bye():
    state = TournamentState.create(["Alice", "Bob", "Carol"])
    recorder = ResultRecorder()

    carol = state.registry.find_by_name("Carol").id
    bye = Pairing(round_number=1, sequence_index=2, participant_a=carol)
    state.rounds.append(RoundData(round_number=1, bye=bye))

    record = recorder.record_bye(state, bye)

    assert record.is_bye
    assert (record.games_won, record.games_lost, record.match_points) == (2, 0, 3)
    assert state.registry.get(carol).has_bye
    assert carol in state.bye_recipients
    with pytest.raises(DuplicateResultError):
        recorder.record_bye(state, bye)
