import logging

import pytest

from swisspairing.exceptions import InsufficientParticipantsError, PairingError
from swisspairing.models.tournament.pairing_history import PairingHistory
from swisspairing.pairing.swiss import (
    create_swiss_pairings,
    nearest_available_opponent,
    select_bye_recipient,
)


def _history(*pairs):
    history = PairingHistory()
    for first, second in pairs:
        history.add_pairing(first, second)
    return history


def test_even_field_pairs_top_down():
    history = PairingHistory()
    result = create_swiss_pairings(["a", "b", "c", "d"], history, set(), 1)

    assert result.pairings == [("a", "b"), ("c", "d")]
    assert result.bye_participant_id is None
    assert result.forced_repeats == []
    assert history.have_played("a", "b")
    assert history.have_played("d", "c")
    assert not history.have_played("a", "c")


def test_odd_field_gives_bye_to_lowest_ranked():
    ranking = ["a", "b", "c", "d", "e"]
    result = create_swiss_pairings(ranking, PairingHistory(), set(), 1)

    assert result.bye_participant_id == "e"
    assert result.pairings == [("a", "b"), ("c", "d")]


def test_bye_skips_previous_recipients():
    ranking = ["a", "b", "c", "d", "e"]
    result = create_swiss_pairings(ranking, PairingHistory(), {"e"}, 2)

    assert result.bye_participant_id == "d"
    assert result.pairings == [("a", "b"), ("c", "e")]


def test_second_bye_when_everyone_had_one(caplog):
    with caplog.at_level(logging.WARNING):
        recipient = select_bye_recipient(["a", "b", "c"], {"a", "b", "c"})

    assert recipient == "c"
    assert "second bye" in caplog.text


def test_select_bye_recipient_needs_participants():
    with pytest.raises(InsufficientParticipantsError):
        select_bye_recipient([], set())


def test_skips_previous_opponent():
    history = _history(("a", "b"))
    result = create_swiss_pairings(["a", "b", "c", "d"], history, set(), 2)

    assert result.pairings == [("a", "c"), ("b", "d")]
    assert result.forced_repeats == []


def test_search_avoids_stranding_the_bottom_pair():
    # Walking top-down would give a-c and strand b with d, who already met.
    history = _history(("a", "b"), ("b", "d"))
    result = create_swiss_pairings(["a", "b", "c", "d"], history, set(), 3)

    assert result.pairings == [("a", "d"), ("b", "c")]
    assert result.forced_repeats == []



def test_large_first_round_pairs_top_down():
    ranking = [f"p{i}" for i in range(2101)]
    result = create_swiss_pairings(ranking, PairingHistory(), set(), 1)

    assert result.bye_participant_id == "p2100"
    assert len(result.pairings) == 1050
    assert result.pairings[0] == ("p0", "p1")
    assert result.pairings[-1] == ("p2098", "p2099")
    assert result.forced_repeats == []


def test_large_field_backtracks_at_the_bottom():
    ranking = [f"p{i}" for i in range(2100)]
    history = _history(("p2098", "p2099"))
    result = create_swiss_pairings(ranking, history, set(), 2)

    assert len(result.pairings) == 1050
    assert result.pairings[-3] == ("p2094", "p2095")
    assert result.pairings[-2:] == [("p2096", "p2098"), ("p2097", "p2099")]
    assert result.forced_repeats == []


def test_greedy_fallback_when_search_budget_is_spent(caplog):
    history = _history(("a", "b"), ("b", "d"))
    with caplog.at_level(logging.WARNING):
        result = create_swiss_pairings(
            ["a", "b", "c", "d"], history, set(), 3, max_backtracks=0
        )

    assert result.pairings == [("a", "c"), ("b", "d")]
    assert result.forced_repeats == [("b", "d")]
    assert "falling back to greedy pairing" in caplog.text


def test_forced_repeat_is_recorded(caplog):
    history = _history(("a", "b"))
    with caplog.at_level(logging.WARNING):
        result = create_swiss_pairings(["a", "b"], history, set(), 2)

    assert result.pairings == [("a", "b")]
    assert result.forced_repeats == [("a", "b")]
    assert history.times_played("a", "b") == 2
    assert history.forced_repeats == [(2, frozenset({"a", "b"}))]
    assert "forced repeat" in caplog.text


def test_exhausted_field_repeats_nearest_opponents():
    everyone = [("a", "b"), ("a", "c"), ("a", "d"), ("b", "c"), ("b", "d"), ("c", "d")]
    history = _history(*everyone)
    result = create_swiss_pairings(["a", "b", "c", "d"], history, set(), 4)

    assert result.pairings == [("a", "b"), ("c", "d")]
    assert len(result.forced_repeats) == 2


def test_custom_repeat_policy():
    everyone = [("a", "b"), ("a", "c"), ("a", "d"), ("b", "c"), ("b", "d"), ("c", "d")]

    def farthest(participant_id, candidates, have_played):
        assert all(have_played(participant_id, c) for c in candidates)
        return candidates[-1]

    result = create_swiss_pairings(
        ["a", "b", "c", "d"], _history(*everyone), set(), 4, repeat_policy=farthest
    )

    assert result.pairings == [("a", "d"), ("b", "c")]


def test_repeat_policy_must_pick_an_available_opponent():
    def rogue(participant_id, candidates, have_played):
        return "z"

    with pytest.raises(PairingError):
        create_swiss_pairings(
            ["a", "b"], _history(("a", "b")), set(), 2, repeat_policy=rogue
        )


def test_default_policy_is_nearest_candidate():
    assert nearest_available_opponent("a", ["c", "b"], lambda x, y: True) == "c"


def test_needs_two_participants():
    with pytest.raises(InsufficientParticipantsError):
        create_swiss_pairings(["a"], PairingHistory(), set(), 1)


def test_rejects_duplicate_ids_in_ranking():
    with pytest.raises(PairingError):
        create_swiss_pairings(["a", "b", "a", "c"], PairingHistory(), set(), 1)


def test_every_participant_placed_once():
    ranking = [f"p{i}" for i in range(11)]
    result = create_swiss_pairings(ranking, PairingHistory(), set(), 1)

    placed = [pid for pair in result.pairings for pid in pair]
    placed.append(result.bye_participant_id)
    assert sorted(placed) == sorted(ranking)
    assert len(result.pairings) == 5
