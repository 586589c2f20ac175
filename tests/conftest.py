import random

import pytest

from swisspairing import Tournament, TournamentConfig


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_tournament():
    def _make(names=None, size=4, seed=7, **config_kwargs):
        if names is None:
            names = [f"Player {i}" for i in range(1, size + 1)]
        config = TournamentConfig(seed=seed, **config_kwargs)
        return Tournament(names, config)

    return _make


@pytest.fixture
def play_round():
    """Create the next round and report every match as a 2-0 for participant A."""

    def _play(tournament, score=(2, 0)):
        descriptors = tournament.next_round()
        for descriptor in descriptors:
            if not descriptor.is_bye:
                tournament.record_result(descriptor.pairing_id, *score)
        return descriptors

    return _play
