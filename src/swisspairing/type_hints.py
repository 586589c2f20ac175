"""Type hints used in Swiss Pairing."""

from typing import Callable, List, Tuple

# Stable participant identifier
ParticipantId = str
# Two participant ids paired against each other
MatchPairing = Tuple[ParticipantId, ParticipantId]
# (participant, candidates in rank order, have_played) -> chosen opponent
RepeatPolicy = Callable[
    [ParticipantId, List[ParticipantId], Callable[[str, str], bool]], ParticipantId
]

#  LocalWords:  MatchPairing RepeatPolicy
