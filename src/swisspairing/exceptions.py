"""Exceptions for use in Swiss Pairing"""

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

from typing import Any, Optional


# ========== Base Application Exception ==========


class SwissPairingError(Exception):
    """Base exception for all Swiss Pairing errors.

    All custom exceptions in the package inherit from this class, so every
    engine error can be caught with a single except clause.
    """

    pass


# ========== Participant Exceptions ==========


class ParticipantError(SwissPairingError):
    """Base exception for participant-related errors."""

    pass


class UnknownParticipantError(ParticipantError):
    """Raised when a requested participant id is not registered."""

    def __init__(self, participant_id: str):
        super().__init__(f"Unknown participant: {participant_id}")
        self.participant_id = participant_id


class DuplicateNameError(ParticipantError):
    """Raised when registering a name that is already present."""

    def __init__(self, name: str):
        super().__init__(f"A participant named {name!r} is already registered")
        self.name = name


class InvalidParticipantNameError(ParticipantError):
    """Raised when a participant name is empty or not a string."""

    pass


# ========== Pairing Exceptions ==========


class PairingError(SwissPairingError):
    """Base exception for pairing-related errors."""

    pass


class InsufficientParticipantsError(PairingError):
    """Raised when fewer than two participants are available to pair."""

    def __init__(self, count: int):
        super().__init__(
            f"At least two participants are required to pair a round, got {count}"
        )
        self.count = count


# ========== Tournament Exceptions ==========


class TournamentError(SwissPairingError):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateError(TournamentError):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class RoundInProgressError(TournamentStateError):
    """Raised when a new round is requested before all results are in."""

    def __init__(self, round_number: int, pending: int):
        super().__init__(
            f"Round {round_number} still has {pending} pairing(s) awaiting results"
        )
        self.round_number = round_number
        self.pending = pending


class TournamentCompleteError(TournamentStateError):
    """Raised when a round is requested after the planned rounds are played."""

    def __init__(self, total_rounds: int):
        super().__init__(f"All {total_rounds} planned rounds have been created")
        self.total_rounds = total_rounds


class RoundNotFoundError(TournamentError):
    """Raised when a requested round does not exist."""

    pass


# ========== Result Exceptions ==========


class ResultError(SwissPairingError):
    """Base exception for result recording errors."""

    pass


class InvalidScoreError(ResultError):
    """Raised when a reported game score is not an accepted score pair.

    Recoverable: no tournament state is changed, the same pairing can be
    re-entered.
    """

    def __init__(
        self,
        self_score: Any,
        opponent_score: Any,
        pairing_id: Optional[str] = None,
    ):
        super().__init__(
            f"Invalid score {self_score}-{opponent_score}"
            + (f" for pairing {pairing_id}" if pairing_id else "")
        )
        self.self_score = self_score
        self.opponent_score = opponent_score
        self.pairing_id = pairing_id


class PairingNotFoundError(ResultError):
    """Raised when a result references a pairing not in the current round."""

    def __init__(self, pairing_ref: Any):
        super().__init__(f"No pairing {pairing_ref} in the current round")
        self.pairing_ref = pairing_ref


class DuplicateResultError(ResultError):
    """Raised when attempting to record a result that already exists."""

    def __init__(self, pairing_id: str):
        super().__init__(f"Pairing {pairing_id} already has a recorded result")
        self.pairing_id = pairing_id


# ========== Configuration Exceptions ==========


class ConfigurationError(SwissPairingError):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration data is invalid."""

    pass
