"""Tests for domain models (core/models.py).

All models are frozen dataclasses or enums; these tests verify
immutability, equality semantics, and the informational-outcome split.
"""

from __future__ import annotations

import dataclasses

import pytest

from semctl.core.models import Command, Invocation, OperationResult, Outcome


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

class TestCommand:
    @pytest.mark.parametrize(
        ("command", "flag"),
        [
            (Command.CREATE, "-c"),
            (Command.VIEW, "-v"),
            (Command.REMOVE, "-r"),
        ],
    )
    def test_flag(self, command: Command, flag: str) -> None:
        assert command.flag == flag

    def test_lookup_by_letter(self) -> None:
        assert Command("v") is Command.VIEW

    def test_unknown_letter_rejected(self) -> None:
        with pytest.raises(ValueError):
            Command("x")


# ---------------------------------------------------------------------------
# Invocation
# ---------------------------------------------------------------------------

class TestInvocation:
    def test_initial_value_defaults_to_none(self) -> None:
        assert Invocation(Command.VIEW).initial_value is None

    def test_frozen(self) -> None:
        inv = Invocation(Command.CREATE, 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            inv.initial_value = 4  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Invocation(Command.CREATE, 3) == Invocation(Command.CREATE, 3)
        assert Invocation(Command.CREATE, 3) != Invocation(Command.CREATE, 4)


# ---------------------------------------------------------------------------
# Outcome / OperationResult
# ---------------------------------------------------------------------------

class TestOutcome:
    @pytest.mark.parametrize(
        "outcome",
        [Outcome.ALREADY_EXISTS, Outcome.NOT_FOUND, Outcome.DID_NOT_EXIST],
    )
    def test_collisions_are_informational(self, outcome: Outcome) -> None:
        assert outcome.informational is True

    @pytest.mark.parametrize(
        "outcome",
        [Outcome.CREATED, Outcome.READ, Outcome.REMOVED],
    )
    def test_successes_are_not_informational(self, outcome: Outcome) -> None:
        assert outcome.informational is False


class TestOperationResult:
    def test_value_defaults_to_none(self) -> None:
        result = OperationResult(Command.REMOVE, "sem_tool", Outcome.REMOVED)
        assert result.value is None

    def test_frozen(self) -> None:
        result = OperationResult(Command.VIEW, "sem_tool", Outcome.READ, 5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.value = 6  # type: ignore[misc]
