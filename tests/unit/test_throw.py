"""Tests for the Throw value object."""

from __future__ import annotations

from enum import Enum

import pytest

from rochambeau.domain.rules_config import CLASSIC_RULES, DEFAULT_RULES
from rochambeau.domain.throw import InvalidThrowError, Throw


class Hand(Enum):
    ROCK = "rock"
    PAPER = "Paper"


def test_construct_normalizes_case_and_whitespace():
    assert Throw.construct("ROCK") == Throw.construct("  rock ")
    assert Throw.construct("ROCK").name == "rock"


def test_construct_accepts_enum_members():
    assert Throw.construct(Hand.ROCK) == Throw.construct("ROCK")
    assert Throw.construct(Hand.PAPER).name == "paper"


def test_construct_returns_existing_throw_for_same_rules():
    original = Throw("scissors")
    assert Throw.construct(original) is original


def test_construct_revalidates_throw_from_other_rules():
    hammer = Throw("hammer", DEFAULT_RULES)
    with pytest.raises(InvalidThrowError):
        Throw.construct(hammer, CLASSIC_RULES)

    rock = Throw.construct(Throw("rock", DEFAULT_RULES), CLASSIC_RULES)
    assert rock.rules is CLASSIC_RULES


@pytest.mark.parametrize("raw", ["lizard", "", "   ", "rock paper"])
def test_unregistered_names_are_rejected(raw):
    with pytest.raises(InvalidThrowError, match="Invalid throw"):
        Throw.construct(raw)


@pytest.mark.parametrize("raw", [None, 1, ["rock"]])
def test_non_string_input_is_rejected(raw):
    with pytest.raises(InvalidThrowError):
        Throw.construct(raw)  # type: ignore[arg-type]


def test_error_lists_valid_throws():
    with pytest.raises(InvalidThrowError) as excinfo:
        Throw("lizard")
    assert excinfo.value.raw == "lizard"
    assert excinfo.value.valid_throws == ("rock", "paper", "scissors", "hammer")
    assert "rock, paper, scissors, hammer" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)


def test_direct_construction_normalizes():
    assert Throw("Hammer").name == "hammer"


def test_equality_and_hash_ignore_rules():
    default_rock = Throw("rock", DEFAULT_RULES)
    classic_rock = Throw("rock", CLASSIC_RULES)
    assert default_rock == classic_rock
    assert len({default_rock, classic_rock, Throw("ROCK")}) == 1


def test_throws_are_immutable():
    rock = Throw("rock")
    with pytest.raises(AttributeError):
        rock.name = "paper"  # type: ignore[misc]


def test_beats_delegates_to_rules():
    assert Throw("rock").beats(Throw("scissors"))
    assert not Throw("scissors").beats(Throw("rock"))
    assert Throw("hammer").beats(Throw("rock"))
    assert Throw("paper").beats(Throw("hammer"))


def test_str_and_repr():
    rock = Throw("ROCK")
    assert str(rock) == "rock"
    assert repr(rock) == "Throw(name='rock')"
