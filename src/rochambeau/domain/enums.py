"""Enumerations shared by the rules layer and the opponent services."""

from __future__ import annotations

from enum import StrEnum


class Outcome(StrEnum):
    """Result of a round, from the player's perspective."""

    WIN = "win"
    LOSE = "lose"
    TIE = "tie"


class Source(StrEnum):
    """Where an opponent throw came from."""

    REMOTE = "remote"
    FALLBACK = "fallback"
