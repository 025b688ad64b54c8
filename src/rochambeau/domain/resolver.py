"""Pure resolution of a round from two throws."""

from __future__ import annotations

from enum import Enum

from .enums import Outcome
from .result import Result
from .rules_config import DEFAULT_RULES, RulesRegistry
from .throw import Throw

RawThrow = str | Enum | Throw


def determine_outcome(player: Throw, opponent: Throw) -> Outcome:
    """Score ``player`` against ``opponent``.

    Pairs the rules leave undecided score as a loss for the player.
    """

    if player == opponent:
        return Outcome.TIE
    if player.beats(opponent):
        return Outcome.WIN
    return Outcome.LOSE


def resolve(
    player_throw: RawThrow,
    opponent_throw: RawThrow,
    *,
    rules: RulesRegistry = DEFAULT_RULES,
) -> Result:
    """Resolve a round.

    Both inputs are coerced with :meth:`Throw.construct`; an unregistered name
    raises :class:`~rochambeau.domain.throw.InvalidThrowError`.
    """

    player = Throw.construct(player_throw, rules)
    opponent = Throw.construct(opponent_throw, rules)
    return Result(
        player_throw=player,
        opponent_throw=opponent,
        outcome=determine_outcome(player, opponent),
    )
