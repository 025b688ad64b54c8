"""Caller-facing entry point: play one round against the opponent."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rochambeau.domain.models import OpponentFetchResult
from rochambeau.domain.resolver import resolve
from rochambeau.domain.result import Result
from rochambeau.domain.rules_config import DEFAULT_RULES, RulesRegistry
from rochambeau.domain.throw import Throw
from rochambeau.interfaces import IOpponentClient


@dataclass(frozen=True, slots=True)
class GameRound:
    """A resolved round plus the provenance of the opponent's throw."""

    result: Result
    opponent: OpponentFetchResult

    @property
    def used_fallback(self) -> bool:
        return self.opponent.is_fallback

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = dict(self.result.to_dict())
        payload["source"] = self.opponent.source.value
        payload["used_fallback"] = self.used_fallback
        return payload


class GameService:
    """Validate the player's throw, fetch the opponent's, resolve the round."""

    def __init__(self, opponents: IOpponentClient, *, rules: RulesRegistry = DEFAULT_RULES) -> None:
        self._opponents = opponents
        self.rules = rules

    def throws(self) -> tuple[str, ...]:
        return self.rules.throws

    def play(self, raw_throw: str | Enum | Throw) -> GameRound:
        """Play one round.

        Raises:
            InvalidThrowError: before any network call when ``raw_throw`` is not
                a registered throw
        """
        player = Throw.construct(raw_throw, self.rules)
        opponent = self._opponents.fetch()
        result = resolve(player, opponent.throw_name, rules=self.rules)
        return GameRound(result=result, opponent=opponent)
