"""Local opponent strategy used when the remote API is unavailable."""

from __future__ import annotations

import random

from rochambeau.domain.enums import Source
from rochambeau.domain.models import OpponentFetchResult
from rochambeau.domain.rules_config import DEFAULT_RULES, RulesRegistry


class FallbackStrategy:
    """Pick a random standard throw. Never fails."""

    name = "fallback"

    def __init__(
        self, rules: RulesRegistry = DEFAULT_RULES, *, rng: random.Random | None = None
    ) -> None:
        self.rules = rules
        self._rng = rng

    def fetch(self) -> OpponentFetchResult:
        return OpponentFetchResult(
            throw_name=self.rules.random_throw(self._rng),
            source=Source.FALLBACK,
        )
