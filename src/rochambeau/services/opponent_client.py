"""Facade that always produces a playable opponent throw."""

from __future__ import annotations

import logging

from rochambeau.domain.models import FetchFailure, OpponentFetchResult
from rochambeau.domain.rules_config import RulesRegistry
from rochambeau.interfaces import IOpponentStrategy
from rochambeau.services.fallback_strategy import FallbackStrategy

logger = logging.getLogger(__name__)


class OpponentClient:
    """Run the configured strategy and degrade to local randomness on failure.

    ``fetch`` never raises. A :class:`FetchFailure` from the strategy, an
    exception escaping it, any other return value, or a throw ``rules`` does
    not know is logged and answered by ``fallback``.
    """

    def __init__(
        self,
        strategy: IOpponentStrategy,
        fallback: FallbackStrategy,
        *,
        rules: RulesRegistry | None = None,
    ) -> None:
        self._strategy = strategy
        self._fallback = fallback
        self.rules = rules if rules is not None else fallback.rules

    @property
    def strategy_name(self) -> str:
        return self._strategy.name

    def fetch(self) -> OpponentFetchResult:
        try:
            outcome = self._strategy.fetch()
        except Exception as exc:
            logger.warning(
                "%s strategy raised; using fallback", self.strategy_name, exc_info=True
            )
            outcome = FetchFailure(reason=f"{type(exc).__name__}: {exc}")

        if isinstance(outcome, OpponentFetchResult):
            if self.rules.is_valid(outcome.throw_name):
                return outcome
            outcome = FetchFailure(reason=f"unregistered throw {outcome.throw_name!r}")
        elif not isinstance(outcome, FetchFailure):
            outcome = FetchFailure(reason=f"unexpected result {outcome!r}")

        logger.warning(
            "%s strategy failed after %d attempt(s): %s. Using fallback.",
            self.strategy_name,
            outcome.attempts,
            outcome.reason,
        )
        return self._fallback.fetch()
