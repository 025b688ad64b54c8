"""Service Factory for rochambeau.

This module wires settings, rules and strategies into ready-to-use services.
Use these functions in production code; in tests build the services directly
and inject protocol-based fakes.

Example:
    # Production usage
    from rochambeau.factory import create_game_service
    games = create_game_service(get_settings())

    # Testing usage
    from rochambeau.services import FallbackStrategy, OpponentClient

    class ScriptedStrategy:
        name = "scripted"

        def fetch(self):
            return FetchFailure(reason="offline")

    client = OpponentClient(ScriptedStrategy(), FallbackStrategy())
"""

from __future__ import annotations

from collections.abc import Callable

from rochambeau.config import Settings
from rochambeau.domain.rules_config import DEFAULT_RULES, RulesRegistry
from rochambeau.interfaces import IOpponentStrategy
from rochambeau.repository import JsonRulesRepository
from rochambeau.services.fallback_strategy import FallbackStrategy
from rochambeau.services.game_service import GameService
from rochambeau.services.opponent_client import OpponentClient
from rochambeau.services.remote_strategy import RemoteStrategy

StrategyBuilder = Callable[[Settings, RulesRegistry], IOpponentStrategy]


def _build_remote(settings: Settings, rules: RulesRegistry) -> IOpponentStrategy:
    return RemoteStrategy(
        settings.opponent_api_url,
        rules=rules,
        connect_timeout=settings.opponent_connect_timeout,
        read_timeout=settings.opponent_read_timeout,
        max_retries=settings.opponent_max_retries,
        verify_tls=settings.opponent_verify_tls,
    )


def _build_fallback(settings: Settings, rules: RulesRegistry) -> IOpponentStrategy:
    return FallbackStrategy(rules)


STRATEGIES: dict[str, StrategyBuilder] = {
    "remote": _build_remote,
    "fallback": _build_fallback,
}


def register_strategy(name: str, builder: StrategyBuilder) -> None:
    """Make ``builder`` selectable through ``Settings.opponent_strategy``."""

    STRATEGIES[name.strip().lower()] = builder


def load_rules(settings: Settings) -> RulesRegistry:
    """Return the rule table configured by ``settings``.

    Args:
        settings: Application settings

    Returns:
        Registry read from ``settings.rules_file``, or the built-in default
    """
    if settings.rules_file is None:
        return DEFAULT_RULES
    return JsonRulesRepository(settings.rules_file).load()


def create_strategy(settings: Settings, rules: RulesRegistry) -> IOpponentStrategy:
    """Build the strategy named by ``settings.opponent_strategy``.

    Raises:
        ValueError: If no strategy is registered under that name
    """
    name = settings.opponent_strategy.strip().lower()
    builder = STRATEGIES.get(name)
    if builder is None:
        known = ", ".join(sorted(STRATEGIES))
        raise ValueError(f"Unknown strategy: {settings.opponent_strategy!r}. Known: {known}")
    return builder(settings, rules)


def create_opponent_client(
    settings: Settings, rules: RulesRegistry = DEFAULT_RULES
) -> OpponentClient:
    """Create an OpponentClient with the configured strategy and a local fallback."""

    return OpponentClient(
        create_strategy(settings, rules), FallbackStrategy(rules), rules=rules
    )


def create_game_service(settings: Settings, rules: RulesRegistry | None = None) -> GameService:
    """Create a GameService with all dependencies.

    Args:
        settings: Application settings
        rules: Rule table to use; loaded from ``settings`` when omitted

    Returns:
        Fully initialized GameService
    """
    rules = rules if rules is not None else load_rules(settings)
    return GameService(create_opponent_client(settings, rules), rules=rules)
