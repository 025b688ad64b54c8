"""Runtime primitives backing the rochambeau HTTP API."""

from __future__ import annotations

import asyncio
import logging

from rochambeau.config import Settings, get_settings
from rochambeau.domain.rules_config import RulesRegistry
from rochambeau.factory import create_game_service, load_rules
from rochambeau.services.game_service import GameRound, GameService

logger = logging.getLogger(__name__)


class ApiState:
    """Aggregated services shared by the FastAPI layer."""

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        rules: RulesRegistry | None = None,
        games: GameService | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.rules = rules if rules is not None else load_rules(self.settings)
        self.games = games or create_game_service(self.settings, self.rules)
        logger.info(
            "serving %d throws with the %s opponent strategy",
            len(self.rules.throws),
            self.settings.opponent_strategy,
        )

    async def play(self, raw_throw: str) -> GameRound:
        """Run one round off the event loop; the opponent fetch blocks."""

        return await asyncio.to_thread(self.games.play, raw_throw)


def build_state() -> ApiState:
    """Factory used by the API to initialize state."""

    return ApiState()
