"""Service layer: everything that talks to the outside world.

Architecture:
    - RemoteStrategy: opponent throw from the HTTP API, with timeouts and retries
    - FallbackStrategy: random standard throw, always succeeds
    - OpponentClient: facade choosing the strategy and falling back on failure
    - GameService: validates the player's throw and resolves a full round

Production Usage:
    from rochambeau.factory import create_game_service
    games = create_game_service(settings)
    round_ = games.play("paper")

Testing Usage:
    from rochambeau.services import GameService, OpponentClient, FallbackStrategy

    class ScriptedStrategy:
        name = "scripted"

        def fetch(self):
            return OpponentFetchResult(throw_name="rock", source=Source.REMOTE)

    games = GameService(OpponentClient(ScriptedStrategy(), FallbackStrategy()))
"""

from rochambeau.services.fallback_strategy import FallbackStrategy
from rochambeau.services.game_service import GameRound, GameService
from rochambeau.services.opponent_client import OpponentClient
from rochambeau.services.remote_strategy import RemoteFetchError, RemoteStrategy

__all__ = [
    "FallbackStrategy",
    "GameRound",
    "GameService",
    "OpponentClient",
    "RemoteFetchError",
    "RemoteStrategy",
]
