"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`rochambeau` package (e.g., `from rochambeau.api.app import create_app`)
without requiring an editable install in CI. It also provides a scripted
stand-in for the opponent API.
"""

import sys
from pathlib import Path

import httpx
import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

OPPONENT_URL = "https://opponent.test/throw"


class ScriptedOpponentApi:
    """Replays a script of responses; the last step repeats forever.

    Each step is either an exception instance to raise or a
    ``(status_code, payload)`` pair where a ``str`` payload is sent verbatim
    and anything else is encoded as JSON.
    """

    def __init__(self) -> None:
        self.steps: list[object] = [(200, {"statusCode": 200, "body": "rock"})]
        self.requests: list[httpx.Request] = []
        self.url = OPPONENT_URL

    def script(self, *steps: object) -> "ScriptedOpponentApi":
        self.steps = list(steps)
        return self

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        step = self.steps[min(len(self.requests), len(self.steps)) - 1]
        if isinstance(step, Exception):
            raise step
        status_code, payload = step
        if isinstance(payload, str):
            return httpx.Response(status_code, text=payload)
        return httpx.Response(status_code, json=payload)


@pytest.fixture
def opponent_api() -> ScriptedOpponentApi:
    return ScriptedOpponentApi()
