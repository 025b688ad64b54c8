"""Tests for the HTTP-backed opponent strategy."""

from __future__ import annotations

import logging

import httpx
import pytest

from rochambeau.domain.enums import Source
from rochambeau.domain.models import FetchFailure, OpponentFetchResult
from rochambeau.domain.rules_config import CLASSIC_RULES
from rochambeau.services.remote_strategy import RemoteStrategy


def _strategy(api, **kwargs) -> RemoteStrategy:
    return RemoteStrategy(api.url, transport=api.transport, **kwargs)


def test_healthy_response(opponent_api):
    opponent_api.script((200, {"statusCode": 200, "body": "paper"}))

    outcome = _strategy(opponent_api).fetch()

    assert outcome == OpponentFetchResult(throw_name="paper", source=Source.REMOTE)
    assert opponent_api.calls == 1


def test_response_is_normalized(opponent_api):
    opponent_api.script((200, {"statusCode": 200, "body": " SCISSORS "}))

    outcome = _strategy(opponent_api).fetch()

    assert isinstance(outcome, OpponentFetchResult)
    assert outcome.throw_name == "scissors"


def test_request_headers(opponent_api):
    _strategy(opponent_api).fetch()

    request = opponent_api.requests[0]
    assert request.method == "GET"
    assert str(request.url) == opponent_api.url
    assert request.headers["Accept"] == "application/json"
    assert request.headers["User-Agent"].startswith("rochambeau/")


@pytest.mark.parametrize(
    ("step", "reason"),
    [
        (httpx.ConnectTimeout("timed out"), "ConnectTimeout"),
        (httpx.ReadTimeout("timed out"), "ReadTimeout"),
        (httpx.ConnectError("Connection refused"), "Connection refused"),
        ((500, "Internal Server Error"), "HTTP 500"),
        ((404, {"message": "missing"}), "HTTP 404"),
        ((200, {"statusCode": 500, "body": "Something went wrong"}), "API error"),
        ((200, "not json"), "malformed JSON"),
        ((200, ["rock"]), "expected a JSON object"),
        ((200, {"statusCode": 200, "body": "lizard"}), "Invalid throw from API"),
        ((200, {"statusCode": 200, "body": 3}), "Invalid throw from API"),
        ((200, {"statusCode": 200}), "Invalid throw from API"),
    ],
)
def test_failures_exhaust_retry_budget(opponent_api, step, reason):
    opponent_api.script(step)

    outcome = _strategy(opponent_api).fetch()

    assert isinstance(outcome, FetchFailure)
    assert reason in outcome.reason
    assert outcome.attempts == 2
    assert opponent_api.calls == 2


def test_retry_then_success(opponent_api, caplog):
    opponent_api.script(
        httpx.ReadTimeout("timed out"),
        (200, {"statusCode": 200, "body": "rock"}),
    )

    with caplog.at_level(logging.INFO, logger="rochambeau.services.remote_strategy"):
        outcome = _strategy(opponent_api).fetch()

    assert outcome == OpponentFetchResult(throw_name="rock", source=Source.REMOTE)
    assert opponent_api.calls == 2
    assert "retry 1/1" in caplog.text


def test_no_retries_configured(opponent_api):
    opponent_api.script((503, "unavailable"), (200, {"statusCode": 200, "body": "rock"}))

    outcome = _strategy(opponent_api, max_retries=0).fetch()

    assert isinstance(outcome, FetchFailure)
    assert outcome.attempts == 1
    assert opponent_api.calls == 1


def test_larger_retry_budget(opponent_api):
    opponent_api.script(
        (500, "boom"),
        (200, {"statusCode": 500, "body": "boom"}),
        (200, {"statusCode": 200, "body": "paper"}),
    )

    outcome = _strategy(opponent_api, max_retries=2).fetch()

    assert isinstance(outcome, OpponentFetchResult)
    assert outcome.throw_name == "paper"
    assert opponent_api.calls == 3


def test_validates_against_configured_rules(opponent_api):
    opponent_api.script((200, {"statusCode": 200, "body": "hammer"}))

    assert isinstance(_strategy(opponent_api).fetch(), OpponentFetchResult)
    assert isinstance(_strategy(opponent_api, rules=CLASSIC_RULES).fetch(), FetchFailure)


def test_timeouts_are_separate():
    strategy = RemoteStrategy("https://opponent.test/throw", connect_timeout=1.5, read_timeout=4.0)

    assert strategy.timeout.connect == 1.5
    assert strategy.timeout.read == 4.0


def test_negative_retries_rejected():
    with pytest.raises(ValueError, match="max_retries must be non-negative"):
        RemoteStrategy("https://opponent.test/throw", max_retries=-1)


def test_malformed_url_becomes_failure():
    outcome = RemoteStrategy("http://[::1", max_retries=1).fetch()

    assert isinstance(outcome, FetchFailure)
    assert "InvalidURL" in outcome.reason
    assert outcome.attempts == 2
