"""Remote opponent strategy.

Asks the opponent API for a throw. The endpoint answers with a JSON envelope
``{"statusCode": <int>, "body": "<throw-name>"}``; a ``statusCode`` of 500
signals an application error even when the transport status is 200.

Every failed attempt is retried until ``max_retries`` is spent. The strategy
never invents a move itself: once the budget is exhausted it reports a
:class:`FetchFailure` and leaves the fallback decision to the client facade.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from rochambeau import __version__
from rochambeau.domain.enums import Source
from rochambeau.domain.models import FetchFailure, FetchOutcome, OpponentFetchResult
from rochambeau.domain.rules_config import DEFAULT_RULES, RulesRegistry, normalize_throw_name

logger = logging.getLogger(__name__)

APPLICATION_ERROR_STATUS = 500
DEFAULT_CONNECT_TIMEOUT = 5.0
DEFAULT_READ_TIMEOUT = 10.0
DEFAULT_MAX_RETRIES = 1


class RemoteFetchError(Exception):
    """A single attempt against the opponent API failed."""


class RemoteStrategy:
    """Fetch the opponent's throw over HTTP with timeouts and retries."""

    name = "remote"

    def __init__(
        self,
        url: str,
        *,
        rules: RulesRegistry = DEFAULT_RULES,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        verify_tls: bool = True,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if max_retries < 0:
            raise ValueError(f"max_retries must be non-negative, got {max_retries}")
        self.url = url
        self.rules = rules
        self.max_retries = max_retries
        self.timeout = httpx.Timeout(
            connect=connect_timeout,
            read=read_timeout,
            write=read_timeout,
            pool=connect_timeout,
        )
        self._verify_tls = verify_tls
        self._transport = transport

    def fetch(self) -> FetchOutcome:
        attempts = self.max_retries + 1
        last_error: RemoteFetchError | None = None

        with self._client() as client:
            for attempt in range(1, attempts + 1):
                try:
                    throw_name = self._attempt(client)
                except RemoteFetchError as exc:
                    last_error = exc
                    if attempt < attempts:
                        logger.info("retry %d/%d after: %s", attempt, self.max_retries, exc)
                    continue
                return OpponentFetchResult(throw_name=throw_name, source=Source.REMOTE)

        return FetchFailure(reason=str(last_error), attempts=attempts)

    def _client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self.timeout,
            verify=self._verify_tls,
            transport=self._transport,
            headers={
                "Accept": "application/json",
                "User-Agent": f"rochambeau/{__version__}",
            },
        )

    def _attempt(self, client: httpx.Client) -> str:
        try:
            response = client.get(self.url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise RemoteFetchError(f"{type(exc).__name__}: {exc}") from exc

        if not response.is_success:
            raise RemoteFetchError(f"HTTP {response.status_code}: {response.reason_phrase}")

        payload = _parse_payload(response)
        if payload.get("statusCode") == APPLICATION_ERROR_STATUS:
            raise RemoteFetchError(f"API error: {payload.get('body')}")

        throw_name = payload.get("body")
        if not isinstance(throw_name, str) or not self.rules.is_valid(throw_name):
            raise RemoteFetchError(f"Invalid throw from API: {throw_name!r}")
        return normalize_throw_name(throw_name)


def _parse_payload(response: httpx.Response) -> dict[str, Any]:
    try:
        payload = response.json()
    except ValueError as exc:
        raise RemoteFetchError(f"malformed JSON body: {exc}") from exc
    if not isinstance(payload, dict):
        raise RemoteFetchError(f"expected a JSON object, got {type(payload).__name__}")
    return payload
