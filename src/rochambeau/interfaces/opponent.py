"""Opponent Strategy Protocol Interface.

This module defines the protocol (interface) every opponent strategy
implements, whether it asks a remote service or invents a move locally.
"""

from typing import Protocol

from rochambeau.domain.models import FetchOutcome, OpponentFetchResult


class IOpponentStrategy(Protocol):
    """Protocol for anything able to produce the opponent's throw.

    Implementations report trouble by returning a
    :class:`~rochambeau.domain.models.FetchFailure` instead of raising.
    """

    name: str

    def fetch(self) -> FetchOutcome:
        """Produce the opponent's throw.

        Returns:
            OpponentFetchResult on success, FetchFailure once the strategy
            has exhausted its own retry budget
        """
        ...


class IOpponentClient(Protocol):
    """Protocol for the facade that always yields a playable throw."""

    def fetch(self) -> OpponentFetchResult:
        """Return the opponent's throw, degrading to a local one on failure."""
        ...
