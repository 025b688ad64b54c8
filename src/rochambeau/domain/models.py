"""Values exchanged between opponent strategies and their callers."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import Source


@dataclass(frozen=True, slots=True)
class OpponentFetchResult:
    """An opponent throw and where it came from."""

    throw_name: str
    source: Source

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", Source(self.source))

    @property
    def is_remote(self) -> bool:
        return self.source is Source.REMOTE

    @property
    def is_fallback(self) -> bool:
        return self.source is Source.FALLBACK


@dataclass(frozen=True, slots=True)
class FetchFailure:
    """A strategy that could not produce a throw within its budget."""

    reason: str
    attempts: int = 1


FetchOutcome = OpponentFetchResult | FetchFailure
