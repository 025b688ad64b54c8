"""Declarative rule table describing which throw defeats which.

The registry is the single source of truth for the universe of valid throws.
Adding a throw is a data change: build a new :class:`RulesRegistry` (or point
``RULES_FILE`` at a JSON document) rather than touching the resolver.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from itertools import combinations
from types import MappingProxyType

logger = logging.getLogger(__name__)

STANDARD_THROWS: tuple[str, ...] = ("rock", "paper", "scissors")


class RulesConfigError(ValueError):
    """Raised when a rule table is internally inconsistent."""


def normalize_throw_name(raw: str) -> str:
    """Return the canonical spelling of a throw name."""

    return raw.strip().casefold()


@dataclass(frozen=True, slots=True, eq=False)
class RulesRegistry:
    """Read-only mapping of throw name to the throws it defeats.

    Declaration order of ``table`` is preserved and is the order reported by
    :meth:`what_defeats` and :attr:`throws`.
    """

    table: Mapping[str, tuple[str, ...]]
    standard: tuple[str, ...] = STANDARD_THROWS

    def __post_init__(self) -> None:
        table = _normalize_table(self.table)
        standard = tuple(dict.fromkeys(normalize_throw_name(name) for name in self.standard))
        _validate(table, standard)
        object.__setattr__(self, "table", MappingProxyType(table))
        object.__setattr__(self, "standard", standard)

    @property
    def throws(self) -> tuple[str, ...]:
        return tuple(self.table)

    def all_throws(self) -> frozenset[str]:
        return frozenset(self.table)

    def standard_throws(self) -> frozenset[str]:
        """Throws the remote opponent API understands."""

        return frozenset(self.standard)

    def is_valid(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return normalize_throw_name(name) in self.table

    def defeats(self, attacker: str, defender: str) -> bool:
        """Return ``True`` when ``attacker`` beats ``defender``."""

        beaten = self.table.get(normalize_throw_name(attacker), ())
        return normalize_throw_name(defender) in beaten

    def what_defeats(self, name: str) -> tuple[str, ...]:
        """Throws defeated by ``name``; empty when ``name`` is unknown."""

        return self.table.get(normalize_throw_name(name), ())

    def random_throw(self, rng: random.Random | None = None) -> str:
        """Pick a standard throw uniformly at random.

        Only the standard subset is eligible so locally generated moves look
        like genuine API responses.
        """

        choose = rng.choice if rng is not None else random.choice
        return choose(self.standard)

    def as_dict(self) -> dict[str, list[str]]:
        return {name: list(beaten) for name, beaten in self.table.items()}


def _normalize_table(raw: Mapping[str, Iterable[str]]) -> dict[str, tuple[str, ...]]:
    table: dict[str, tuple[str, ...]] = {}
    for raw_name, raw_beaten in raw.items():
        name = normalize_throw_name(raw_name)
        if not name:
            raise RulesConfigError("throw names must not be empty")
        if name in table:
            raise RulesConfigError(f"duplicate throw after normalization: {name!r}")
        if isinstance(raw_beaten, str):
            raise RulesConfigError(f"defeat list for {name!r} must be a sequence of names")
        beaten: list[str] = []
        for other in raw_beaten:
            other_name = normalize_throw_name(other)
            if other_name not in beaten:
                beaten.append(other_name)
        table[name] = tuple(beaten)
    return table


def _validate(table: Mapping[str, tuple[str, ...]], standard: tuple[str, ...]) -> None:
    if not table:
        raise RulesConfigError("rule table must define at least one throw")

    for name, beaten in table.items():
        if name in beaten:
            raise RulesConfigError(f"{name!r} cannot defeat itself")
        unknown = [other for other in beaten if other not in table]
        if unknown:
            raise RulesConfigError(f"{name!r} defeats unregistered throws: {', '.join(unknown)}")
        for other in beaten:
            if name in table[other]:
                raise RulesConfigError(f"{name!r} and {other!r} defeat each other")

    if not standard:
        raise RulesConfigError("standard throw set must not be empty")
    missing = [name for name in standard if name not in table]
    if missing:
        raise RulesConfigError(f"standard throws missing from table: {', '.join(missing)}")

    for first, second in combinations(table, 2):
        if first in table[second] or second in table[first]:
            continue
        if first in standard and second in standard:
            raise RulesConfigError(f"standard throws {first!r} and {second!r} have no winner")
        logger.warning("rules leave %s vs %s undecided", first, second)


CLASSIC_RULES = RulesRegistry(
    {
        "rock": ("scissors",),
        "paper": ("rock",),
        "scissors": ("paper",),
    }
)

DEFAULT_RULES = RulesRegistry(
    {
        "rock": ("scissors",),
        "paper": ("rock", "hammer"),
        "scissors": ("paper",),
        "hammer": ("scissors", "rock"),
    }
)
