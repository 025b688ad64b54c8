"""Throw value object."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .rules_config import DEFAULT_RULES, RulesRegistry, normalize_throw_name


class InvalidThrowError(ValueError):
    """Raised when a raw identifier is not a registered throw."""

    def __init__(self, raw: object, valid_throws: tuple[str, ...]) -> None:
        self.raw = raw
        self.valid_throws = valid_throws
        super().__init__(f"Invalid throw: {raw!r}. Valid throws: {', '.join(valid_throws)}")


@dataclass(frozen=True, slots=True)
class Throw:
    """One participant's move.

    ``name`` is always canonical and registered in ``rules``. Equality and
    hashing only consider ``name``.
    """

    name: str
    rules: RulesRegistry = field(default=DEFAULT_RULES, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.rules.is_valid(self.name):
            raise InvalidThrowError(self.name, self.rules.throws)
        object.__setattr__(self, "name", normalize_throw_name(self.name))

    @classmethod
    def construct(cls, raw: str | Enum | Throw, rules: RulesRegistry = DEFAULT_RULES) -> Throw:
        """Coerce raw input into a :class:`Throw` validated against ``rules``."""

        if isinstance(raw, Throw):
            return raw if raw.rules is rules else cls(raw.name, rules)
        value = raw.value if isinstance(raw, Enum) else raw
        if not isinstance(value, str):
            raise InvalidThrowError(raw, rules.throws)
        return cls(value, rules)

    def beats(self, other: Throw) -> bool:
        return self.rules.defeats(self.name, other.name)

    def __str__(self) -> str:
        return self.name
