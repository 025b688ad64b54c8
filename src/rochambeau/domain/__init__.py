"""Domain layer for the hand game.

Everything here is pure: no HTTP, no configuration lookups, no globals other
than the frozen default rule tables. It exposes:

* :mod:`rules_config` with the :class:`RulesRegistry` and its ready-made tables.
* :mod:`throw` and :mod:`result` value objects.
* :mod:`resolver` turning two throws into a result.
* :mod:`models` with the values opponent strategies return.
"""

from . import enums, models, resolver, result, rules_config, throw
from .enums import Outcome, Source
from .models import FetchFailure, FetchOutcome, OpponentFetchResult
from .resolver import determine_outcome, resolve
from .result import Result
from .rules_config import CLASSIC_RULES, DEFAULT_RULES, RulesConfigError, RulesRegistry
from .throw import InvalidThrowError, Throw

__all__ = [
    "CLASSIC_RULES",
    "DEFAULT_RULES",
    "FetchFailure",
    "FetchOutcome",
    "InvalidThrowError",
    "OpponentFetchResult",
    "Outcome",
    "Result",
    "RulesConfigError",
    "RulesRegistry",
    "Source",
    "Throw",
    "determine_outcome",
    "enums",
    "models",
    "resolve",
    "resolver",
    "result",
    "rules_config",
    "throw",
]
