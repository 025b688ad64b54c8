"""Protocol-based interfaces for the opponent services.

Services depend on these protocols so tests can inject small fakes instead of
patching network code.
"""

from rochambeau.interfaces.opponent import IOpponentClient, IOpponentStrategy

__all__ = [
    "IOpponentClient",
    "IOpponentStrategy",
]
