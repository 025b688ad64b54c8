"""Result value object produced by the resolver."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import Outcome
from .throw import Throw

_MESSAGES = {
    Outcome.WIN: "You win!",
    Outcome.LOSE: "You lose!",
    Outcome.TIE: "It's a tie!",
}


@dataclass(frozen=True, slots=True)
class Result:
    """Outcome of one round together with both throws."""

    player_throw: Throw
    opponent_throw: Throw
    outcome: Outcome

    def __post_init__(self) -> None:
        try:
            outcome = Outcome(self.outcome)
        except ValueError as exc:
            valid = ", ".join(member.value for member in Outcome)
            raise ValueError(f"Invalid outcome: {self.outcome}. Valid outcomes: {valid}") from exc
        object.__setattr__(self, "outcome", outcome)

    @property
    def is_win(self) -> bool:
        return self.outcome is Outcome.WIN

    @property
    def is_lose(self) -> bool:
        return self.outcome is Outcome.LOSE

    @property
    def is_tie(self) -> bool:
        return self.outcome is Outcome.TIE

    @property
    def message(self) -> str:
        return _MESSAGES[self.outcome]

    def to_dict(self) -> dict[str, str]:
        return {
            "player_throw": self.player_throw.name,
            "opponent_throw": self.opponent_throw.name,
            "outcome": self.outcome.value,
            "message": self.message,
        }
