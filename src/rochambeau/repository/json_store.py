"""JSON-based loader for rule tables.

A rule table on disk looks like::

    {
        "throws": {"rock": ["scissors"], "paper": ["rock"], "scissors": ["paper"]},
        "standard": ["rock", "paper", "scissors"]
    }
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from rochambeau.domain.rules_config import STANDARD_THROWS, RulesRegistry


class RulesDocument(BaseModel):
    """Schema of a rule table file."""

    throws: dict[str, list[str]] = Field(min_length=1)
    standard: list[str] = Field(default_factory=lambda: list(STANDARD_THROWS), min_length=1)

    def to_registry(self) -> RulesRegistry:
        return RulesRegistry(self.throws, standard=tuple(self.standard))


class JsonRulesRepository:
    """Read and write rule tables as JSON documents."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> RulesRegistry:
        """Parse the file and build a validated registry.

        Raises ``pydantic.ValidationError`` for a malformed document and
        ``RulesConfigError`` for an inconsistent rule table.
        """

        document = RulesDocument.model_validate_json(self.path.read_bytes())
        return document.to_registry()

    def save(self, rules: RulesRegistry) -> Path:
        """Serialize ``rules`` to disk and return the file path."""

        document = RulesDocument(throws=rules.as_dict(), standard=list(rules.standard))
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(document.model_dump_json(indent=2), encoding="utf-8")
        return self.path
