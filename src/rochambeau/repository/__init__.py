"""Persistence adapters for rule tables."""

from rochambeau.repository.json_store import JsonRulesRepository, RulesDocument

__all__ = ["JsonRulesRepository", "RulesDocument"]
