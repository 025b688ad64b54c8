"""JSON HTTP surface over the game service."""
