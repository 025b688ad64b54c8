"""Rock/paper/scissors rules engine with a resilient remote opponent."""

__version__ = "0.1.0"
