"""Core engine package for Hearts."""

__all__ = [
    "cards",
    "deck",
    "notation",
    "trick",
    "state",
    "mechanics",
    "scoring",
    "rules_schema",
    "game",
    "display",
]
