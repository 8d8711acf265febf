"""Super Trunfo card games: a single card duel and a countries game against the computer."""

__version__ = "0.1.0"
__all__ = ["countries", "duel"]