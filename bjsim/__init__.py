"""Blackjack shoe simulator with basic strategy and Wong Halves counting."""

__version__ = "0.1.0"
__all__ = ["cards", "cli", "constants", "game", "rng", "simulation", "strategy"]