"""Dominion card game simulation: game state, card effects, text views, an interactive shell and scripted games."""

__version__ = "0.1.0"