"""Klondike solitaire: card model, game rules and a pygame window to play in."""

__version__ = "1.0.0"
__all__ = ["app", "cards", "game"]