"""A game with spoken menus, a character choice screen and a two-player Pong."""

__version__ = "0.2.0"

__all__ = ["__version__"]