"""A small maze-chasing arcade game: game rules in pacgame.game, window in pacgame.app."""

__version__ = "0.1.0"
__all__ = ["__version__"]