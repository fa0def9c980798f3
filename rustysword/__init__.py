"""A small terminal arcade game of swords and monsters."""

__version__ = "0.2.0"
__all__ = ["coord", "floor", "timer", "monster", "player", "world", "render", "audio", "game"]