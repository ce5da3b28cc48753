"""Core pieces of a small raycasting first-person engine: player state, key handling, line reading and error reporting."""

__version__ = "0.1.0"
__all__ = ["errors", "input", "line_reader", "player"]