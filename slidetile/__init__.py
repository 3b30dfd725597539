"""A* solver for the 3x3 sliding tile puzzle: boards, search and command line."""

__version__ = "0.1.0"
__all__ = ["board", "solver", "cli"]