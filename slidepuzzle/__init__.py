"""A sliding-tile puzzle game for the terminal, with map files, undo and session logs."""

__version__ = "1.0.0"
__all__ = ["__version__"]