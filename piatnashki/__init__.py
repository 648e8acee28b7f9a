"""A fifteen-style sliding puzzle with move history, session files and a Tkinter window."""

__version__ = "1.0.0"
__all__ = ["board", "game", "gui", "jsonfields"]