"""Recall: browse keybinds, shortcuts, commands and more in the terminal."""

__version__ = "0.1.0"
