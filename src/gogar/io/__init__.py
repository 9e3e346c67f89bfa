"""
IO module for game interfaces.

Provides the terminal interface for playing the game.
"""

from gogar.io.text_interface import GameInterface, TextInterface

__all__ = ["GameInterface", "TextInterface"]
