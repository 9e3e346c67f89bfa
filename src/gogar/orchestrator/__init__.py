"""
Orchestrator module for running command lines against a game.
"""

from gogar.orchestrator.command_interpreter import (
    GOODBYE,
    HELP_MESSAGE,
    STARTUP_BANNER,
    CommandInterpreter,
)
from gogar.orchestrator.rendering import render_agent, render_score, render_score_all, wrap

__all__ = [
    "CommandInterpreter",
    "GOODBYE",
    "HELP_MESSAGE",
    "STARTUP_BANNER",
    "render_agent",
    "render_score",
    "render_score_all",
    "wrap",
]
