"""
Scorekeeping module.

Models agents who assert sentences and keep score on each other's
commitments and entitlements, following the dynamics of the game of
giving and asking for reasons.
"""

from gogar.scorekeeping.agent import Agent
from gogar.scorekeeping.equality_set import EqualitySet
from gogar.scorekeeping.errors import AgentNotFoundError, DuplicateNameError, GogarError
from gogar.scorekeeping.game import Game
from gogar.scorekeeping.rules import Challenge, Inference, Sentence
from gogar.scorekeeping.schemas import (
    AgentDescription,
    GameSnapshot,
    Score,
    TranscriptEntry,
)

__all__ = [
    "Agent",
    "AgentDescription",
    "AgentNotFoundError",
    "Challenge",
    "DuplicateNameError",
    "EqualitySet",
    "Game",
    "GameSnapshot",
    "GogarError",
    "Inference",
    "Score",
    "Sentence",
    "TranscriptEntry",
]
