"""
Database module for persistence.

Provides SQLAlchemy models and repository pattern for
game session persistence.
"""

from gogar.db.models import Base, GameSessionModel, TranscriptEntryModel
from gogar.db.repository import GameSessionRepository
from gogar.db.session import create_engine, create_session_factory, init_db

__all__ = [
    "Base",
    "GameSessionModel",
    "TranscriptEntryModel",
    "GameSessionRepository",
    "create_engine",
    "create_session_factory",
    "init_db",
]
