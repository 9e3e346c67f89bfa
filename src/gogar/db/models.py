"""
SQLAlchemy models for database persistence.

Defines the database schema for web sessions, the games they hold, and
their transcripts.
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, ForeignKey, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class GameSessionModel(Base):
    """Database model for one web session and the state of its game."""

    __tablename__ = "game_sessions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    agents: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON,
        default=list,
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_now_utc,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_now_utc,
        onupdate=_now_utc,
        nullable=False,
    )

    # Relationships
    transcript: Mapped[list["TranscriptEntryModel"]] = relationship(
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="TranscriptEntryModel.sequence",
        lazy="selectin",
    )


class TranscriptEntryModel(Base):
    """Database model for one command/answer pair of a session's transcript."""

    __tablename__ = "transcript_entries"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    session_id: Mapped[int] = mapped_column(
        ForeignKey("game_sessions.id"),
        nullable=False,
    )
    sequence: Mapped[int] = mapped_column(nullable=False)
    input: Mapped[str] = mapped_column(Text, nullable=False)
    output: Mapped[str] = mapped_column(Text, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_now_utc,
        nullable=False,
    )

    # Relationships
    session: Mapped["GameSessionModel"] = relationship(back_populates="transcript")
