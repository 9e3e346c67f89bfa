"""
Repository pattern for database operations.

Provides a clean abstraction over SQLAlchemy for storing games between
requests and across restarts.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gogar.db.models import Base, GameSessionModel, TranscriptEntryModel
from gogar.scorekeeping import Game, GameSnapshot
from gogar.scorekeeping.schemas import AgentSnapshot, TranscriptEntry

T = TypeVar("T", bound=Base)


class BaseRepository(ABC, Generic[T]):
    """Abstract base repository with common CRUD operations."""

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    @property
    @abstractmethod
    def _model_class(self) -> type[T]:
        """Get the model class for this repository."""
        ...

    async def get_by_id(self, entity_id: int) -> T | None:
        """
        Get an entity by its ID.

        Args:
            entity_id: The entity's primary key.

        Returns:
            The entity if found, None otherwise.
        """
        return await self._session.get(self._model_class, entity_id)

    async def create(self, entity: T) -> T:
        """
        Create a new entity.

        Args:
            entity: The entity to create.

        Returns:
            The created entity.
        """
        self._session.add(entity)
        await self._session.flush()
        await self._session.refresh(entity)
        return entity

    async def update(self, entity: T) -> T:
        """
        Update an existing entity.

        Args:
            entity: The entity to update.

        Returns:
            The updated entity.
        """
        await self._session.flush()
        await self._session.refresh(entity)
        return entity


class GameSessionRepository(BaseRepository[GameSessionModel]):
    """Repository for web sessions and their games."""

    @property
    def _model_class(self) -> type[GameSessionModel]:
        """Get the model class."""
        return GameSessionModel

    async def create_from_game(self, game: Game) -> GameSessionModel:
        """
        Store a new session holding ``game``.

        Args:
            game: The session's game.

        Returns:
            The created session model; its ``id`` is the session id.
        """
        model = GameSessionModel(agents=[])
        self._apply(model, game.to_snapshot())
        return await self.create(model)

    async def load_game(self, session_id: int) -> Game | None:
        """
        Rebuild the game stored for a session.

        Args:
            session_id: Session id.

        Returns:
            The game, or None if the session is unknown.
        """
        model = await self.get_by_id(session_id)
        if model is None:
            return None
        snapshot = GameSnapshot(
            agents=[AgentSnapshot.model_validate(a) for a in model.agents],
            transcript=[
                TranscriptEntry(input=e.input, output=e.output, timestamp=e.timestamp)
                for e in model.transcript
            ],
        )
        return Game.from_snapshot(snapshot)

    async def save_game(self, session_id: int, game: Game) -> GameSessionModel | None:
        """
        Overwrite a session's agents and bring its stored transcript up to date.

        Args:
            session_id: Session id.
            game: Current state of the session's game.

        Returns:
            The updated session model, or None if the session is unknown.
        """
        model = await self.get_by_id(session_id)
        if model is None:
            return None
        self._apply(model, game.to_snapshot())
        return await self.update(model)

    async def list_ids(self, limit: int = 100, offset: int = 0) -> list[int]:
        """
        List stored session ids, oldest first.

        Args:
            limit: Maximum number to return.
            offset: Number to skip.

        Returns:
            List of session ids.
        """
        stmt = select(GameSessionModel.id).order_by(GameSessionModel.id).limit(limit).offset(offset)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    def _apply(model: GameSessionModel, snapshot: GameSnapshot) -> None:
        model.agents = [a.model_dump(mode="json") for a in snapshot.agents]
        # Stored rows must be a prefix of the game's transcript; "new game" breaks that.
        stored = len(model.transcript)
        if stored > len(snapshot.transcript) or any(
            (row.input, row.output) != (entry.input, entry.output)
            for row, entry in zip(model.transcript, snapshot.transcript)
        ):
            model.transcript.clear()
            stored = 0
        for sequence, entry in enumerate(snapshot.transcript[stored:], start=stored):
            model.transcript.append(
                TranscriptEntryModel(
                    sequence=sequence,
                    input=entry.input,
                    output=entry.output,
                    timestamp=entry.timestamp,
                )
            )
