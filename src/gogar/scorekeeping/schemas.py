"""
Pydantic schemas for scorekeeping results and game snapshots.

Results are plain structured data; turning them into text is the caller's job.
"""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, Field

from gogar.scorekeeping.rules import Inference


def _now_utc() -> datetime:
    """Get current UTC datetime (timezone-aware)."""
    return datetime.now(timezone.utc)


class Score(BaseModel):
    """What one agent attributes to another."""

    scorekeeper: str = Field(..., description="Name of the agent keeping score")
    other: str = Field(..., description="Name of the agent being scored")
    commitments: list[str] = Field(default_factory=list, description="Attributed commitments")
    entitlements: list[str] = Field(default_factory=list, description="Attributed entitlements")
    incompatibles: list[list[str]] = Field(
        default_factory=list,
        description="Incompatibility sets the other is committed to, by the scorekeeper's lights",
    )


class ChallengeView(BaseModel):
    """A challenge with its target resolved to a name."""

    target: UUID = Field(..., description="agent_id of the challenged agent")
    target_name: str | None = Field(
        default=None,
        description="Name of the challenged agent, None if it has left the game",
    )
    sentence: str = Field(..., description="The disputed sentence")


class AgentDescription(BaseModel):
    """Full rule and commitment state of one agent."""

    name: str
    intelligence: int
    commitments_avowed: list[str] = Field(default_factory=list)
    incompatibilities: list[list[str]] = Field(default_factory=list)
    committive_inferences: list[Inference] = Field(default_factory=list)
    permissive_inferences: list[Inference] = Field(default_factory=list)
    challenges_issued: list[ChallengeView] = Field(default_factory=list)


class TranscriptEntry(BaseModel):
    """One command given to the game and the answer it produced."""

    input: str
    output: str
    timestamp: datetime = Field(default_factory=_now_utc)


class AgentSnapshot(BaseModel):
    """Serializable state of one agent."""

    agent_id: UUID
    name: str
    intelligence: int = Field(..., ge=0)
    commitments_avowed: list[str] = Field(default_factory=list)
    incompatibilities: list[list[str]] = Field(default_factory=list)
    committive_inferences: list[Inference] = Field(default_factory=list)
    permissive_inferences: list[Inference] = Field(default_factory=list)
    challenges_issued: list[tuple[UUID, str]] = Field(
        default_factory=list,
        description="(target agent_id, sentence) pairs",
    )


class GameSnapshot(BaseModel):
    """Serializable state of a whole game, used for session persistence."""

    agents: list[AgentSnapshot] = Field(default_factory=list)
    transcript: list[TranscriptEntry] = Field(default_factory=list)
