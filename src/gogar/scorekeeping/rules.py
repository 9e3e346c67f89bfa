"""
Data structures for scorekeeping rules.

Defines inferences, incompatibility sets and challenges, the building
blocks each agent uses to keep score on the others.
"""

from __future__ import annotations

from collections.abc import Iterable
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gogar.scorekeeping.equality_set import EqualitySet

# Sentences are opaque; the engine only ever compares them for equality.
Sentence = str

IncompatibilitySet = EqualitySet[EqualitySet[Sentence]]


class Inference(BaseModel):
    """
    A premises/conclusion rule.

    Two inferences are equal when their premises are equal as sets and their
    conclusions are equal. Premise order is kept for display only.
    """

    model_config = ConfigDict(frozen=True)

    premises: tuple[Sentence, ...] = Field(
        default=(),
        description="Sentences that must all be held for the rule to fire",
    )
    conclusion: Sentence = Field(..., description="Sentence the rule yields")

    @field_validator("premises", mode="before")
    @classmethod
    def _drop_duplicate_premises(cls, value: Iterable[Sentence]) -> tuple[Sentence, ...]:
        return tuple(EqualitySet(value))

    @property
    def premise_set(self) -> EqualitySet[Sentence]:
        return EqualitySet(self.premises)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Inference):
            return NotImplemented
        return self.premise_set == other.premise_set and self.conclusion == other.conclusion

    def __hash__(self) -> int:
        return hash((frozenset(self.premises), self.conclusion))

    def __str__(self) -> str:
        return f"{self.premise_set} |- {self.conclusion}"


class Challenge(BaseModel):
    """
    A recorded dispute of another agent's entitlement to a sentence.

    The target is referenced by agent id rather than by object, so a
    challenge against an agent that has left the game simply stops
    matching anyone.
    """

    model_config = ConfigDict(frozen=True)

    target: UUID = Field(..., description="agent_id of the challenged agent")
    sentence: Sentence = Field(..., description="The disputed sentence")


def make_inference(premises: Iterable[Sentence], conclusion: Sentence) -> Inference:
    """Build an inference from raw premise and conclusion values."""
    return Inference(premises=tuple(premises), conclusion=conclusion)


def make_incompatibility(sentences: Iterable[Sentence]) -> EqualitySet[Sentence]:
    """Build one incompatibility set from raw sentence values."""
    return EqualitySet(sentences)
