"""
Scorekeeping agents.

An agent owns its avowed commitments, its own inference and
incompatibility rules, and the challenges it has issued. Everything it
attributes to others is computed by the Game from this state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from uuid import UUID, uuid4

from gogar.config import RuleSpec, get_settings
from gogar.scorekeeping.equality_set import EqualitySet
from gogar.scorekeeping.rules import (
    Challenge,
    IncompatibilitySet,
    Inference,
    Sentence,
    make_incompatibility,
    make_inference,
)

logger = logging.getLogger(__name__)


class Agent:
    """
    A participant in the game of giving and asking for reasons.

    Agents have no value equality: two agents with the same rules are still
    different agents. Names are compared case-insensitively by the Game.
    """

    def __init__(
        self,
        name: str,
        committive: Iterable[RuleSpec] | None = None,
        permissive: Iterable[RuleSpec] | None = None,
        incompatibles: Iterable[Iterable[Sentence]] | None = None,
        intelligence: int | None = None,
        agent_id: UUID | None = None,
    ) -> None:
        """
        Initialize an agent.

        Args:
            name: Agent name, used as the external key.
            committive: Seed committive inferences as (premises, conclusion) pairs.
            permissive: Seed permissive inferences as (premises, conclusion) pairs.
            incompatibles: Seed incompatibility sets.
            intelligence: Reasoning depth budget.
            agent_id: Stable identifier (generated if None).

        Rule sets and intelligence left as None come from settings.
        """
        settings = get_settings()
        if committive is None:
            committive = settings.default_committive_inferences
        if permissive is None:
            permissive = settings.default_permissive_inferences
        if incompatibles is None:
            incompatibles = settings.default_incompatibilities

        self.agent_id: UUID = agent_id or uuid4()
        self.name = name
        self._intelligence = 0
        self.intelligence = settings.default_intelligence if intelligence is None else intelligence
        self.commitments_avowed: EqualitySet[Sentence] = EqualitySet()
        self.incompatibilities: IncompatibilitySet = EqualitySet(
            make_incompatibility(sentences) for sentences in incompatibles
        )
        self.committive_inferences: EqualitySet[Inference] = EqualitySet(
            make_inference(p, c) for p, c in committive
        )
        self.permissive_inferences: EqualitySet[Inference] = EqualitySet(
            make_inference(p, c) for p, c in permissive
        )
        self.challenges_issued: EqualitySet[Challenge] = EqualitySet()

    @property
    def intelligence(self) -> int:
        """Number of reasoning rounds this agent can perform."""
        return self._intelligence

    @intelligence.setter
    def intelligence(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"intelligence must be >= 0, got {value}")
        self._intelligence = value

    # Commitments

    def asserts(self, sentence: Sentence) -> None:
        self.commitments_avowed.add(sentence)

    def disavows(self, sentence: Sentence) -> None:
        self.commitments_avowed.delete(sentence)

    # Challenges

    def challenges(self, target: Agent, sentence: Sentence) -> bool:
        """
        Challenge ``target``'s entitlement to ``sentence``.

        Only sentences the target has actually asserted can be challenged;
        anything else is ignored.

        Returns:
            True if a challenge is now on record.
        """
        if sentence not in target.commitments_avowed:
            logger.debug(f"{self.name}: ignoring challenge, {target.name} never asserted {sentence!r}")
            return False
        self.challenges_issued.add(Challenge(target=target.agent_id, sentence=sentence))
        return True

    def withdraws_challenge(self, target: Agent, sentence: Sentence) -> None:
        self.challenges_issued.delete(Challenge(target=target.agent_id, sentence=sentence))

    # Rules

    def add_committive_inference(self, premises: Iterable[Sentence], conclusion: Sentence) -> None:
        self.committive_inferences.add(make_inference(premises, conclusion))

    def remove_committive_inference(self, premises: Iterable[Sentence], conclusion: Sentence) -> None:
        self.committive_inferences.delete(make_inference(premises, conclusion))

    def add_permissive_inference(self, premises: Iterable[Sentence], conclusion: Sentence) -> None:
        self.permissive_inferences.add(make_inference(premises, conclusion))

    def remove_permissive_inference(self, premises: Iterable[Sentence], conclusion: Sentence) -> None:
        self.permissive_inferences.delete(make_inference(premises, conclusion))

    def add_incompatibility(self, sentences: Iterable[Sentence]) -> None:
        self.incompatibilities.add(make_incompatibility(sentences))

    def remove_incompatibility(self, sentences: Iterable[Sentence]) -> None:
        self.incompatibilities.delete(make_incompatibility(sentences))

    def __repr__(self) -> str:
        return f"Agent(name={self.name!r}, intelligence={self.intelligence})"
