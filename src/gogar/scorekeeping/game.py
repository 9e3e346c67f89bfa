"""
The scorekeeping game.

Owns the agent population and the transcript, and computes what each
agent attributes to each other agent. Nothing derived is cached: every
query recomputes from the current population, because default
entitlement depends on every agent's challenge record.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from uuid import UUID

from gogar.config import get_settings
from gogar.scorekeeping.agent import Agent
from gogar.scorekeeping.closure import (
    consequences_once,
    expand_entitlements,
    fixed_point,
    remove_incompatibles,
)
from gogar.scorekeeping.equality_set import EqualitySet
from gogar.scorekeeping.errors import AgentNotFoundError, DuplicateNameError
from gogar.scorekeeping.rules import Challenge, IncompatibilitySet, Sentence
from gogar.scorekeeping.schemas import (
    AgentDescription,
    AgentSnapshot,
    ChallengeView,
    GameSnapshot,
    Score,
    TranscriptEntry,
)

logger = logging.getLogger(__name__)


# Attribution over an explicit population


def challenged_sentences(agents: Iterable[Agent], target: Agent) -> EqualitySet[Sentence]:
    """Sentences that any agent in ``agents`` has challenged ``target`` on."""
    challenged: EqualitySet[Sentence] = EqualitySet()
    for agent in agents:
        challenged.update(
            c.sentence for c in agent.challenges_issued if c.target == target.agent_id
        )
    return challenged


def unchallenged_assertions(agents: Iterable[Agent], target: Agent) -> EqualitySet[Sentence]:
    return target.commitments_avowed - challenged_sentences(agents, target)


def all_unchallenged_assertions(agents: Iterable[Agent]) -> EqualitySet[Sentence]:
    """
    The default-entitlement pool.

    Everything anyone has asserted, minus what that asserter has been
    challenged on by someone in the population.
    """
    population = list(agents)
    pool: EqualitySet[Sentence] = EqualitySet()
    for agent in population:
        pool.update(unchallenged_assertions(population, agent))
    return pool


def commitments(scorekeeper: Agent, other: Agent) -> EqualitySet[Sentence]:
    """What ``scorekeeper``, reasoning with its own rules, takes ``other`` to be committed to."""
    rules = scorekeeper.committive_inferences
    return fixed_point(
        other.commitments_avowed.copy(),
        scorekeeper.intelligence,
        lambda basis: consequences_once(rules, basis),
    )


def incompatibles(scorekeeper: Agent, other: Agent) -> IncompatibilitySet:
    """Incompatibility sets of ``scorekeeper`` that ``other`` is wholly committed to."""
    coms = commitments(scorekeeper, other)
    return scorekeeper.incompatibilities.filter(lambda incompatible: incompatible <= coms)


def entitlements(agents: Iterable[Agent], scorekeeper: Agent, other: Agent) -> EqualitySet[Sentence]:
    """
    What ``scorekeeper`` takes ``other`` to be entitled to.

    Starts from default entitlement to every unchallenged assertion in the
    population that fits ``other``'s commitments, then expands with the
    scorekeeper's rules. Expansion depth is bounded by the other agent's
    intelligence, whereas commitment tracing uses the scorekeeper's.
    """
    coms = commitments(scorekeeper, other)
    incs = scorekeeper.incompatibilities
    base = remove_incompatibles(all_unchallenged_assertions(agents), coms, incs)
    return fixed_point(
        base,
        other.intelligence,
        lambda ents: expand_entitlements(
            coms,
            ents,
            incs,
            scorekeeper.committive_inferences,
            scorekeeper.permissive_inferences,
        ),
    )


class Game:
    """
    A single session of the game of giving and asking for reasons.

    Not thread-safe: hosts serving one Game from several requests must
    serialize access themselves.
    """

    def __init__(self) -> None:
        self._agents: EqualitySet[Agent] = EqualitySet()
        self._transcript: list[TranscriptEntry] = []

    @property
    def agents(self) -> list[Agent]:
        """Agents in the game, in the order they joined."""
        return self._agents.to_list()

    @property
    def transcript(self) -> list[TranscriptEntry]:
        """Get all recorded (input, output) pairs, oldest first."""
        return self._transcript.copy()

    def reset(self) -> None:
        """Remove every agent and clear the transcript."""
        self._agents = EqualitySet()
        self._transcript = []

    def new_game(self) -> None:
        """Reset and seed the configured starting agents."""
        self.reset()
        for name in get_settings().seed_agents:
            self.add_agent(name)

    # Agent directory

    def agent_named(self, name: str) -> Agent | None:
        wanted = name.lower()
        for agent in self._agents:
            if agent.name.lower() == wanted:
                return agent
        return None

    def get_agent(self, name: str) -> Agent:
        """
        Look up an agent by name, case-insensitively.

        Raises:
            AgentNotFoundError: If no agent has that name.
        """
        agent = self.agent_named(name)
        if agent is None:
            raise AgentNotFoundError(name)
        return agent

    def add_agent(self, name: str, **kwargs) -> Agent:
        """
        Add a new agent with the given name.

        Args:
            name: Name for the agent.
            **kwargs: Seed rules and intelligence, passed to Agent.

        Raises:
            DuplicateNameError: If the name is already taken.
        """
        if self.agent_named(name) is not None:
            raise DuplicateNameError(name)
        agent = Agent(name, **kwargs)
        self._agents.add(agent)
        logger.debug(f"Agent {name} joined the game")
        return agent

    def remove_agent(self, name: str) -> Agent:
        """
        Remove an agent. Challenges that target it become vacuous.

        Raises:
            AgentNotFoundError: If no agent has that name.
        """
        agent = self.get_agent(name)
        self._agents.delete(agent)
        logger.debug(f"Agent {agent.name} left the game")
        return agent

    def withdraw_dangling_challenges(self, agent: Agent, sentence: Sentence) -> int:
        """
        Withdraw ``agent``'s challenges to ``sentence`` whose target has left the game.

        Returns:
            The number of challenges withdrawn.
        """
        present = [a.agent_id for a in self._agents]
        dangling = agent.challenges_issued.filter(
            lambda c: c.sentence == sentence and c.target not in present
        )
        for challenge in dangling:
            agent.challenges_issued.delete(challenge)
        return len(dangling)

    # Attribution

    def all_unchallenged_assertions(self) -> EqualitySet[Sentence]:
        return all_unchallenged_assertions(self._agents)

    def commitments(self, scorekeeper: Agent, other: Agent) -> EqualitySet[Sentence]:
        return commitments(scorekeeper, other)

    def incompatibles(self, scorekeeper: Agent, other: Agent) -> IncompatibilitySet:
        return incompatibles(scorekeeper, other)

    def entitlements(self, scorekeeper: Agent, other: Agent) -> EqualitySet[Sentence]:
        return entitlements(self._agents, scorekeeper, other)

    def score(self, scorekeeper: Agent, other: Agent) -> Score:
        return Score(
            scorekeeper=scorekeeper.name,
            other=other.name,
            commitments=self.commitments(scorekeeper, other).to_list(),
            entitlements=self.entitlements(scorekeeper, other).to_list(),
            incompatibles=[inc.to_list() for inc in self.incompatibles(scorekeeper, other)],
        )

    def score_by_name(self, scorekeeper: str, other: str) -> Score:
        return self.score(self.get_agent(scorekeeper), self.get_agent(other))

    def score_all(self) -> list[Score]:
        """Score every ordered pair of agents, self-pairs included, sorted by name."""
        ordered = sorted(self._agents, key=lambda a: a.name)
        return [self.score(sk, ot) for sk in ordered for ot in ordered]

    def describe(self, name: str) -> AgentDescription:
        agent = self.get_agent(name)
        return AgentDescription(
            name=agent.name,
            intelligence=agent.intelligence,
            commitments_avowed=agent.commitments_avowed.to_list(),
            incompatibilities=[inc.to_list() for inc in agent.incompatibilities],
            committive_inferences=agent.committive_inferences.to_list(),
            permissive_inferences=agent.permissive_inferences.to_list(),
            challenges_issued=[
                ChallengeView(
                    target=c.target,
                    target_name=self._name_of(c.target),
                    sentence=c.sentence,
                )
                for c in agent.challenges_issued
            ],
        )

    def _name_of(self, agent_id: UUID) -> str | None:
        for agent in self._agents:
            if agent.agent_id == agent_id:
                return agent.name
        return None

    # Transcript

    def record(self, input: str, output: str) -> TranscriptEntry:
        """Append an (input, output) pair to the transcript."""
        entry = TranscriptEntry(input=input, output=output)
        self._transcript.append(entry)
        return entry

    # Snapshots

    def to_snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            agents=[
                AgentSnapshot(
                    agent_id=a.agent_id,
                    name=a.name,
                    intelligence=a.intelligence,
                    commitments_avowed=a.commitments_avowed.to_list(),
                    incompatibilities=[inc.to_list() for inc in a.incompatibilities],
                    committive_inferences=a.committive_inferences.to_list(),
                    permissive_inferences=a.permissive_inferences.to_list(),
                    challenges_issued=[(c.target, c.sentence) for c in a.challenges_issued],
                )
                for a in self._agents
            ],
            transcript=self.transcript,
        )

    @classmethod
    def from_snapshot(cls, snapshot: GameSnapshot) -> Game:
        """Rebuild a game, keeping agent ids so challenges resolve as before."""
        game = cls()
        for snap in snapshot.agents:
            agent = Agent(
                snap.name,
                committive=[(inf.premises, inf.conclusion) for inf in snap.committive_inferences],
                permissive=[(inf.premises, inf.conclusion) for inf in snap.permissive_inferences],
                incompatibles=snap.incompatibilities,
                intelligence=snap.intelligence,
                agent_id=snap.agent_id,
            )
            for sentence in snap.commitments_avowed:
                agent.asserts(sentence)
            for target, sentence in snap.challenges_issued:
                agent.challenges_issued.add(Challenge(target=target, sentence=sentence))
            game._agents.add(agent)
        game._transcript = list(snapshot.transcript)
        return game
