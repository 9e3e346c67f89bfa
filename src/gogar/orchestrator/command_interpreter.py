"""
Command interpreter.

Turns command lines such as "Bob asserts A is red" into operations on a
Game, renders the outcome as text, and records every exchange in the
game's transcript.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from gogar.config import get_settings
from gogar.orchestrator.rendering import render_agent, render_score, render_score_all
from gogar.scorekeeping import AgentNotFoundError, DuplicateNameError, Game

GOODBYE = "Goodbye.\n"

STARTUP_BANNER = """
Welcome to the game of giving and asking for reasons,
a simulation of the linguistic scorekeeping dynamics
described in chapter 3 of Robert Brandom's book
Making It Explicit (Harvard University Press, 1994).

For a list of sample commands, type help

"""

HELP_MESSAGE = """
list agents
add agent Sal
remove agent Bob
new game
score
Bob's score on Ann
Bob asserts A is red
Bob disavows A is red
Ann challenges Bob's entitlement to A is red
Ann abandons his challenge to Bob's entitlement to A is red
Bob adds committive inference: A is red; A is small |- A is dangerous
Bob adds incompatibility: {A is red; A is yellow}
Ann removes incompatibility: {A is blue; A is red}
Ann removes permissive inference: A is small; A is blue |- A is edible
set intelligence of Bob to 2
Ann
help
quit

"""

_LIST_SPLIT = re.compile(r"\s*,\s*|\s*;\s*")

Handler = Callable[[re.Match[str]], str]


def remove_quotes(text: str) -> str:
    return text.replace('"', "")


def sentence_from(text: str) -> str:
    return remove_quotes(text).strip()


def not_found(name: str) -> str:
    return f"Agent {name} not found. Try: list agents\n"


class CommandInterpreter:
    """
    Executes text commands against a Game.

    Commands are matched against a fixed table of patterns; the first
    pattern that matches handles the line. Engine lookup failures are
    turned into messages here and never escape.
    """

    def __init__(self, game: Game | None = None, width: int | None = None) -> None:
        """
        Initialize the interpreter.

        Args:
            game: Game to operate on. Creates an empty game if None.
            width: Wrap column for listings (uses config if not provided).
        """
        self._logger = logging.getLogger(__name__)
        self._game = game or Game()
        self._width = width or get_settings().wrap_width
        self._commands: list[tuple[re.Pattern[str], Handler]] = [
            (re.compile(r"^\s*(quit|exit)\s*$"), self._quit),
            (re.compile(r"^\s*help\s*$"), lambda m: HELP_MESSAGE),
            (re.compile(r"^\s*(list)?\s*agents\s*$"), self._list_agents),
            (re.compile(r"^\s*add\s*agent\s+(\w+)\s*$"), self._add_agent),
            (re.compile(r"^\s*remove\s*agent\s+(\w+)\s*$"), self._remove_agent),
            (re.compile(r"^\s*new\s*game\s*$"), self._new_game),
            (re.compile(r"^\s*score\s*of\s+(\w+)\s+on\s+(\w+)\s*$"), self._score_pair),
            (re.compile(r"^\s*(\w+)'s\s+score\s+on\s+(\w+)\s*$"), self._score_pair),
            (re.compile(r"^\s*score\s*$"), lambda m: self.score_all()),
            (re.compile(r"^\s*set\s+intelligence\s+of\s+(\w+)\s+to\s+(\d+)\s*$"), self._set_intelligence),
            (re.compile(r"^\s*(\w+)\s+asserts:?\s*([^.]+)\.?\s*$"), self._asserts),
            (re.compile(r"^\s*(\w+)\s+disavows:?\s*([^.]+)\.?\s*$"), self._disavows),
            (
                re.compile(r"^\s*(\w+)\s+challenges\s+(\w+)('s\s+entitlement\s+to)?\s+([^.]+)\.?\s*$"),
                self._challenges,
            ),
            (
                re.compile(
                    r"^\s*(\w+)\s+(?:abandons|withdraws)\s+(?:his\s+|her\s+|its\s+|their\s+)?challenge\s+"
                    r"(?:to\s+)?(\w+)(?:'s entitlement to)?\s+([^.]+)\.?\s*$"
                ),
                self._withdraws,
            ),
            (
                re.compile(
                    r"^\s*(\w+)\s+(adds|removes)\s+(committive|permissive)\s+inference:?\s+"
                    r"[\[{]?\s*([^\]}]+?)\s*[\]}]?\s*\|-\s*([^.]+?)\.?\s*$"
                ),
                self._inference,
            ),
            (
                re.compile(
                    r"^\s*(\w+)\s+(adds|removes)\s+incompatibility:?\s+"
                    r"[\[{]?\s*([^\]}]+?)\s*[\]}]?\s*\.?\s*$"
                ),
                self._incompatibility,
            ),
            (re.compile(r"^\s*(\w+)\s*$"), self._describe),
        ]

    @property
    def game(self) -> Game:
        """Get the game being played."""
        return self._game

    def execute(self, line: str) -> str:
        """
        Run one command line and record it in the transcript.

        Args:
            line: Raw command text.

        Returns:
            The text answer.
        """
        self._logger.debug(f"Command: {line!r}")
        result = "Command not recognized.  Try: help\n"
        for pattern, handler in self._commands:
            match = pattern.match(line)
            if match:
                result = handler(match)
                break
        self._game.record(line, result)
        return result

    def score_all(self) -> str:
        return render_score_all(self._game.score_all(), self._width)

    # Handlers

    def _quit(self, match: re.Match[str]) -> str:
        return GOODBYE

    def _list_agents(self, match: re.Match[str]) -> str:
        return "\n".join(
            render_agent(self._game.describe(a.name), self._width) for a in self._game.agents
        )

    def _add_agent(self, match: re.Match[str]) -> str:
        name = remove_quotes(match.group(1))
        try:
            self._game.add_agent(name)
        except DuplicateNameError:
            return f"An agent named {name} already exists.\n"
        return f"Agent {name} added.\n"

    def _remove_agent(self, match: re.Match[str]) -> str:
        name = remove_quotes(match.group(1))
        try:
            self._game.remove_agent(name)
        except AgentNotFoundError:
            return f"There is no agent named {name}.\n"
        return f"Agent {name} removed.\n"

    def _new_game(self, match: re.Match[str]) -> str:
        self._game.new_game()
        return STARTUP_BANNER

    def _score_pair(self, match: re.Match[str]) -> str:
        try:
            score = self._game.score_by_name(match.group(1), match.group(2))
        except AgentNotFoundError as e:
            return not_found(e.name)
        return render_score(score, self._width)

    def _set_intelligence(self, match: re.Match[str]) -> str:
        agent = self._game.agent_named(match.group(1))
        if agent is None:
            return not_found(match.group(1))
        agent.intelligence = int(match.group(2))
        return self.score_all()

    def _asserts(self, match: re.Match[str]) -> str:
        agent = self._game.agent_named(match.group(1))
        if agent is None:
            return not_found(match.group(1))
        agent.asserts(sentence_from(match.group(2)))
        return self.score_all()

    def _disavows(self, match: re.Match[str]) -> str:
        agent = self._game.agent_named(match.group(1))
        if agent is None:
            return not_found(match.group(1))
        sentence = sentence_from(match.group(2))
        if sentence not in agent.commitments_avowed:
            return f'Agent {match.group(1)} has not asserted "{sentence}"\n'
        agent.disavows(sentence)
        return self.score_all()

    def _challenges(self, match: re.Match[str]) -> str:
        agent = self._game.agent_named(remove_quotes(match.group(1)))
        if agent is None:
            return not_found(match.group(1))
        target = self._game.agent_named(remove_quotes(match.group(2)))
        if target is None:
            return not_found(match.group(2))
        sentence = sentence_from(match.group(4))
        if not agent.challenges(target, sentence):
            return f'{target.name} never asserted "{sentence}"\n'
        return self.score_all()

    def _withdraws(self, match: re.Match[str]) -> str:
        agent = self._game.agent_named(remove_quotes(match.group(1)))
        if agent is None:
            return not_found(match.group(1))
        sentence = sentence_from(match.group(3))
        target = self._game.agent_named(remove_quotes(match.group(2)))
        if target is None:
            # The target may have left the game since the challenge was issued.
            if self._game.withdraw_dangling_challenges(agent, sentence) == 0:
                return not_found(match.group(2))
            return self.score_all()
        agent.withdraws_challenge(target, sentence)
        return self.score_all()

    def _inference(self, match: re.Match[str]) -> str:
        agent = self._game.agent_named(match.group(1))
        if agent is None:
            return not_found(match.group(1))
        adding = match.group(2) == "adds"
        premises = _LIST_SPLIT.split(match.group(4).strip())
        conclusion = match.group(5).strip()
        if match.group(3) == "permissive":
            if adding:
                agent.add_permissive_inference(premises, conclusion)
            else:
                agent.remove_permissive_inference(premises, conclusion)
        else:
            if adding:
                agent.add_committive_inference(premises, conclusion)
            else:
                agent.remove_committive_inference(premises, conclusion)
        return self.score_all()

    def _incompatibility(self, match: re.Match[str]) -> str:
        agent = self._game.agent_named(match.group(1))
        if agent is None:
            return not_found(match.group(1))
        sentences = _LIST_SPLIT.split(match.group(3).strip())
        if match.group(2) == "adds":
            agent.add_incompatibility(sentences)
        else:
            agent.remove_incompatibility(sentences)
        return self.score_all()

    def _describe(self, match: re.Match[str]) -> str:
        agent = self._game.agent_named(match.group(1))
        if agent is None:
            return "Command not recognized.  Try: help\n"
        description = render_agent(self._game.describe(agent.name), self._width)
        return description + "\n" + render_score(self._game.score(agent, agent), self._width)
