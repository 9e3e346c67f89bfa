"""
Tests for the command interpreter and text rendering.
"""

import pytest

from gogar.orchestrator import GOODBYE, HELP_MESSAGE, STARTUP_BANNER, CommandInterpreter, wrap
from gogar.scorekeeping.rules import make_incompatibility, make_inference


@pytest.fixture
def interpreter() -> CommandInterpreter:
    """An interpreter over a fresh game with Ann and Bob."""
    interp = CommandInterpreter()
    interp.execute("new game")
    return interp


class TestWrap:
    """Tests for listing wrapping."""

    def test_short_text_unchanged(self) -> None:
        assert wrap("\nCommitments:  {A is red, A is colored}") == "\nCommitments:  {A is red, A is colored}"

    def test_semicolons_become_commas(self) -> None:
        assert wrap("x: {a}; {b}") == "x: {a}, {b}"

    def test_long_text_wraps_with_indent(self) -> None:
        text = ", ".join(f"sentence number {i}" for i in range(10))
        wrapped = wrap(text, width=40)
        lines = wrapped.split("\n")
        assert len(lines) > 1
        assert all(line.startswith("  ") for line in lines[1:])
        assert wrapped.replace("\n  ", ", ").replace(", , ", ", ") == text


class TestCommands:
    """Tests for individual commands."""

    def test_new_game(self) -> None:
        interp = CommandInterpreter()
        assert interp.execute("new game") == STARTUP_BANNER
        assert [a.name for a in interp.game.agents] == ["Ann", "Bob"]

    def test_quit_and_help(self, interpreter: CommandInterpreter) -> None:
        assert interpreter.execute("quit") == GOODBYE
        assert interpreter.execute("  exit ") == GOODBYE
        assert interpreter.execute("help") == HELP_MESSAGE

    def test_unrecognized(self, interpreter: CommandInterpreter) -> None:
        assert interpreter.execute("frobnicate the widget!") == "Command not recognized.  Try: help\n"
        assert interpreter.execute("Zed") == "Command not recognized.  Try: help\n"

    def test_add_and_remove_agent(self, interpreter: CommandInterpreter) -> None:
        assert interpreter.execute("add agent Sal") == "Agent Sal added.\n"
        assert interpreter.execute("add agent sal") == "An agent named sal already exists.\n"
        assert interpreter.execute("remove agent Bob") == "Agent Bob removed.\n"
        assert interpreter.execute("remove agent Bob") == "There is no agent named Bob.\n"
        assert [a.name for a in interpreter.game.agents] == ["Ann", "Sal"]

    def test_asserts_reports_all_scores(self, interpreter: CommandInterpreter) -> None:
        output = interpreter.execute("Bob asserts A is red.")
        assert "Ann's score on Bob\nCommitments:  {A is red, A is colored}" in output
        assert "Bob's score on Ann\nCommitments:  {}" in output
        assert interpreter.game.get_agent("Bob").commitments_avowed.to_list() == ["A is red"]

    def test_quotes_are_stripped(self, interpreter: CommandInterpreter) -> None:
        interpreter.execute('Bob asserts: "A is red"')
        assert interpreter.game.get_agent("Bob").commitments_avowed.to_list() == ["A is red"]

    def test_unknown_agent(self, interpreter: CommandInterpreter) -> None:
        assert interpreter.execute("Zed asserts A is red") == "Agent Zed not found. Try: list agents\n"
        assert interpreter.execute("Ann's score on Zed") == "Agent Zed not found. Try: list agents\n"
        assert (
            interpreter.execute("Ann challenges Zed's entitlement to A is red")
            == "Agent Zed not found. Try: list agents\n"
        )

    def test_disavows(self, interpreter: CommandInterpreter) -> None:
        assert interpreter.execute("Bob disavows A is red") == 'Agent Bob has not asserted "A is red"\n'
        interpreter.execute("Bob asserts A is red")
        output = interpreter.execute("Bob disavows A is red")
        assert "Ann's score on Bob" in output
        assert len(interpreter.game.get_agent("Bob").commitments_avowed) == 0

    def test_challenge_and_withdraw(self, interpreter: CommandInterpreter) -> None:
        assert (
            interpreter.execute("Ann challenges Bob's entitlement to A is red")
            == 'Bob never asserted "A is red"\n'
        )

        interpreter.execute("Bob asserts A is red")
        output = interpreter.execute("Ann challenges Bob's entitlement to A is red")
        assert "Ann's score on Bob\nCommitments:  {A is red, A is colored}\nEntitlements: {}" in output
        assert len(interpreter.game.get_agent("Ann").challenges_issued) == 1

        interpreter.execute("Ann abandons her challenge to Bob's entitlement to A is red")
        assert len(interpreter.game.get_agent("Ann").challenges_issued) == 0

    def test_withdraw_challenge_to_departed_agent(self, interpreter: CommandInterpreter) -> None:
        interpreter.execute("Bob asserts A is red")
        interpreter.execute("Ann challenges Bob's entitlement to A is red")
        interpreter.execute("remove agent Bob")
        assert "a departed agent" in interpreter.execute("Ann")

        assert (
            interpreter.execute("Ann withdraws her challenge to Zed's entitlement to A is blue")
            == "Agent Zed not found. Try: list agents\n"
        )
        interpreter.execute("Ann withdraws her challenge to Bob's entitlement to A is red")
        assert len(interpreter.game.get_agent("Ann").challenges_issued) == 0

    def test_score_commands(self, interpreter: CommandInterpreter) -> None:
        interpreter.execute("Bob asserts A is red")
        single = interpreter.execute("Ann's score on Bob")
        assert single == interpreter.execute("score of ann on bob")
        assert single.startswith("\nCommitments:  {A is red, A is colored}")
        assert interpreter.execute("score").count("'s score on ") == 4

    def test_inference_commands(self, interpreter: CommandInterpreter) -> None:
        interpreter.execute("Bob adds committive inference: A is red; A is small |- A is dangerous")
        bob = interpreter.game.get_agent("Bob")
        assert make_inference(["A is small", "A is red"], "A is dangerous") in bob.committive_inferences

        interpreter.execute("Ann removes permissive inference: A is fragrant, A is red |- A is edible.")
        ann = interpreter.game.get_agent("Ann")
        assert make_inference(["A is red", "A is fragrant"], "A is edible") not in ann.permissive_inferences
        assert len(ann.permissive_inferences) == 1

    def test_incompatibility_commands(self, interpreter: CommandInterpreter) -> None:
        interpreter.execute("Bob adds incompatibility: {A is red; A is yellow}")
        bob = interpreter.game.get_agent("Bob")
        assert make_incompatibility(["A is yellow", "A is red"]) in bob.incompatibilities

        interpreter.execute("Ann removes incompatibility: {A is blue; A is red}")
        ann = interpreter.game.get_agent("Ann")
        assert make_incompatibility(["A is red", "A is blue"]) not in ann.incompatibilities

    def test_set_intelligence(self, interpreter: CommandInterpreter) -> None:
        interpreter.execute("Bob asserts A is red")
        output = interpreter.execute("set intelligence of Ann to 0")
        assert interpreter.game.get_agent("Ann").intelligence == 0
        assert "Ann's score on Bob\nCommitments:  {A is red}\n" in output

    def test_describe_agent(self, interpreter: CommandInterpreter) -> None:
        interpreter.execute("Bob asserts A is red")
        interpreter.execute("Ann challenges Bob's entitlement to A is red")
        output = interpreter.execute("ann")
        assert output.startswith("Ann\nIntelligence = 100\nCommitments avowed: {}")
        assert "Committive inferences accepted: {A is red} |- A is colored" in output
        assert "Challenges issued: challenged Bob's entitlement to \"A is red\"" in output
        assert "\nCommitments:  {}" in output

    def test_list_agents(self, interpreter: CommandInterpreter) -> None:
        output = interpreter.execute("list agents")
        assert output.startswith("Ann\n")
        assert "\nBob\nIntelligence = 100" in output


class TestTranscript:
    """Tests for transcript recording."""

    def test_every_command_is_recorded(self, interpreter: CommandInterpreter) -> None:
        answers = [interpreter.execute(c) for c in ["Bob asserts A is red", "nonsense!", "help"]]
        transcript = interpreter.game.transcript
        assert [e.input for e in transcript] == ["new game", "Bob asserts A is red", "nonsense!", "help"]
        assert [e.output for e in transcript[1:]] == answers
