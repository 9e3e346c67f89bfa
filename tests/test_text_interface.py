"""
Tests for the terminal interface loop.
"""

import pytest

from gogar.io import TextInterface
from gogar.orchestrator import GOODBYE


def _feed(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> None:
    remaining = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.mark.asyncio
async def test_runs_commands_until_quit(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    _feed(monkeypatch, ["Bob asserts A is red", "quit", "Ann asserts A is blue"])
    interface = TextInterface()

    await interface.run()

    out = capsys.readouterr().out
    assert "Welcome to the game of giving and asking for reasons" in out
    assert "Ann's score on Bob" in out
    assert out.endswith(GOODBYE)

    game = interface.interpreter.game
    assert [e.input for e in game.transcript] == ["new game", "Bob asserts A is red", "quit"]
    assert len(game.get_agent("Ann").commitments_avowed) == 0


@pytest.mark.asyncio
async def test_end_of_input_quits(monkeypatch: pytest.MonkeyPatch) -> None:
    _feed(monkeypatch, [])
    interface = TextInterface()

    await interface.run()

    assert interface.interpreter.game.transcript[-1].output == GOODBYE
