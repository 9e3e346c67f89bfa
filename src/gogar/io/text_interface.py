"""
Text-based game interface.

Provides a command-line prompt for playing the game of giving and
asking for reasons via text input/output.
"""

from abc import ABC, abstractmethod

from gogar.orchestrator.command_interpreter import GOODBYE, CommandInterpreter


class GameInterface(ABC):
    """Abstract base class for game interfaces."""

    @abstractmethod
    async def run(self) -> None:
        """Run the game interface."""
        ...

    @abstractmethod
    async def send_message(self, message: str) -> None:
        """
        Send a message to the user.

        Args:
            message: Message to display.
        """
        ...

    @abstractmethod
    async def receive_input(self) -> str:
        """
        Receive input from the user.

        Returns:
            User's input string.
        """
        ...


class TextInterface(GameInterface):
    """
    Command-line text interface.

    Starts a new game with the seed agents and reads commands at a
    ``GOGAR>`` prompt until the user quits.
    """

    PROMPT = "GOGAR> "

    def __init__(self, interpreter: CommandInterpreter | None = None) -> None:
        """
        Initialize the text interface.

        Args:
            interpreter: Command interpreter to use (creates one over a new game if None).
        """
        self._interpreter = interpreter or CommandInterpreter()

    @property
    def interpreter(self) -> CommandInterpreter:
        return self._interpreter

    async def run(self) -> None:
        """Run the interactive session."""
        await self.send_message(self._interpreter.execute("new game"))

        output = None
        while output != GOODBYE:
            command = await self.receive_input()
            output = self._interpreter.execute(command)
            await self.send_message(output)

    async def send_message(self, message: str) -> None:
        """
        Display a message to the terminal.

        Args:
            message: Message to display.
        """
        print(message, end="")

    async def receive_input(self) -> str:
        """
        Get a command from the terminal.

        Returns:
            User's input string, or "quit" at end of input.
        """
        try:
            return input(self.PROMPT)
        except EOFError:
            return "quit"
