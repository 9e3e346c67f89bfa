"""Errors raised by the scorekeeping engine."""


class GogarError(Exception):
    """Base class for scorekeeping errors."""


class DuplicateNameError(GogarError):
    """Raised when adding an agent whose name is already taken (case-insensitively)."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"An agent named {name} already exists")


class AgentNotFoundError(GogarError):
    """Raised when an agent name does not match anyone in the game."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"There is no agent named {name}")
