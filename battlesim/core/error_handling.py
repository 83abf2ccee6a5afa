"""
Error taxonomy for the battle simulator.

All errors raised while preparing a battle derive from BattleError, so the
command line driver can report them uniformly.
"""

from typing import Any, Optional


class BattleError(Exception):
    """Base class for every error raised by the simulator."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize the error.

        Args:
            message (str): Human readable description, printed to the user.
            context (dict[str, Any] | None): Extra details for logging.

        """
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}

    def __str__(self) -> str:
        return self.message


class RosterOpenError(BattleError):
    """The roster file could not be opened."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Error opening file: {path}", {"path": path})
        self.path = path


class RosterFormatError(BattleError):
    """A roster line does not contain a class, a name, and two integers."""

    def __init__(self, line: str) -> None:
        super().__init__(f"Invalid line format: {line}", {"line": line})
        self.line = line


class UnknownClassError(BattleError):
    """A roster line names a combatant class the simulator does not know."""

    def __init__(self, class_name: str) -> None:
        super().__init__(
            f"Unknown character type: {class_name}", {"class_name": class_name}
        )
        self.class_name = class_name
