"""Parser for commands that take no arguments."""

from __future__ import annotations

from typing import Generic, TypeVar

from presstrack.commands.types import Command

C = TypeVar("C", bound=Command)


class NoArgumentCommandParser(Generic[C]):
    """Build a fixed command and ignore any trailing text."""

    def __init__(self, command_type: type[C]) -> None:
        self._command_type = command_type

    def parse(self, args: str) -> C:
        """Return a new instance of the fixed command type."""
        return self._command_type()
