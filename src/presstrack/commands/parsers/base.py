"""Parser protocol shared by command parsers."""

from __future__ import annotations

from typing import Protocol, TypeVar

from presstrack.commands.types import Command

C_co = TypeVar("C_co", bound=Command, covariant=True)


class CommandParser(Protocol[C_co]):
    """Protocol implemented by per-command argument parsers."""

    def parse(self, args: str) -> C_co:
        """Parse the text following a command word.

        Args:
            args: Raw remainder after the command word.

        Raises:
            CommandParseError: If the arguments are malformed.
        """
        ...
