"""Parser for `delete`."""

from __future__ import annotations

from presstrack.commands.errors import CommandParseError
from presstrack.commands.field_parsers import parse_index
from presstrack.commands.types import DeleteArticleCommand


class DeleteArticleCommandParser:
    """Deterministic `delete` argument parser."""

    def parse(self, args: str) -> DeleteArticleCommand:
        """Parse a one-based article index.

        Raises:
            CommandParseError: ``invalid_command_format`` if the argument is
                not a positive integer.
        """
        index = parse_index(args)
        if not index.ok:
            raise CommandParseError.invalid_format(DeleteArticleCommand.MESSAGE_USAGE)
        return DeleteArticleCommand(index=index.unwrap())
