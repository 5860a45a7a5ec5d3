"""Parser for `find`."""

from __future__ import annotations

from presstrack.commands.errors import CommandParseError
from presstrack.commands.types import FindArticleCommand


class FindArticleCommandParser:
    """Deterministic `find` argument parser."""

    def parse(self, args: str) -> FindArticleCommand:
        """Split arguments into whitespace-separated headline keywords."""
        keywords = tuple(args.split())
        if not keywords:
            raise CommandParseError.invalid_format(FindArticleCommand.MESSAGE_USAGE)
        return FindArticleCommand(keywords=keywords)
