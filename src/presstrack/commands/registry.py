"""Command word registry and dispatch."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from presstrack.commands.errors import (
    MESSAGE_UNKNOWN_COMMAND,
    CommandParseError,
    ParseErrorCode,
)
from presstrack.commands.parsers import (
    AddArticleCommandParser,
    CommandParser,
    DeleteArticleCommandParser,
    EditArticleCommandParser,
    FindArticleCommandParser,
    NoArgumentCommandParser,
)
from presstrack.commands.types import (
    AddArticleCommand,
    ClearArticleCommand,
    Command,
    CommandResult,
    DeleteArticleCommand,
    EditArticleCommand,
    ExitCommand,
    FindArticleCommand,
    HelpCommand,
    ListArticleCommand,
)

_LOGGER = logging.getLogger(__name__)
_COMMAND_LINE = re.compile(r"(?P<word>\S+)(?P<arguments>.*)", re.DOTALL)


class ArticleCommandDispatcher:
    """Route a command line to the parser registered for its command word."""

    def __init__(
        self,
        *,
        aliases: Mapping[str, str] | None = None,
        parsers: Mapping[str, CommandParser[Command]] | None = None,
    ) -> None:
        """Construct dispatcher with built-in parsers plus optional overrides.

        Args:
            aliases: Optional alternative words keyed to registered command words.
            parsers: Optional custom parsers keyed by command word.

        Raises:
            ValueError: If an alias targets an unregistered command word.
        """
        self._parsers: dict[str, CommandParser[Command]] = {
            AddArticleCommand.COMMAND_WORD: AddArticleCommandParser(),
            EditArticleCommand.COMMAND_WORD: EditArticleCommandParser(),
            DeleteArticleCommand.COMMAND_WORD: DeleteArticleCommandParser(),
            FindArticleCommand.COMMAND_WORD: FindArticleCommandParser(),
            ListArticleCommand.COMMAND_WORD: NoArgumentCommandParser(ListArticleCommand),
            ClearArticleCommand.COMMAND_WORD: NoArgumentCommandParser(ClearArticleCommand),
            HelpCommand.COMMAND_WORD: NoArgumentCommandParser(HelpCommand),
            ExitCommand.COMMAND_WORD: NoArgumentCommandParser(ExitCommand),
        }
        if parsers:
            self._parsers.update(parsers)
        self._aliases = dict(aliases or {})
        for alias, target in self._aliases.items():
            if target not in self._parsers:
                raise ValueError(
                    f"Alias '{alias}' targets unknown command word '{target}'."
                )

    @property
    def command_words(self) -> tuple[str, ...]:
        return tuple(self._parsers)

    def parse_command(self, line: str) -> Command:
        """Parse one full command line.

        Args:
            line: Raw user input, command word first.

        Returns:
            Parsed command object.

        Raises:
            CommandParseError: ``invalid_command_format`` for blank input,
                ``unknown_command`` for an unregistered word, or whatever the
                selected parser raises.
        """
        match = _COMMAND_LINE.fullmatch(line.strip())
        if match is None:
            raise CommandParseError.invalid_format(HelpCommand.MESSAGE_USAGE)

        word = match.group("word")
        word = self._aliases.get(word, word)
        parser = self._parsers.get(word)
        if parser is None:
            _LOGGER.debug("Unknown command word %r", word)
            raise CommandParseError(
                ParseErrorCode.UNKNOWN_COMMAND,
                MESSAGE_UNKNOWN_COMMAND,
                data={"command": word},
            )
        _LOGGER.debug("Dispatching %r to %s", word, type(parser).__name__)
        return parser.parse(match.group("arguments"))

    def interpret(self, line: str) -> CommandResult:
        """Parse one command line into a renderable result envelope.

        Args:
            line: Raw user input, command word first.

        Returns:
            Success envelope describing the command, or the parse error envelope.
        """
        try:
            command = self.parse_command(line)
        except CommandParseError as exc:
            _LOGGER.debug("Parse failed with %s: %s", exc.code, exc.message)
            return exc.to_result()
        return command.to_result()
