"""Command-line interpretation: tokenizing, field conversion and parsing."""

from presstrack.commands.errors import CommandParseError, ParseErrorCode
from presstrack.commands.registry import ArticleCommandDispatcher
from presstrack.commands.tokenizer import ArgumentMap, tokenize
from presstrack.commands.types import Command, CommandResult, CommandStatus

__all__ = [
    "ArgumentMap",
    "ArticleCommandDispatcher",
    "Command",
    "CommandParseError",
    "CommandResult",
    "CommandStatus",
    "ParseErrorCode",
    "tokenize",
]
