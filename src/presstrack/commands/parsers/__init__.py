"""Per-command argument parsers."""

from presstrack.commands.parsers.add_article import AddArticleCommandParser
from presstrack.commands.parsers.base import CommandParser
from presstrack.commands.parsers.delete_article import DeleteArticleCommandParser
from presstrack.commands.parsers.edit_article import EditArticleCommandParser
from presstrack.commands.parsers.find_article import FindArticleCommandParser
from presstrack.commands.parsers.no_args import NoArgumentCommandParser

__all__ = [
    "AddArticleCommandParser",
    "CommandParser",
    "DeleteArticleCommandParser",
    "EditArticleCommandParser",
    "FindArticleCommandParser",
    "NoArgumentCommandParser",
]
