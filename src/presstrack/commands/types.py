"""Shared command-domain types."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from presstrack.model import (
    Article,
    ArticleStatus,
    Author,
    Link,
    Outlet,
    PublicationDate,
    Source,
    Tag,
    Title,
)


class CommandStatus(StrEnum):
    """Normalized command status."""

    OK = "ok"
    ERROR = "error"


class CommandResult(BaseModel):
    """Deterministic result envelope handed to renderers."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: CommandStatus
    code: str
    message: str
    data: dict[str, Any] | None = None

    @classmethod
    def ok(
        cls,
        message: str,
        *,
        code: str = "ok",
        data: dict[str, Any] | None = None,
    ) -> CommandResult:
        """Construct a successful result.

        Args:
            message: User-facing output payload.
            code: Stable machine-readable success code.
            data: Optional structured payload for downstream consumers.

        Returns:
            Successful result.
        """
        return cls(status=CommandStatus.OK, code=code, message=message, data=data)

    @classmethod
    def error(
        cls,
        message: str,
        *,
        code: str = "error",
        data: dict[str, Any] | None = None,
    ) -> CommandResult:
        """Construct an error result.

        Args:
            message: User-facing error payload.
            code: Stable machine-readable error code.
            data: Optional structured payload for downstream consumers.

        Returns:
            Error result.
        """
        return cls(status=CommandStatus.ERROR, code=code, message=message, data=data)


class Command(BaseModel):
    """Base for fully parsed, execution-ready commands."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    COMMAND_WORD: ClassVar[str] = ""
    MESSAGE_USAGE: ClassVar[str] = ""

    def to_result(self) -> CommandResult:
        """Describe the parsed command as a success envelope."""
        return CommandResult.ok(
            f"Parsed `{self.COMMAND_WORD}` command.",
            code=f"{self.COMMAND_WORD}_parsed",
            data=self.model_dump(mode="json"),
        )


class AddArticleCommand(Command):
    """Add one article to the article book."""

    COMMAND_WORD: ClassVar[str] = "add"
    MESSAGE_USAGE: ClassVar[str] = (
        "add: Adds an article to the article book.\n"
        "Parameters: headline/TITLE [contributor/AUTHOR]... "
        "[interviewee/SOURCE]... [tag/TAG]... [outlet/OUTLET]... "
        "date/YYYY-MM-DD status/DRAFT|PUBLISHED|ARCHIVED [link/URL]\n"
        'Example: add headline/"City Hall Vote" contributor/Alex Tan '
        "tag/politics outlet/Daily Planet date/2024-03-01 status/DRAFT "
        "link/https://example.com/city-hall"
    )

    article: Article


class EditArticleDescriptor(BaseModel):
    """Fields to replace on an existing article; ``None`` means unchanged."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: Title | None = None
    authors: frozenset[Author] | None = None
    sources: frozenset[Source] | None = None
    tags: frozenset[Tag] | None = None
    outlets: frozenset[Outlet] | None = None
    publication_date: PublicationDate | None = None
    status: ArticleStatus | None = None
    link: Link | None = None

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, name) is not None for name in type(self).model_fields)


class EditArticleCommand(Command):
    """Edit the article at a one-based index of the displayed list."""

    COMMAND_WORD: ClassVar[str] = "edit"
    MESSAGE_USAGE: ClassVar[str] = (
        "edit: Edits the article identified by the index number used in the "
        "displayed article list. Existing values will be overwritten.\n"
        "Parameters: INDEX (must be a positive integer) [headline/TITLE] "
        "[contributor/AUTHOR]... [interviewee/SOURCE]... [tag/TAG]... "
        "[outlet/OUTLET]... [date/YYYY-MM-DD] [status/STATUS] [link/URL]\n"
        "Example: edit 1 status/PUBLISHED link/https://example.com/story"
    )
    MESSAGE_NOT_EDITED: ClassVar[str] = "At least one field to edit must be provided."

    index: int = Field(ge=1)
    descriptor: EditArticleDescriptor


class DeleteArticleCommand(Command):
    """Delete the article at a one-based index of the displayed list."""

    COMMAND_WORD: ClassVar[str] = "delete"
    MESSAGE_USAGE: ClassVar[str] = (
        "delete: Deletes the article identified by the index number used in "
        "the displayed article list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete 1"
    )

    index: int = Field(ge=1)


class FindArticleCommand(Command):
    """Find articles whose headline contains any keyword."""

    COMMAND_WORD: ClassVar[str] = "find"
    MESSAGE_USAGE: ClassVar[str] = (
        "find: Finds all articles whose headlines contain any of the specified "
        "keywords (case-insensitive).\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find election budget"
    )

    keywords: tuple[str, ...] = Field(min_length=1)


class ListArticleCommand(Command):
    """List every article."""

    COMMAND_WORD: ClassVar[str] = "list"
    MESSAGE_USAGE: ClassVar[str] = "list: Lists all articles."


class ClearArticleCommand(Command):
    """Remove every article."""

    COMMAND_WORD: ClassVar[str] = "clear"
    MESSAGE_USAGE: ClassVar[str] = "clear: Clears all articles."


class HelpCommand(Command):
    """Show usage help."""

    COMMAND_WORD: ClassVar[str] = "help"
    MESSAGE_USAGE: ClassVar[str] = "help: Shows program usage instructions."


class ExitCommand(Command):
    """Leave the interactive shell."""

    COMMAND_WORD: ClassVar[str] = "exit"
    MESSAGE_USAGE: ClassVar[str] = "exit: Exits the program."
