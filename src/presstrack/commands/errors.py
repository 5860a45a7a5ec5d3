"""Deterministic parse error contracts and user-facing messages."""

from __future__ import annotations

from enum import StrEnum

from presstrack.commands.types import CommandResult

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format!\n{usage}"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."


class ParseErrorCode(StrEnum):
    """Stable parse failure codes."""

    INVALID_COMMAND_FORMAT = "invalid_command_format"
    INVALID_FIELD = "invalid_field"
    UNKNOWN_COMMAND = "unknown_command"


class CommandParseError(ValueError):
    """Raised when one command line cannot be turned into a command object."""

    def __init__(
        self,
        code: ParseErrorCode,
        message: str,
        *,
        field: str | None = None,
        data: dict[str, object] | None = None,
    ) -> None:
        """Create parse failure.

        Args:
            code: Stable parse error code.
            message: Human-readable error message.
            field: Field name for field format failures.
            data: Optional structured payload for diagnostics.
        """
        super().__init__(message)
        self.code = code
        self.message = message
        self.field = field
        self.data = data or {}

    @classmethod
    def invalid_format(cls, usage: str) -> CommandParseError:
        """Build the structural error that reproduces a command's usage."""
        return cls(
            ParseErrorCode.INVALID_COMMAND_FORMAT,
            MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage),
        )

    def to_result(self) -> CommandResult:
        """Convert failure into an error envelope for rendering."""
        data = dict(self.data)
        if self.field is not None:
            data["field"] = self.field
        return CommandResult.error(self.message, code=self.code.value, data=data or None)
