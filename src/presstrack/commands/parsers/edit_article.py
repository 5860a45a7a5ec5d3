"""Parser for `edit`."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from presstrack.commands.errors import CommandParseError, ParseErrorCode
from presstrack.commands.field_parsers import (
    Conversion,
    convert_field,
    parse_authors,
    parse_index,
    parse_outlets,
    parse_sources,
    parse_tags,
)
from presstrack.commands.syntax import (
    ARTICLE_PREFIXES,
    PREFIX_CONTRIBUTOR,
    PREFIX_DATE,
    PREFIX_HEADLINE,
    PREFIX_INTERVIEWEE,
    PREFIX_LINK,
    PREFIX_OUTLET,
    PREFIX_STATUS,
    PREFIX_TAG,
    Prefix,
)
from presstrack.commands.tokenizer import ArgumentMap, tokenize
from presstrack.commands.types import EditArticleCommand, EditArticleDescriptor

T = TypeVar("T")

# Descriptor field, prefix, and set converter for repeatable fields.
_EDIT_FIELDS: tuple[tuple[str, Prefix, Callable[..., Conversion[Any]] | None], ...] = (
    ("title", PREFIX_HEADLINE, None),
    ("authors", PREFIX_CONTRIBUTOR, parse_authors),
    ("sources", PREFIX_INTERVIEWEE, parse_sources),
    ("tags", PREFIX_TAG, parse_tags),
    ("outlets", PREFIX_OUTLET, parse_outlets),
    ("publication_date", PREFIX_DATE, None),
    ("status", PREFIX_STATUS, None),
    ("link", PREFIX_LINK, None),
)


def _parse_set_for_edit(
    arg_map: ArgumentMap,
    prefix: Prefix,
    converter: Callable[..., Conversion[frozenset[T]]],
) -> frozenset[T] | None:
    """Parse a repeatable field for editing.

    Returns ``None`` when the prefix is absent, and an empty set when the
    prefix was given exactly once with no value, which clears the field.
    """
    values = arg_map.get_all_values(prefix)
    if not values:
        return None
    if values == ("",):
        return frozenset()
    return converter(values).unwrap()


class EditArticleCommandParser:
    """Deterministic `edit` argument parser."""

    def parse(self, args: str) -> EditArticleCommand:
        """Parse `edit` arguments into an execution-ready command.

        Args:
            args: Raw remainder after the `edit` command word.

        Returns:
            Edit command with only the supplied fields set.

        Raises:
            CommandParseError: ``invalid_command_format`` if the preamble is
                not a valid index or no field is supplied; ``invalid_field``
                for the first field that fails conversion.
        """
        arg_map = tokenize(args, *ARTICLE_PREFIXES)
        index = parse_index(arg_map.get_preamble())
        if not index.ok:
            raise CommandParseError.invalid_format(EditArticleCommand.MESSAGE_USAGE)

        fields: dict[str, object] = {}
        for name, prefix, set_converter in _EDIT_FIELDS:
            if set_converter is not None:
                converted = _parse_set_for_edit(arg_map, prefix, set_converter)
                if converted is not None:
                    fields[name] = converted
                continue
            raw = arg_map.get_value(prefix)
            if raw is not None:
                fields[name] = convert_field(prefix, raw).unwrap()

        descriptor = EditArticleDescriptor(**fields)
        if not descriptor.is_any_field_edited():
            raise CommandParseError(
                ParseErrorCode.INVALID_COMMAND_FORMAT,
                EditArticleCommand.MESSAGE_NOT_EDITED,
            )
        return EditArticleCommand(index=index.unwrap(), descriptor=descriptor)
