"""Field converters from raw argument text to validated domain values.

Every converter is a pure function returning a :class:`Conversion`: either
the validated value or a :class:`FieldError` naming the field and its
expected format. Multi-valued converters stop at the first bad element.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from presstrack.commands.errors import CommandParseError, ParseErrorCode
from presstrack.commands.syntax import (
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
from presstrack.model import (
    STATUS_CONSTRAINTS,
    ArticleStatus,
    Author,
    Link,
    Outlet,
    PublicationDate,
    Source,
    Tag,
    Title,
)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

INDEX_CONSTRAINTS = "Index should be a non-zero unsigned integer."


@dataclass(frozen=True, slots=True)
class FieldError:
    """Why one raw field value was rejected."""

    field: str
    raw: str
    constraints: str

    @property
    def message(self) -> str:
        return f"Invalid {self.field} '{self.raw}'. {self.constraints}"

    def to_parse_error(self) -> CommandParseError:
        return CommandParseError(
            ParseErrorCode.INVALID_FIELD,
            self.message,
            field=self.field,
            data={"value": self.raw},
        )


@dataclass(frozen=True, slots=True)
class Conversion(Generic[T]):
    """Success-or-failure outcome of one field conversion."""

    value: T | None = None
    error: FieldError | None = None

    @classmethod
    def success(cls, value: T) -> Conversion[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, field: str, raw: str, constraints: str) -> Conversion[T]:
        return cls(error=FieldError(field=field, raw=raw, constraints=constraints))

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the converted value.

        Raises:
            CommandParseError: With code ``invalid_field`` if conversion failed.
        """
        if self.error is not None:
            raise self.error.to_parse_error()
        return self.value  # type: ignore[return-value]


def _build(model: type[M], field: str, raw: str, value: str) -> Conversion[M]:
    try:
        return Conversion.success(model(value=value))
    except ValidationError:
        return Conversion.failure(field, raw, model.MESSAGE_CONSTRAINTS)


def _collect(
    converter: Callable[[str], Conversion[T]], values: Iterable[str]
) -> Conversion[frozenset[T]]:
    converted: set[T] = set()
    for raw in values:
        result = converter(raw)
        if result.error is not None:
            return Conversion(error=result.error)
        converted.add(result.unwrap())
    return Conversion.success(frozenset(converted))


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] == '"':
        return text[1:-1].strip()
    return text


def parse_index(raw: str) -> Conversion[int]:
    """Convert one-based index text into a positive integer."""
    trimmed = raw.strip()
    if not (trimmed.isascii() and trimmed.isdigit()):
        return Conversion.failure("index", raw, INDEX_CONSTRAINTS)
    try:
        index = int(trimmed)
    except ValueError:
        return Conversion.failure("index", raw, INDEX_CONSTRAINTS)
    if index == 0:
        return Conversion.failure("index", raw, INDEX_CONSTRAINTS)
    return Conversion.success(index)


def parse_title(raw: str) -> Conversion[Title]:
    """Convert headline text, dropping one pair of surrounding double quotes."""
    return _build(Title, "headline", raw, _unquote(raw.strip()))


def parse_author(raw: str) -> Conversion[Author]:
    return _build(Author, "contributor", raw, raw.strip())


def parse_authors(values: Iterable[str]) -> Conversion[frozenset[Author]]:
    return _collect(parse_author, values)


def parse_source(raw: str) -> Conversion[Source]:
    return _build(Source, "interviewee", raw, raw.strip())


def parse_sources(values: Iterable[str]) -> Conversion[frozenset[Source]]:
    return _collect(parse_source, values)


def parse_tag(raw: str) -> Conversion[Tag]:
    return _build(Tag, "tag", raw, raw.strip())


def parse_tags(values: Iterable[str]) -> Conversion[frozenset[Tag]]:
    return _collect(parse_tag, values)


def parse_outlet(raw: str) -> Conversion[Outlet]:
    return _build(Outlet, "outlet", raw, raw.strip())


def parse_outlets(values: Iterable[str]) -> Conversion[frozenset[Outlet]]:
    return _collect(parse_outlet, values)


def parse_publication_date(raw: str) -> Conversion[PublicationDate]:
    """Convert strict ``YYYY-MM-DD`` text into a publication date."""
    try:
        return Conversion.success(PublicationDate.from_text(raw.strip()))
    except ValueError:
        return Conversion.failure("date", raw, PublicationDate.MESSAGE_CONSTRAINTS)


def parse_status(raw: str) -> Conversion[ArticleStatus]:
    """Convert an exact status literal such as ``DRAFT``."""
    try:
        return Conversion.success(ArticleStatus(raw.strip()))
    except ValueError:
        return Conversion.failure("status", raw, STATUS_CONSTRAINTS)


def parse_link(raw: str) -> Conversion[Link]:
    """Convert link text; blank text yields the empty link."""
    return _build(Link, "link", raw, raw.strip())


FIELD_CONVERTERS: dict[Prefix, Callable[[str], Conversion[Any]]] = {
    PREFIX_HEADLINE: parse_title,
    PREFIX_CONTRIBUTOR: parse_author,
    PREFIX_INTERVIEWEE: parse_source,
    PREFIX_TAG: parse_tag,
    PREFIX_OUTLET: parse_outlet,
    PREFIX_DATE: parse_publication_date,
    PREFIX_STATUS: parse_status,
    PREFIX_LINK: parse_link,
}


def convert_field(prefix: Prefix, raw: str) -> Conversion[Any]:
    """Convert one raw value with the converter registered for ``prefix``.

    Raises:
        KeyError: If no converter is registered for the prefix.
    """
    return FIELD_CONVERTERS[prefix](raw)
