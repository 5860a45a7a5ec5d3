"""Article domain value objects."""

from __future__ import annotations

import re
from datetime import date, datetime
from enum import StrEnum
from typing import ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    field_validator,
)

_PERSON_NAME = re.compile(r"[A-Za-z0-9][A-Za-z0-9 .'\-]*")
_TAG_NAME = re.compile(r"[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*")
_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")
_HTTP_URL = TypeAdapter(HttpUrl)


class Title(BaseModel):
    """Article headline."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Headlines should not be blank."

    value: str = Field(min_length=1)

    @field_validator("value")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return value


class _PersonName(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should start with a letter or digit and only contain letters, "
        "digits, spaces, '.', \"'\" and '-'."
    )

    value: str

    @field_validator("value")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        if not _PERSON_NAME.fullmatch(value):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return value


class Author(_PersonName):
    """Contributor credited on an article."""


class Source(_PersonName):
    """Interviewee quoted in an article."""


class Tag(BaseModel):
    """Free-form article label."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Tags should be alphanumeric words, optionally joined by single hyphens."
    )

    value: str

    @field_validator("value")
    @classmethod
    def _validate_tag(cls, value: str) -> str:
        if not _TAG_NAME.fullmatch(value):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return value


class Outlet(BaseModel):
    """Publication outlet an article appears in."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Outlets should not be blank."

    value: str

    @field_validator("value")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return value


class PublicationDate(BaseModel):
    """Calendar date an article was (or will be) published."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Dates should be valid calendar dates in the format YYYY-MM-DD."
    )
    DATE_FORMAT: ClassVar[str] = "%Y-%m-%d"

    value: date

    @classmethod
    def from_text(cls, text: str) -> PublicationDate:
        """Build a publication date from strict ``YYYY-MM-DD`` text.

        Args:
            text: Raw date text.

        Returns:
            Validated publication date.

        Raises:
            ValueError: If text is not a valid calendar date in that format.
        """
        if not _ISO_DATE.fullmatch(text):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        try:
            parsed = datetime.strptime(text, cls.DATE_FORMAT).date()
        except ValueError as exc:
            raise ValueError(cls.MESSAGE_CONSTRAINTS) from exc
        return cls(value=parsed)

    def __str__(self) -> str:
        return self.value.strftime(self.DATE_FORMAT)


class ArticleStatus(StrEnum):
    """Editorial status of an article."""

    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"


STATUS_CONSTRAINTS = "Status should be one of: " + ", ".join(
    status.value for status in ArticleStatus
) + "."


class Link(BaseModel):
    """Web link to an article, or the explicit empty link."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Links should be absolute http or https URLs, e.g. https://example.com/story."
    )

    value: str = ""

    @field_validator("value")
    @classmethod
    def _validate_link(cls, value: str) -> str:
        if value == "":
            return value
        try:
            _HTTP_URL.validate_python(value)
        except ValidationError as exc:
            raise ValueError(cls.MESSAGE_CONSTRAINTS) from exc
        return value

    @classmethod
    def empty(cls) -> Link:
        """Return the empty-link value used when no link is supplied."""
        return cls(value="")

    @property
    def is_empty(self) -> bool:
        return self.value == ""


class Article(BaseModel):
    """One tracked article."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: Title
    authors: frozenset[Author] = frozenset()
    sources: frozenset[Source] = frozenset()
    tags: frozenset[Tag] = frozenset()
    outlets: frozenset[Outlet] = frozenset()
    publication_date: PublicationDate
    status: ArticleStatus
    link: Link = Field(default_factory=Link.empty)
