"""Command-line syntax shared by every command parser."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Prefix:
    """Literal tag marking the start of one field value, e.g. ``tag/``."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or any(char.isspace() for char in self.value):
            raise ValueError(f"Invalid prefix literal: {self.value!r}")

    def __str__(self) -> str:
        return self.value


PREFIX_HEADLINE = Prefix("headline/")
PREFIX_CONTRIBUTOR = Prefix("contributor/")
PREFIX_INTERVIEWEE = Prefix("interviewee/")
PREFIX_TAG = Prefix("tag/")
PREFIX_OUTLET = Prefix("outlet/")
PREFIX_DATE = Prefix("date/")
PREFIX_STATUS = Prefix("status/")
PREFIX_LINK = Prefix("link/")

ARTICLE_PREFIXES: tuple[Prefix, ...] = (
    PREFIX_HEADLINE,
    PREFIX_CONTRIBUTOR,
    PREFIX_INTERVIEWEE,
    PREFIX_TAG,
    PREFIX_OUTLET,
    PREFIX_DATE,
    PREFIX_STATUS,
    PREFIX_LINK,
)
