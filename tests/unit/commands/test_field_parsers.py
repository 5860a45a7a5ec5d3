"""Unit tests for field converters."""

from __future__ import annotations

from datetime import date

import pytest

from presstrack.commands.errors import CommandParseError, ParseErrorCode
from presstrack.commands.field_parsers import (
    FIELD_CONVERTERS,
    convert_field,
    parse_authors,
    parse_index,
    parse_link,
    parse_outlets,
    parse_publication_date,
    parse_sources,
    parse_status,
    parse_tags,
    parse_title,
)
from presstrack.commands.syntax import ARTICLE_PREFIXES, PREFIX_STATUS
from presstrack.model import ArticleStatus, Author, Link, Tag, Title


@pytest.mark.unit
def test_parse_title_strips_whitespace_and_quotes() -> None:
    """Surrounding quotes are dropped from headlines."""
    assert parse_title('  "City Hall Vote"  ').unwrap() == Title(value="City Hall Vote")
    assert parse_title("Plain headline").unwrap() == Title(value="Plain headline")


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["", "   ", '""', '"  "'])
def test_parse_title_rejects_blank(raw: str) -> None:
    """Blank headlines fail with the headline field named."""
    result = parse_title(raw)

    assert not result.ok
    assert result.error is not None
    assert result.error.field == "headline"


@pytest.mark.unit
def test_parse_authors_deduplicates() -> None:
    """Author sets remove duplicate values."""
    authors = parse_authors(["Alex Tan", "Bo Li", "Alex Tan"]).unwrap()

    assert authors == frozenset({Author(value="Alex Tan"), Author(value="Bo Li")})


@pytest.mark.unit
def test_parse_authors_empty_input_is_empty_set() -> None:
    """No contributor values produce an empty set."""
    assert parse_authors([]).unwrap() == frozenset()


@pytest.mark.unit
def test_parse_sources_stops_at_first_bad_value() -> None:
    """The first invalid element names the interviewee field."""
    result = parse_sources(["Mayor Reyes", "@@@", ""])

    assert result.error is not None
    assert result.error.field == "interviewee"
    assert result.error.raw == "@@@"


@pytest.mark.unit
def test_parse_tags_accepts_hyphenated_words() -> None:
    """Tags allow single hyphens between alphanumeric words."""
    tags = parse_tags(["local-news", "politics"]).unwrap()

    assert Tag(value="local-news") in tags
    assert len(tags) == 2


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["two words", "-lead", "trail-", "a--b", ""])
def test_parse_tags_rejects_malformed(raw: str) -> None:
    """Malformed tags are field errors."""
    result = parse_tags([raw])

    assert result.error is not None
    assert result.error.field == "tag"


@pytest.mark.unit
def test_parse_outlets_rejects_blank() -> None:
    """Blank outlets are rejected."""
    assert parse_outlets(["Daily Planet"]).ok
    assert not parse_outlets(["Daily Planet", " "]).ok


@pytest.mark.unit
def test_parse_publication_date_accepts_iso_date() -> None:
    """Strict ISO calendar dates convert to dates."""
    parsed = parse_publication_date(" 2024-03-01 ").unwrap()

    assert parsed.value == date(2024, 3, 1)
    assert str(parsed) == "2024-03-01"


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["2024-3-1", "2024-02-30", "01-03-2024", "tomorrow", ""])
def test_parse_publication_date_rejects_bad_dates(raw: str) -> None:
    """Non-matching formats and impossible dates fail on the date field."""
    result = parse_publication_date(raw)

    assert result.error is not None
    assert result.error.field == "date"
    assert "YYYY-MM-DD" in result.error.message


@pytest.mark.unit
def test_parse_status_accepts_exact_literals() -> None:
    """Each status literal converts to its enum member."""
    for status in ArticleStatus:
        assert parse_status(status.value).unwrap() is status


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["draft", "UNKNOWNVALUE", ""])
def test_parse_status_rejects_other_text(raw: str) -> None:
    """Unknown or differently cased statuses fail on the status field."""
    result = parse_status(raw)

    assert result.error is not None
    assert result.error.field == "status"
    assert "DRAFT" in result.error.message


@pytest.mark.unit
def test_parse_link_accepts_http_urls_and_blank() -> None:
    """HTTP(S) URLs are kept verbatim and blank text is the empty link."""
    assert parse_link("https://example.com/story").unwrap() == Link(
        value="https://example.com/story"
    )
    assert parse_link("  ").unwrap().is_empty


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["example.com", "ftp://example.com", "not a url"])
def test_parse_link_rejects_non_http(raw: str) -> None:
    """Links must be absolute http or https URLs."""
    result = parse_link(raw)

    assert result.error is not None
    assert result.error.field == "link"


@pytest.mark.unit
@pytest.mark.parametrize(("raw", "expected"), [("1", 1), (" 42 ", 42)])
def test_parse_index_accepts_positive_integers(raw: str, expected: int) -> None:
    """One-based indexes convert to integers."""
    assert parse_index(raw).unwrap() == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw", ["0", "-1", "+1", "1.5", "one", "", "²", "1²", "٣", "9" * 5000]
)
def test_parse_index_rejects_other_text(raw: str) -> None:
    """Zero, signs, non-ASCII digits and oversized numbers are rejected."""
    assert not parse_index(raw).ok


@pytest.mark.unit
def test_unwrap_failure_raises_invalid_field_error() -> None:
    """Unwrapping a failed conversion raises a field-named parse error."""
    with pytest.raises(CommandParseError) as excinfo:
        parse_status("LIVE").unwrap()

    assert excinfo.value.code == ParseErrorCode.INVALID_FIELD
    assert excinfo.value.field == "status"
    assert excinfo.value.data == {"value": "LIVE"}


@pytest.mark.unit
def test_every_article_prefix_has_a_converter() -> None:
    """The converter table covers the full article prefix set."""
    assert set(FIELD_CONVERTERS) == set(ARTICLE_PREFIXES)
    assert convert_field(PREFIX_STATUS, "PUBLISHED").unwrap() is ArticleStatus.PUBLISHED
