"""Parser for `add`."""

from __future__ import annotations

import logging

from presstrack.commands.errors import CommandParseError
from presstrack.commands.field_parsers import (
    parse_authors,
    parse_link,
    parse_outlets,
    parse_publication_date,
    parse_sources,
    parse_status,
    parse_tags,
    parse_title,
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
)
from presstrack.commands.tokenizer import tokenize
from presstrack.commands.types import AddArticleCommand
from presstrack.model import Article, Link

_LOGGER = logging.getLogger(__name__)

MANDATORY_PREFIXES = (PREFIX_HEADLINE, PREFIX_DATE, PREFIX_STATUS)


class AddArticleCommandParser:
    """Deterministic `add` argument parser."""

    def parse(self, args: str) -> AddArticleCommand:
        """Parse `add` arguments into an execution-ready command.

        Args:
            args: Raw remainder after the `add` command word.

        Returns:
            Fully constructed add command.

        Raises:
            CommandParseError: ``invalid_command_format`` if a mandatory
                prefix is missing or the preamble is not empty;
                ``invalid_field`` for the first field that fails conversion.
        """
        arg_map = tokenize(args, *ARTICLE_PREFIXES)
        if not arg_map.are_prefixes_present(*MANDATORY_PREFIXES) or arg_map.get_preamble():
            _LOGGER.debug("Rejected add arguments: %r", arg_map)
            raise CommandParseError.invalid_format(AddArticleCommand.MESSAGE_USAGE)

        title = parse_title(arg_map.get_value(PREFIX_HEADLINE) or "").unwrap()
        authors = parse_authors(arg_map.get_all_values(PREFIX_CONTRIBUTOR)).unwrap()
        sources = parse_sources(arg_map.get_all_values(PREFIX_INTERVIEWEE)).unwrap()
        tags = parse_tags(arg_map.get_all_values(PREFIX_TAG)).unwrap()
        outlets = parse_outlets(arg_map.get_all_values(PREFIX_OUTLET)).unwrap()
        publication_date = parse_publication_date(
            arg_map.get_value(PREFIX_DATE) or ""
        ).unwrap()
        status = parse_status(arg_map.get_value(PREFIX_STATUS) or "").unwrap()
        raw_link = arg_map.get_value(PREFIX_LINK)
        link = Link.empty() if raw_link is None else parse_link(raw_link).unwrap()

        article = Article(
            title=title,
            authors=authors,
            sources=sources,
            tags=tags,
            outlets=outlets,
            publication_date=publication_date,
            status=status,
            link=link,
        )
        return AddArticleCommand(article=article)
