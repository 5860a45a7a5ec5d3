"""Prefix-tagged argument tokenizer."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from types import MappingProxyType

from presstrack.commands.syntax import Prefix

_LOGGER = logging.getLogger(__name__)


class ArgumentMap:
    """Read-only multimap of tokenized values grouped by prefix.

    Values for one prefix keep the left-to-right order they were found in.
    Single-value lookups return the last occurrence, so a repeated
    single-valued field takes the value supplied last.
    """

    __slots__ = ("_preamble", "_values")

    def __init__(self, preamble: str, tokens: Iterable[tuple[Prefix, str]]) -> None:
        """Group tokens by prefix.

        Args:
            preamble: Untagged text preceding the first recognized prefix.
            tokens: Ordered ``(prefix, value)`` pairs.
        """
        grouped: dict[Prefix, list[str]] = {}
        for prefix, value in tokens:
            grouped.setdefault(prefix, []).append(value)
        self._preamble = preamble.strip()
        self._values = MappingProxyType(
            {prefix: tuple(values) for prefix, values in grouped.items()}
        )

    def get_value(self, prefix: Prefix) -> str | None:
        """Return the last value tokenized for ``prefix``.

        Args:
            prefix: Prefix to look up.

        Returns:
            Last value for the prefix, or ``None`` when it never appeared.
        """
        values = self._values.get(prefix)
        if not values:
            return None
        return values[-1]

    def get_all_values(self, prefix: Prefix) -> tuple[str, ...]:
        """Return every value tokenized for ``prefix`` in input order."""
        return self._values.get(prefix, ())

    def get_preamble(self) -> str:
        """Return the trimmed text preceding the first recognized prefix."""
        return self._preamble

    def contains(self, prefix: Prefix) -> bool:
        return prefix in self._values

    def are_prefixes_present(self, *prefixes: Prefix) -> bool:
        """Return whether every prefix in ``prefixes`` has at least one value."""
        return all(prefix in self._values for prefix in prefixes)

    def prefixes(self) -> tuple[Prefix, ...]:
        """Return prefixes that were found, in first-seen order."""
        return tuple(self._values)

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._values

    def __iter__(self) -> Iterator[Prefix]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        values = {str(prefix): list(items) for prefix, items in self._values.items()}
        return f"ArgumentMap(preamble={self._preamble!r}, values={values!r})"


def _prefix_pattern(prefixes: Iterable[Prefix]) -> re.Pattern[str] | None:
    """Compile a pattern matching any prefix at a token boundary.

    Longer literals are tried first so a prefix that extends another one
    wins at the same position.
    """
    literals = sorted({prefix.value for prefix in prefixes}, key=len, reverse=True)
    if not literals:
        return None
    alternatives = "|".join(re.escape(literal) for literal in literals)
    return re.compile(rf"(?:^|(?<=\s))(?:{alternatives})")


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMap:
    """Split an argument string into a preamble and prefix-tagged values.

    Only ``prefixes`` act as delimiters, and only where they start the string
    or follow whitespace. The value of one occurrence runs up to the next
    recognized occurrence and is stripped of surrounding whitespace. No value
    content is validated here.

    Args:
        args: Raw argument string, usually the remainder after a command word.
        *prefixes: Prefixes to recognize.

    Returns:
        Argument map holding the preamble and grouped values.
    """
    by_literal = {prefix.value: prefix for prefix in prefixes}
    pattern = _prefix_pattern(prefixes)
    matches = list(pattern.finditer(args)) if pattern is not None else []
    if not matches:
        return ArgumentMap(args, ())

    tokens: list[tuple[Prefix, str]] = []
    for position, match in enumerate(matches):
        end = matches[position + 1].start() if position + 1 < len(matches) else len(args)
        tokens.append((by_literal[match.group(0)], args[match.end() : end].strip()))

    _LOGGER.debug(
        "Tokenized %d value(s) for %d prefix(es)", len(tokens), len(by_literal)
    )
    return ArgumentMap(args[: matches[0].start()], tokens)
