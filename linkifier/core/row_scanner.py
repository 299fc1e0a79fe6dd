"""Locate every occurrence of a matcher's pattern within one row of text."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Protocol

from linkifier.core.matchers import LinkMatcher

LOGGER = logging.getLogger(__name__)


class BufferAccessor(Protocol):
    """Read-only view of the text surface."""

    @property
    def display_offset(self) -> int: ...

    @property
    def row_count(self) -> int: ...

    def row_text(self, absolute_row: int) -> str: ...


@dataclass(frozen=True, slots=True)
class LinkOccurrence:
    matcher: LinkMatcher
    column: int
    text: str
    row: int


def find_links(text: str, matcher: LinkMatcher) -> Iterator[tuple[int, str]]:
    """Yield ``(column, link_text)`` for each non-overlapping match in ``text``.

    The pattern is searched against the remainder of the row each round, so
    anchors such as ``^`` see the remainder's start. The column is where the
    link text first appears in that remainder, which is not necessarily where
    the regex matched; a link text that also appears earlier in the remainder
    is reported at the earlier position.

    A capture group that did not take part in a match skips that match.
    Empty link text is never emitted; the scan moves forward one character
    instead so degenerate patterns still terminate.
    """
    offset = 0
    remainder = text
    while remainder:
        match = matcher.regex.search(remainder)
        if match is None:
            return

        group = 0 if matcher.match_index is None else matcher.match_index
        uri = match.group(group)
        if uri is None:
            LOGGER.debug("Matcher %d: group %d did not participate, skipping", matcher.id, group)
            advance = max(1, match.end())
        elif not uri:
            advance = 1
        else:
            index = remainder.find(uri)
            yield offset + index, uri
            advance = index + len(uri)

        offset += advance
        remainder = remainder[advance:]


class RowScanner:
    def __init__(self, buffer: BufferAccessor) -> None:
        self._buffer = buffer

    def row_text(self, row_index: int) -> str | None:
        """Text of a viewport row, or None when it lies past the end of the buffer."""
        absolute_row = int(self._buffer.display_offset) + int(row_index)
        if absolute_row >= int(self._buffer.row_count):
            LOGGER.debug("Row %d (absolute %d) is beyond the buffer, skipping", row_index, absolute_row)
            return None
        return self._buffer.row_text(absolute_row)

    def scan(self, row_index: int, text: str, matcher: LinkMatcher) -> Iterator[LinkOccurrence]:
        for column, uri in find_links(text, matcher):
            yield LinkOccurrence(matcher=matcher, column=column, text=uri, row=row_index)
