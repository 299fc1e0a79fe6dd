"""Link matcher records and the priority-ordered registry that holds them."""

from __future__ import annotations

import bisect
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Mapping, Optional

LOGGER = logging.getLogger(__name__)

# ID of the built-in http(s) matcher. It is registered first and can never be removed.
HYPERTEXT_LINK_MATCHER_ID = 0

LinkMatcherHandler = Callable[[Any, str], Any]
LinkMatcherValidationCallback = Callable[[str, Callable[[bool], None]], Any]
LinkHoverStartCallback = Callable[[Any, str], Any]
LinkHoverEndCallback = Callable[[], Any]


class LinkMatcherError(ValueError):
    """Raised when a link matcher cannot be registered as requested."""


@dataclass(slots=True)
class LinkMatcherOptions:
    match_index: Optional[int] = None
    validation_callback: Optional[LinkMatcherValidationCallback] = None
    hover_start_callback: Optional[LinkHoverStartCallback] = None
    hover_end_callback: Optional[LinkHoverEndCallback] = None
    priority: int = 0


_OPTION_ALIASES = {
    "matchIndex": "match_index",
    "validationCallback": "validation_callback",
    "hoverStartCallback": "hover_start_callback",
    "hoverEndCallback": "hover_end_callback",
}


def coerce_options(options: LinkMatcherOptions | Mapping[str, Any] | None) -> LinkMatcherOptions:
    """Accept an options object, a mapping (snake_case or camelCase keys), or None."""
    if options is None:
        return LinkMatcherOptions()
    if isinstance(options, LinkMatcherOptions):
        return options
    if not isinstance(options, Mapping):
        raise LinkMatcherError(f"Unsupported link matcher options: {type(options).__name__}")

    kwargs: dict[str, Any] = {}
    for key, value in options.items():
        name = _OPTION_ALIASES.get(str(key), str(key))
        if name not in LinkMatcherOptions.__dataclass_fields__:
            raise LinkMatcherError(f"Unknown link matcher option: {key!r}")
        kwargs[name] = value

    # A falsy priority (None, 0) falls back to the default tier.
    kwargs["priority"] = int(kwargs.get("priority") or 0)
    match_index = kwargs.get("match_index")
    if match_index is not None and (isinstance(match_index, bool) or not isinstance(match_index, int)):
        raise LinkMatcherError(f"match_index must be an int, got {match_index!r}")
    return LinkMatcherOptions(**kwargs)


def compile_pattern(regex: re.Pattern | str) -> re.Pattern:
    if isinstance(regex, re.Pattern):
        return regex
    if isinstance(regex, str):
        try:
            return re.compile(regex)
        except re.error as exc:
            raise LinkMatcherError(f"Invalid link pattern {regex!r}: {exc}") from exc
    raise LinkMatcherError(f"Link pattern must be a str or compiled regex, got {type(regex).__name__}")


@dataclass(slots=True)
class LinkMatcher:
    id: int
    regex: re.Pattern
    handler: Optional[LinkMatcherHandler] = None
    match_index: Optional[int] = None
    validation_callback: Optional[LinkMatcherValidationCallback] = None
    hover_start_callback: Optional[LinkHoverStartCallback] = None
    hover_end_callback: Optional[LinkHoverEndCallback] = None
    priority: int = 0
    sequence: int = field(default=0, compare=False, repr=False)

    @property
    def is_hypertext(self) -> bool:
        return self.id == HYPERTEXT_LINK_MATCHER_ID


def _sort_key(matcher: LinkMatcher) -> tuple[int, int]:
    return -matcher.priority, matcher.sequence


class MatcherRegistry:
    """Matchers sorted by descending priority, older first within a priority tier."""

    def __init__(self) -> None:
        self._matchers: list[LinkMatcher] = []
        self._sequence = 0

    def __len__(self) -> int:
        return len(self._matchers)

    def __iter__(self) -> Iterator[LinkMatcher]:
        # Iterate a copy so handlers may deregister matchers mid-scan.
        return iter(list(self._matchers))

    def ids(self) -> list[int]:
        return [m.id for m in self._matchers]

    def get(self, matcher_id: int) -> LinkMatcher | None:
        for matcher in self._matchers:
            if matcher.id == matcher_id:
                return matcher
        return None

    def register(self, matcher: LinkMatcher) -> int:
        matcher.sequence = self._sequence
        self._sequence += 1
        bisect.insort(self._matchers, matcher, key=_sort_key)
        LOGGER.debug("Registered link matcher %d (priority %d)", matcher.id, matcher.priority)
        return matcher.id

    def deregister(self, matcher_id: int) -> bool:
        if matcher_id == HYPERTEXT_LINK_MATCHER_ID:
            return False
        for idx, matcher in enumerate(self._matchers):
            if matcher.id == matcher_id:
                del self._matchers[idx]
                LOGGER.debug("Deregistered link matcher %d", matcher_id)
                return True
        return False

    def reprioritize(self, matcher_id: int, priority: int) -> bool:
        """Move a matcher to a new priority tier, keeping its registration order."""
        matcher = self.get(matcher_id)
        if matcher is None:
            return False
        priority = int(priority)
        if matcher.priority == priority:
            return True
        self._matchers.remove(matcher)
        matcher.priority = priority
        bisect.insort(self._matchers, matcher, key=_sort_key)
        LOGGER.debug("Link matcher %d moved to priority %d", matcher_id, priority)
        return True
