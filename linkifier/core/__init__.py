from .linkifier import Linkifier
from .matchers import (
    HYPERTEXT_LINK_MATCHER_ID,
    LinkMatcher,
    LinkMatcherError,
    LinkMatcherOptions,
    MatcherRegistry,
)
from .row_scanner import BufferAccessor, LinkOccurrence, RowScanner, find_links
from .scheduler import ScanScheduler
from .validation import ValidationGate
from .zones import MouseZone, ZoneEmitter, ZoneSink

__all__ = [
    "BufferAccessor",
    "HYPERTEXT_LINK_MATCHER_ID",
    "LinkMatcher",
    "LinkMatcherError",
    "LinkMatcherOptions",
    "LinkOccurrence",
    "Linkifier",
    "MatcherRegistry",
    "MouseZone",
    "RowScanner",
    "ScanScheduler",
    "ValidationGate",
    "ZoneEmitter",
    "ZoneSink",
    "find_links",
]
