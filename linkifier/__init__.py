"""Link detection for terminal viewports: matchers, debounced row scans, and mouse zones."""

from .core import (
    HYPERTEXT_LINK_MATCHER_ID,
    LinkMatcherError,
    LinkMatcherOptions,
    Linkifier,
    MouseZone,
)
from .settings_schema import NormalizedLinkifyConfig, default_linkify_settings

__all__ = [
    "HYPERTEXT_LINK_MATCHER_ID",
    "LinkMatcherError",
    "LinkMatcherOptions",
    "Linkifier",
    "MouseZone",
    "NormalizedLinkifyConfig",
    "default_linkify_settings",
]
