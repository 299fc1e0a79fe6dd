"""The Linkifier turns matching row text into clickable zones shortly after the rows change."""

from __future__ import annotations

import re
from typing import Any, Callable, Mapping

from PySide6.QtCore import QObject

from linkifier.core.matchers import (
    HYPERTEXT_LINK_MATCHER_ID,
    LinkMatcher,
    LinkMatcherError,
    LinkMatcherHandler,
    LinkMatcherOptions,
    LinkMatcherValidationCallback,
    MatcherRegistry,
    coerce_options,
    compile_pattern,
)
from linkifier.core.row_scanner import BufferAccessor
from linkifier.core.scheduler import ScanScheduler
from linkifier.core.url_pattern import STRICT_URL_MATCH_INDEX, STRICT_URL_REGEX
from linkifier.core.zones import ZoneSink
from linkifier.settings_schema import NormalizedLinkifyConfig, default_linkify_settings


class Linkifier(QObject):
    def __init__(
        self,
        buffer: BufferAccessor,
        *,
        open_external: Callable[[str], Any],
        settings: Any = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._cfg = NormalizedLinkifyConfig.from_mapping(settings if settings is not None else default_linkify_settings())
        self._registry = MatcherRegistry()
        self._next_matcher_id = HYPERTEXT_LINK_MATCHER_ID
        self._scheduler = ScanScheduler(
            buffer,
            self._registry,
            open_external,
            debounce_ms=self._cfg.debounce_ms,
            hypertext_enabled=self._cfg.hypertext_enabled,
            parent=self,
        )
        self.register_link_matcher(
            STRICT_URL_REGEX,
            None,
            LinkMatcherOptions(match_index=STRICT_URL_MATCH_INDEX, priority=self._cfg.hypertext_priority),
        )

    @property
    def scheduler(self) -> ScanScheduler:
        return self._scheduler

    @property
    def config(self) -> NormalizedLinkifyConfig:
        return self._cfg

    @property
    def matchers(self) -> tuple[LinkMatcher, ...]:
        """Registered matchers in the order they are tried."""
        return tuple(self._registry)

    @property
    def is_attached(self) -> bool:
        return self._scheduler.is_attached

    def update_settings(self, settings: Any) -> None:
        self._cfg = NormalizedLinkifyConfig.from_mapping(settings)
        self._scheduler.debounce_ms = self._cfg.debounce_ms
        self._scheduler.hypertext_enabled = self._cfg.hypertext_enabled
        self._registry.reprioritize(HYPERTEXT_LINK_MATCHER_ID, self._cfg.hypertext_priority)

    def attach(self, zone_manager: ZoneSink) -> None:
        """Enable linkification; zones are registered with ``zone_manager``."""
        self._scheduler.attach(zone_manager)

    attach_to_zone_manager = attach

    def linkify_rows(self, start: int, end: int) -> None:
        """Queue linkification of viewport rows ``start`` through ``end`` (inclusive)."""
        self._scheduler.request_scan(start, end)

    def flush(self) -> bool:
        return self._scheduler.flush()

    def cancel(self) -> None:
        self._scheduler.cancel()

    def set_hypertext_link_handler(self, handler: LinkMatcherHandler | None) -> None:
        """Override the default open-externally action for http(s) links; None restores it."""
        self._hypertext_matcher().handler = handler

    def set_hypertext_validation_callback(self, callback: LinkMatcherValidationCallback | None) -> None:
        self._hypertext_matcher().validation_callback = callback

    def register_link_matcher(
        self,
        regex: re.Pattern | str,
        handler: LinkMatcherHandler | None,
        options: LinkMatcherOptions | Mapping[str, Any] | None = None,
    ) -> int:
        """Register a custom link pattern.

        ``regex`` is searched against each row's plain text. ``handler`` is
        called as ``handler(event, uri)`` when the link is clicked. Returns the
        matcher id to pass to :meth:`deregister_link_matcher`.
        """
        if self._next_matcher_id != HYPERTEXT_LINK_MATCHER_ID and handler is None:
            raise LinkMatcherError("handler must be defined")
        opts = coerce_options(options)
        pattern = compile_pattern(regex)
        if opts.match_index is not None and not 0 <= opts.match_index <= pattern.groups:
            raise LinkMatcherError(
                f"match_index {opts.match_index} is out of range for a pattern with {pattern.groups} group(s)"
            )
        matcher = LinkMatcher(
            id=self._next_matcher_id,
            regex=pattern,
            handler=handler,
            match_index=opts.match_index,
            validation_callback=opts.validation_callback,
            hover_start_callback=opts.hover_start_callback,
            hover_end_callback=opts.hover_end_callback,
            priority=int(opts.priority or 0),
        )
        self._next_matcher_id += 1
        return self._registry.register(matcher)

    def deregister_link_matcher(self, matcher_id: int) -> bool:
        return self._registry.deregister(matcher_id)

    def _hypertext_matcher(self) -> LinkMatcher:
        matcher = self._registry.get(HYPERTEXT_LINK_MATCHER_ID)
        if matcher is None:
            raise RuntimeError("built-in hypertext matcher is missing from the registry")
        return matcher
