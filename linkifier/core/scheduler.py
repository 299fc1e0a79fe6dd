"""Qt-aware scan scheduler: debounces row-range requests and runs the scan."""

from __future__ import annotations

import logging
from typing import Any, Callable

from PySide6.QtCore import QObject, QTimer, Signal

from linkifier.core.matchers import LinkMatcher, MatcherRegistry
from linkifier.core.row_scanner import BufferAccessor, LinkOccurrence, RowScanner
from linkifier.core.validation import ValidationGate
from linkifier.core.zones import ZoneEmitter, ZoneSink

LOGGER = logging.getLogger(__name__)


class ScanScheduler(QObject):
    """Coalesces scan requests into one delayed pass over the latest row range.

    Every request and every executed scan bumps ``generation``; validation
    verdicts that arrive after the generation moved on are dropped.
    """

    scanFinished = Signal(int, int)  # start row, end row

    def __init__(
        self,
        buffer: BufferAccessor,
        registry: MatcherRegistry,
        open_external: Callable[[str], Any],
        *,
        debounce_ms: int = 200,
        hypertext_enabled: bool = True,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._registry = registry
        self._scanner = RowScanner(buffer)
        self._gate = ValidationGate(lambda: self._generation)
        self._open_external = open_external
        self._sink: ZoneSink | None = None
        self._emitter: ZoneEmitter | None = None

        self._debounce_ms = max(0, int(debounce_ms))
        self._hypertext_enabled = bool(hypertext_enabled)
        self._pending_range: tuple[int, int] | None = None
        self._generation = 0

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def debounce_ms(self) -> int:
        return self._debounce_ms

    @debounce_ms.setter
    def debounce_ms(self, value: int) -> None:
        self._debounce_ms = max(0, int(value))

    @property
    def hypertext_enabled(self) -> bool:
        return self._hypertext_enabled

    @hypertext_enabled.setter
    def hypertext_enabled(self, value: bool) -> None:
        self._hypertext_enabled = bool(value)

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_attached(self) -> bool:
        return self._sink is not None

    @property
    def is_pending(self) -> bool:
        return self._pending_range is not None

    def attach(self, sink: ZoneSink) -> None:
        self._sink = sink
        self._emitter = ZoneEmitter(sink, self._open_external)

    def request_scan(self, start: int, end: int) -> None:
        # Matchers may be registered before the surface exists.
        if self._sink is None:
            LOGGER.debug("Ignoring scan request %d..%d before attach", start, end)
            return

        self._sink.clear_all()
        self._timer.stop()
        self._generation += 1
        if self._pending_range is not None:
            LOGGER.debug("Scan request %d..%d supersedes %d..%d", start, end, *self._pending_range)
        self._pending_range = (int(start), int(end))
        self._timer.start(self._debounce_ms)

    def flush(self) -> bool:
        """Run the pending scan now instead of waiting for the timer."""
        if self._pending_range is None:
            return False
        self._timer.stop()
        self._on_timeout()
        return True

    def cancel(self) -> None:
        """Drop the pending scan and invalidate in-flight validations."""
        self._timer.stop()
        self._pending_range = None
        self._generation += 1

    def _on_timeout(self) -> None:
        scan_range = self._pending_range
        if scan_range is None:
            return
        self._pending_range = None
        self._generation += 1

        start, end = scan_range
        LOGGER.debug("Linkifying rows %d..%d (generation %d)", start, end, self._generation)
        for row_index in range(start, end + 1):
            self._scan_row(row_index)
        self.scanFinished.emit(start, end)

    def _scan_row(self, row_index: int) -> None:
        text = self._scanner.row_text(row_index)
        if text is None:
            return
        for matcher in self._registry:
            if matcher.is_hypertext and not self._hypertext_enabled:
                continue
            self._scan_matcher(row_index, text, matcher)

    def _scan_matcher(self, row_index: int, text: str, matcher: LinkMatcher) -> None:
        for occurrence in self._scanner.scan(row_index, text, matcher):
            self._gate.submit(occurrence, text, self._accept)

    def _accept(self, occurrence: LinkOccurrence) -> None:
        if self._emitter is None:
            return
        self._emitter.emit(occurrence)
