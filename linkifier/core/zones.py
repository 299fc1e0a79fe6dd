from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol

from linkifier.core.row_scanner import LinkOccurrence


@dataclass(frozen=True, slots=True)
class MouseZone:
    """Clickable cell span. ``x1``/``y`` are 1-based; ``x2`` is exclusive."""

    x1: int
    x2: int
    y: int
    click_callback: Callable[[Any], Any]
    hover_callback: Callable[[Any], Any]
    leave_callback: Callable[[], Any]

    def contains(self, col: int, row: int) -> bool:
        return row == self.y and self.x1 <= col < self.x2


class ZoneSink(Protocol):
    def clear_all(self) -> None: ...

    def add(self, zone: MouseZone) -> None: ...


class ZoneEmitter:
    def __init__(self, sink: ZoneSink, open_external: Callable[[str], Any]) -> None:
        self._sink = sink
        self._open_external = open_external

    def emit(self, occurrence: LinkOccurrence) -> MouseZone:
        zone = self.build_zone(occurrence)
        self._sink.add(zone)
        return zone

    def build_zone(self, occurrence: LinkOccurrence) -> MouseZone:
        matcher = occurrence.matcher
        uri = occurrence.text
        open_external = self._open_external

        # Handlers are looked up on each event so in-place replacements apply
        # to zones that are already registered.
        def on_click(event: Any) -> Any:
            if matcher.handler is not None:
                return matcher.handler(event, uri)
            return open_external(uri)

        def on_hover(event: Any) -> None:
            if matcher.hover_start_callback is not None:
                matcher.hover_start_callback(event, uri)

        def on_leave() -> None:
            if matcher.hover_end_callback is not None:
                matcher.hover_end_callback()

        x1 = occurrence.column + 1
        return MouseZone(
            x1=x1,
            x2=x1 + len(uri),
            y=occurrence.row + 1,
            click_callback=on_click,
            hover_callback=on_hover,
            leave_callback=on_leave,
        )
